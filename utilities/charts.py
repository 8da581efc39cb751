import pandas as pd
import plotly.express as px

ACCENT = '#128264'


def reaction_history_chart(history):
    """Line chart of this session's successful reaction times, or None when there are none."""
    if not history:
        return None
    df = pd.DataFrame({"attempt": range(1, len(history) + 1), "ms": list(history)})
    fig = px.line(df, x="attempt", y="ms", markers=True,
                  labels={"attempt": "Attempt", "ms": "Reaction time (ms)"})
    fig.update_traces(line_color=ACCENT)
    fig.add_hline(y=df["ms"].min(), line_dash="dot", annotation_text="best")
    fig.update_layout(height=260, margin=dict(l=10, r=10, t=30, b=10))
    return fig


def round_scores_chart(rounds):
    """Bar chart of finished whack-a-mole rounds, or None before the first round ends."""
    if not rounds:
        return None
    df = pd.DataFrame({"round": range(1, len(rounds) + 1), "score": list(rounds)})
    fig = px.bar(df, x="round", y="score", labels={"round": "Round", "score": "Hits"})
    fig.update_traces(marker_color=ACCENT)
    fig.update_layout(height=260, margin=dict(l=10, r=10, t=30, b=10))
    return fig
