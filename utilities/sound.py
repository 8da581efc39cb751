import base64
import io
import itertools
import wave

import numpy as np
import streamlit as st
import streamlit.components.v1 as components

from arcade.sound import Sound, SoundUnavailable

SAMPLE_RATE = 22050
VOLUME = 0.5
CUE_KEY = "_sound_cue"

# (frequency Hz, duration s) notes played back to back
TONES = {
    Sound.CLICK: [(880, 0.04)],
    Sound.SUCCESS: [(660, 0.08), (880, 0.08), (1320, 0.14)],
    Sound.ERROR: [(220, 0.12), (165, 0.18)],
}

_nonce = itertools.count(1)


@st.cache_data(show_spinner=False)
def tone_wav(kind: str) -> bytes:
    """Synthesises the cue as 16-bit mono WAV bytes."""
    chunks = []
    for freq, seconds in TONES[Sound(kind)]:
        t = np.arange(int(SAMPLE_RATE * seconds)) / SAMPLE_RATE
        note = np.sin(2 * np.pi * freq * t)
        # 5 ms fade in/out, avoids clicks at note boundaries
        fade = min(len(note) // 2, int(SAMPLE_RATE * 0.005))
        if fade:
            ramp = np.linspace(0.0, 1.0, fade)
            note[:fade] *= ramp
            note[-fade:] *= ramp[::-1]
        chunks.append(note)
    samples = (np.concatenate(chunks) * 32767 * 0.8).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(SAMPLE_RATE)
        w.writeframes(samples.tobytes())
    return buf.getvalue()


def tone_data_uri(kind: str) -> str:
    return "data:audio/wav;base64," + base64.b64encode(tone_wav(kind)).decode("ascii")


class StreamlitSoundSink:
    """Records the latest cue in session state; `render_sound_cue` plays it on the next render."""

    def __call__(self, kind: Sound):
        if kind not in TONES:
            raise SoundUnavailable(f"no tone for {kind}")
        st.session_state[CUE_KEY] = {"kind": kind.value, "nonce": next(_nonce), "rendered": False}


def render_sound_cue() -> bool:
    """
    Plays the pending cue once and returns whether anything was emitted.
    The Audio objects live on the parent page so the cue outlives the iframe.
    """
    cue = st.session_state.get(CUE_KEY)
    if not cue or cue["rendered"]:
        return False
    cue["rendered"] = True
    kind, nonce = cue["kind"], cue["nonce"]

    components.html(
        f"""
        <script>
        // cue {nonce}
        (function () {{
            let host = window;
            try {{ host = window.parent; host.document; }} catch (e) {{ host = window; }}
            host.__arcadeSounds = host.__arcadeSounds || {{}};
            let audio = host.__arcadeSounds["{kind}"];
            if (!audio) {{
                audio = new host.Audio("{tone_data_uri(kind)}");
                audio.volume = {VOLUME};
                host.__arcadeSounds["{kind}"] = audio;
            }}
            audio.currentTime = 0;
            audio.play().catch(() => {{}});
        }})();
        </script>
        """,
        height=0,
    )
    return True
