import random


def rand_int(lo: int, hi: int, rng=None) -> int:
    """Returns an integer drawn uniformly from the closed interval [lo, hi]."""
    if lo > hi:
        raise ValueError(f"rand_int needs lo <= hi, got {lo} > {hi}")
    source = rng if rng is not None else random
    return source.randint(lo, hi)
