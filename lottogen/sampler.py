import numpy as np

from .errors import SamplingError


def weighted_sample_no_replace(candidates, weights, need, rng=None):
    """Draw ``need`` distinct items from ``candidates`` with integer weights.

    Each round picks r uniformly in [0, sum(weights)) and takes the first
    candidate whose running weight sum exceeds r, then drops it from the pool.
    The total is recomputed every round from whatever is left.
    """
    items = list(candidates)
    w = [int(x) for x in weights]
    if len(items) != len(w):
        raise SamplingError(f"{len(items)} candidates but {len(w)} weights")
    if len(set(items)) != len(items):
        raise SamplingError("candidates must be distinct")
    if any(x < 1 for x in w):
        raise SamplingError("weights must be positive integers")
    if need < 0:
        raise SamplingError(f"cannot draw a negative count ({need})")
    if need > len(items):
        raise SamplingError(f"cannot draw {need} numbers from {len(items)} candidates")
    if rng is None:
        rng = np.random.default_rng()

    picked = set()
    for _ in range(need):
        cum = np.cumsum(w)
        r = int(rng.integers(0, cum[-1]))
        i = int(np.searchsorted(cum, r, side="right"))
        picked.add(items.pop(i))
        w.pop(i)
    return picked
