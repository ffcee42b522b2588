import numpy as np

from .constants import MAIN_MIN, MAIN_MAX, HISTORY_FIELDS


class FrequencyTable:
    """Occurrence count for every number in MAIN_MIN..MAIN_MAX.

    Counts live in a frozen numpy array indexed by ``n - 1``. Build one with
    :func:`load_frequencies` (or :meth:`from_draws`) and hand it to whoever
    needs it; it never changes after construction.
    """

    def __init__(self, counts=None):
        arr = np.zeros(MAIN_MAX, dtype=np.int64)
        if counts is not None:
            src = np.asarray(counts, dtype=np.int64)
            if src.shape != arr.shape:
                raise ValueError(f"expected {MAIN_MAX} counts, got {src.shape}")
            if (src < 0).any():
                raise ValueError("frequency counts must be non-negative")
            arr[:] = src
        arr.setflags(write=False)
        self._counts = arr

    @classmethod
    def from_draws(cls, draws):
        counts = np.zeros(MAIN_MAX, dtype=np.int64)
        for draw in draws:
            for n in draw:
                _check_number(n)
                counts[n - 1] += 1
        return cls(counts)

    @property
    def counts(self):
        return self._counts

    def count(self, n: int) -> int:
        _check_number(n)
        return int(self._counts[n - 1])

    def max_count(self) -> int:
        return int(self._counts.max())

    def weight(self, n: int) -> int:
        # rarer numbers weigh more; the most frequent weighs exactly 1
        return self.max_count() - self.count(n) + 1

    def weights(self, candidates):
        return [self.weight(n) for n in candidates]

    def items(self):
        return [(n, int(self._counts[n - 1])) for n in range(MAIN_MIN, MAIN_MAX + 1)]

    def __eq__(self, other):
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return bool(np.array_equal(self._counts, other._counts))

    def __repr__(self):
        return f"FrequencyTable(total={int(self._counts.sum())}, max={self.max_count()})"


def _check_number(n):
    if not (MAIN_MIN <= n <= MAIN_MAX):
        raise KeyError(n)


def parse_history_line(line):
    """Return the 7 numbers of a history line, or None if the line is malformed."""
    parts = line.split(",")
    if len(parts) != HISTORY_FIELDS:
        return None
    try:
        nums = [int(p.strip()) for p in parts]
    except ValueError:
        return None
    if any(n < MAIN_MIN or n > MAIN_MAX for n in nums):
        return None
    return nums


def load_frequencies(path) -> FrequencyTable:
    """Count every number seen in the history file at ``path``.

    A missing or unreadable file is not fatal: a warning is printed and an
    all-zero table comes back, so generation still works (uniformly).
    """
    draws = []
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            for line in f:
                nums = parse_history_line(line)
                if nums is not None:
                    draws.append(nums)
    except FileNotFoundError:
        print(f"[WARN] History file not found: {path} (all frequencies are 0)")
        return FrequencyTable()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[WARN] Could not read history file {path}: {e} (all frequencies are 0)")
        return FrequencyTable()
    return FrequencyTable.from_draws(draws)
