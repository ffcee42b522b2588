from .constants import MAIN_MIN, MAIN_MAX, PICK_MAIN, DEFAULT_GAMES
from .constraints import Constraint, resolve
from .sampler import weighted_sample_no_replace


class LottoGame:
    """One ticket: PICK_MAIN distinct numbers, kept in ascending order."""

    def __init__(self, numbers):
        given = list(numbers)
        nums = sorted(set(given))
        if len(nums) != len(given) or len(nums) != PICK_MAIN:
            raise ValueError(f"a game needs {PICK_MAIN} distinct numbers, got {given}")
        if nums[0] < MAIN_MIN or nums[-1] > MAIN_MAX:
            raise ValueError(f"numbers must be in {MAIN_MIN}..{MAIN_MAX}: {nums}")
        self.numbers = tuple(nums)

    def __str__(self):
        return "[" + ", ".join(str(n) for n in self.numbers) + "]"

    def __repr__(self):
        return f"LottoGame({list(self.numbers)})"


def generate_game(table, mode, constraint=None, rng=None) -> LottoGame:
    res = resolve(mode, constraint or Constraint())
    weights = table.weights(res.candidates)
    drawn = weighted_sample_no_replace(res.candidates, weights, res.need, rng)
    return LottoGame(set(res.fixed) | drawn)


def generate_games(table, mode, constraint=None, count=DEFAULT_GAMES, rng=None):
    """Generate ``count`` independent games; ``table`` is only read."""
    constraint = constraint or Constraint()
    # fail on bad constraints before the first draw
    resolve(mode, constraint)
    return [generate_game(table, mode, constraint, rng) for _ in range(count)]


def save_games(games, path):
    with open(path, "w", encoding="utf-8") as f:
        for game in games:
            f.write(f"{game}\n")
