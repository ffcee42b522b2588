from dataclasses import dataclass, field
from enum import Enum

from .constants import ALL_MAIN, MAIN_MIN, MAIN_MAX, PICK_MAIN, MAX_EXCLUDE
from .errors import ConstraintError


class Mode(Enum):
    UNCONSTRAINED = "unconstrained"
    INCLUDE = "include"
    EXCLUDE = "exclude"
    INCLUDE_EXCLUDE = "include_exclude"


@dataclass(frozen=True)
class Constraint:
    include: frozenset = field(default_factory=frozenset)
    exclude: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "include", frozenset(self.include))
        object.__setattr__(self, "exclude", frozenset(self.exclude))


@dataclass(frozen=True)
class Resolution:
    fixed: tuple       # numbers already in every game
    candidates: tuple  # pool the sampler draws from
    need: int          # how many more numbers to draw


def mode_for(include=(), exclude=()) -> Mode:
    if include and exclude:
        return Mode.INCLUDE_EXCLUDE
    if include:
        return Mode.INCLUDE
    if exclude:
        return Mode.EXCLUDE
    return Mode.UNCONSTRAINED


# ----------------------
# Validation rules
# ----------------------
def _check_include_count(include):
    if len(include) > PICK_MAIN:
        raise ConstraintError(
            "too_many_include",
            f"At most {PICK_MAIN} numbers can be included (got {len(include)}).")


def _check_exclude_count(exclude):
    if len(exclude) > MAX_EXCLUDE:
        raise ConstraintError(
            "too_many_exclude",
            f"At most {MAX_EXCLUDE} numbers can be excluded (got {len(exclude)}).")


def _check_range(numbers):
    bad = sorted(n for n in numbers if n < MAIN_MIN or n > MAIN_MAX)
    if bad:
        raise ConstraintError(
            "out_of_range",
            f"Numbers must be between {MAIN_MIN} and {MAIN_MAX}: {bad}")


def _check_disjoint(include, exclude):
    both = sorted(include & exclude)
    if both:
        raise ConstraintError(
            "overlap",
            f"Numbers cannot be both included and excluded: {both}")


def resolve(mode: Mode, constraint: Constraint = None) -> Resolution:
    """Turn a mode plus include/exclude sets into (fixed, candidates, need).

    Only the sets relevant to ``mode`` are looked at; e.g. EXCLUDE ignores
    ``constraint.include``. Raises ConstraintError before any sampling.
    """
    if constraint is None:
        constraint = Constraint()
    include, exclude = constraint.include, constraint.exclude

    if mode is Mode.UNCONSTRAINED:
        return Resolution((), tuple(ALL_MAIN), PICK_MAIN)

    if mode is Mode.INCLUDE:
        _check_include_count(include)
        _check_range(include)
        fixed = tuple(sorted(include))
        pool = tuple(n for n in ALL_MAIN if n not in include)
        return Resolution(fixed, pool, PICK_MAIN - len(fixed))

    if mode is Mode.EXCLUDE:
        _check_exclude_count(exclude)
        _check_range(exclude)
        pool = tuple(n for n in ALL_MAIN if n not in exclude)
        return Resolution((), pool, PICK_MAIN)

    if mode is Mode.INCLUDE_EXCLUDE:
        _check_disjoint(include, exclude)
        _check_include_count(include)
        _check_exclude_count(exclude)
        _check_range(include | exclude)
        fixed = tuple(sorted(include))
        pool = tuple(n for n in ALL_MAIN if n not in include and n not in exclude)
        return Resolution(fixed, pool, PICK_MAIN - len(fixed))

    raise ValueError(f"unknown mode: {mode!r}")
