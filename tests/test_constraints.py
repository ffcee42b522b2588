import pytest

from lottogen.constraints import Constraint, Mode, resolve, mode_for
from lottogen.errors import ConstraintError


def test_unconstrained():
    res = resolve(Mode.UNCONSTRAINED)
    assert res.fixed == ()
    assert res.candidates == tuple(range(1, 46))
    assert res.need == 6


def test_include_fixes_numbers_and_shrinks_need():
    res = resolve(Mode.INCLUDE, Constraint(include={7, 3}))
    assert res.fixed == (3, 7)
    assert 3 not in res.candidates and 7 not in res.candidates
    assert len(res.candidates) == 43
    assert res.need == 4


def test_exclude_removes_candidates():
    res = resolve(Mode.EXCLUDE, Constraint(exclude={1, 45}))
    assert res.fixed == ()
    assert len(res.candidates) == 43
    assert res.need == 6


def test_include_exclude():
    res = resolve(Mode.INCLUDE_EXCLUDE, Constraint(include={1, 2}, exclude={3, 4, 5}))
    assert res.fixed == (1, 2)
    assert set(res.candidates) == set(range(6, 46))
    assert res.need == 4


def test_mode_only_reads_its_own_sets():
    res = resolve(Mode.EXCLUDE, Constraint(include={1}, exclude={2}))
    assert res.fixed == ()
    assert 1 in res.candidates


@pytest.mark.parametrize("mode,constraint,rule", [
    (Mode.INCLUDE, Constraint(include=set(range(1, 8))), "too_many_include"),
    (Mode.INCLUDE, Constraint(include={0, 5}), "out_of_range"),
    (Mode.INCLUDE, Constraint(include={46}), "out_of_range"),
    (Mode.EXCLUDE, Constraint(exclude=set(range(1, 41))), "too_many_exclude"),
    (Mode.EXCLUDE, Constraint(exclude={-3}), "out_of_range"),
    (Mode.INCLUDE_EXCLUDE, Constraint(include={1, 2}, exclude={2, 3}), "overlap"),
    (Mode.INCLUDE_EXCLUDE, Constraint(include=set(range(1, 8)), exclude={40}), "too_many_include"),
    (Mode.INCLUDE_EXCLUDE, Constraint(include={1}, exclude=set(range(2, 42))), "too_many_exclude"),
    (Mode.INCLUDE_EXCLUDE, Constraint(include={1}, exclude={50}), "out_of_range"),
])
def test_violations_name_the_rule(mode, constraint, rule):
    with pytest.raises(ConstraintError) as exc:
        resolve(mode, constraint)
    assert exc.value.rule == rule
    assert str(exc.value)


def test_overlap_message_lists_the_numbers():
    with pytest.raises(ConstraintError, match=r"\[2\]"):
        resolve(Mode.INCLUDE_EXCLUDE, Constraint(include={1, 2}, exclude={2}))


def test_limits_are_inclusive():
    assert resolve(Mode.INCLUDE, Constraint(include=set(range(1, 7)))).need == 0
    assert len(resolve(Mode.EXCLUDE, Constraint(exclude=set(range(7, 46)))).candidates) == 6


def test_mode_for():
    assert mode_for() is Mode.UNCONSTRAINED
    assert mode_for([1]) is Mode.INCLUDE
    assert mode_for([], [1]) is Mode.EXCLUDE
    assert mode_for([1], [2]) is Mode.INCLUDE_EXCLUDE
