"""Tests for the Duration value type, validation, equality and cloning."""

import pytest

from hmsduration import (
    Duration,
    DurationOperationError,
    InvalidDurationError,
    clone,
    equals,
    find_invalid,
    is_valid,
    with_fields,
)


def test_negative_hours_are_invalid() -> None:
    assert not is_valid(Duration(hours=-1, minutes=0, seconds=0))


def test_seconds_too_large_are_invalid() -> None:
    assert not is_valid(Duration(hours=1, minutes=5, seconds=62))


def test_minutes_too_large_are_invalid() -> None:
    assert not is_valid(Duration(hours=1, minutes=62, seconds=5))
    assert not is_valid(Duration(minutes=60))


def test_negative_minutes_and_seconds_are_invalid() -> None:
    assert not is_valid(Duration(minutes=-1))
    assert not is_valid(Duration(seconds=-1))


def test_valid_duration() -> None:
    assert is_valid(Duration(hours=0, minutes=5, seconds=59))


def test_hours_are_unbounded() -> None:
    assert is_valid(Duration(hours=10**9, minutes=59, seconds=59))


def test_non_integer_fields_are_invalid_without_raising() -> None:
    assert not is_valid(Duration(hours=1.5))  # type: ignore[arg-type]
    assert not is_valid(Duration(minutes="5"))  # type: ignore[arg-type]
    assert not is_valid(Duration(seconds=None))  # type: ignore[arg-type]
    assert not is_valid(Duration(hours=True))


def test_find_invalid_returns_first_offender() -> None:
    bad_a = Duration(seconds=61)
    bad_b = Duration(minutes=-3)

    assert find_invalid([Duration(), bad_a, bad_b]) is bad_a
    assert find_invalid([Duration(), Duration(hours=3)]) is None
    assert find_invalid([]) is None


def test_construction_does_not_validate() -> None:
    duration = Duration(minutes=75)

    assert duration.minutes == 75


def test_equals_both_zero() -> None:
    assert equals(Duration(), Duration())


def test_equals_one_zero() -> None:
    assert not equals(Duration(), Duration(hours=7, minutes=23, seconds=30))


def test_equals_same_values() -> None:
    assert equals(
        Duration(hours=7, minutes=23, seconds=30),
        Duration(hours=7, minutes=23, seconds=30),
    )


def test_equals_different_seconds() -> None:
    assert not equals(
        Duration(hours=7, minutes=23, seconds=29),
        Duration(hours=7, minutes=23, seconds=30),
    )


def test_equals_rejects_invalid_instead_of_returning_false() -> None:
    invalid = Duration(seconds=61)

    with pytest.raises(InvalidDurationError) as info:
        equals(invalid, Duration(hours=7, minutes=23, seconds=30))
    assert info.value.duration is invalid
    assert info.value.operation == "equals"

    with pytest.raises(DurationOperationError):
        equals(Duration(), invalid)


def test_clone_is_equal_but_distinct() -> None:
    duration = Duration(hours=7, minutes=23, seconds=30)

    cloned = clone(duration)

    assert cloned is not duration
    assert cloned == duration
    assert equals(cloned, duration)


def test_clone_rejects_invalid() -> None:
    with pytest.raises(DurationOperationError, match='Operation "clone" failed'):
        clone(Duration(seconds=61))


def test_durations_are_immutable() -> None:
    duration = Duration(hours=1)

    with pytest.raises(AttributeError):
        duration.hours = 2  # type: ignore[misc]


def test_with_fields_replaces_single_column() -> None:
    duration = Duration(hours=1, minutes=30, seconds=15)

    updated = with_fields(duration, minutes=45)

    assert updated == Duration(hours=1, minutes=45, seconds=15)
    assert duration == Duration(hours=1, minutes=30, seconds=15)


def test_with_fields_without_changes_copies() -> None:
    duration = Duration(hours=2)

    assert with_fields(duration) == duration


def test_with_fields_rejects_invalid_result() -> None:
    with pytest.raises(InvalidDurationError, match="Result .* is invalid") as info:
        with_fields(Duration(hours=1), seconds=60)
    assert info.value.duration == Duration(hours=1, seconds=60)


def test_with_fields_rejects_invalid_input() -> None:
    with pytest.raises(InvalidDurationError):
        with_fields(Duration(minutes=60), minutes=0)


def test_str_renders_clock_for_valid_and_repr_for_invalid() -> None:
    assert str(Duration(hours=1, minutes=2, seconds=3)) == "01:02:03"
    assert str(Duration(seconds=61)) == "Duration(hours=0, minutes=0, seconds=61)"


def test_add_operator() -> None:
    duration = Duration(hours=3, minutes=5, seconds=11)

    assert duration + 605 == Duration(hours=3, minutes=15, seconds=16)
    assert duration + Duration(minutes=54, seconds=49) == Duration(hours=4)


def test_sub_operator() -> None:
    duration = Duration(hours=3, minutes=5, seconds=11)

    assert duration - 605 == Duration(hours=2, minutes=55, seconds=6)
    assert duration - Duration(hours=3) == Duration(minutes=5, seconds=11)


def test_operators_reject_other_types() -> None:
    with pytest.raises(TypeError, match="Cannot add 'str' to a Duration"):
        Duration() + "5"  # type: ignore[operator]

    with pytest.raises(TypeError, match="Cannot subtract 'float' from a Duration"):
        Duration(hours=1) - 1.5  # type: ignore[operator]
