from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from typing_extensions import override

from hmsduration.errors import VALID_CONSTRAINT, InvalidDurationError
from hmsduration.util import CLOCK_LIMIT


@dataclass(frozen=True, kw_only=True)
class Duration:
    """Clock-style span of time: hours, minutes and seconds.

    Construction does not validate, so a literal like
    ``Duration(minutes=75)`` can exist. Every operation in this package
    rejects such values instead of normalizing them; check with
    :func:`is_valid`.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @override
    def __str__(self) -> str:
        """Clock string (``HH:MM:SS``) for valid durations, repr otherwise."""
        if not is_valid(self):
            return repr(self)

        from hmsduration.formatting import to_string

        return to_string(self)

    def __add__(self, other: "Duration | int") -> "Duration":
        from hmsduration.arithmetic import durations_sum, plus_seconds

        if isinstance(other, Duration):
            return durations_sum(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return plus_seconds(self, other)
        raise TypeError(
            f"Cannot add {type(other).__name__!r} to a Duration.\n"
            f"Hint: Use duration + Duration(...) to sum durations\n"
            f"      Use duration + 90 to add seconds"
        )

    def __sub__(self, other: "Duration | int") -> "Duration":
        from hmsduration.arithmetic import durations_difference, minus_seconds

        if isinstance(other, Duration):
            return durations_difference(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return minus_seconds(self, other)
        raise TypeError(
            f"Cannot subtract {type(other).__name__!r} from a Duration.\n"
            f"Hint: Use duration - Duration(...) to take the difference\n"
            f"      Use duration - 90 to subtract seconds"
        )


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid(duration: Duration) -> bool:
    """Check if a duration is considered valid.

    A duration is valid if all fields are non-negative integers and minutes
    and seconds are smaller than 60. Hours are unbounded.
    """
    hours = getattr(duration, "hours", None)
    minutes = getattr(duration, "minutes", None)
    seconds = getattr(duration, "seconds", None)
    if not (_is_count(hours) and _is_count(minutes) and _is_count(seconds)):
        return False
    return hours >= 0 and 0 <= minutes < CLOCK_LIMIT and 0 <= seconds < CLOCK_LIMIT


def find_invalid(durations: Iterable[Duration]) -> Duration | None:
    """Return the first invalid duration, or None if all are valid."""
    for duration in durations:
        if not is_valid(duration):
            return duration
    return None


def equals(d1: Duration, d2: Duration) -> bool:
    """Compare two valid durations field by field."""
    invalid = find_invalid((d1, d2))
    if invalid is not None:
        raise InvalidDurationError(
            "equals",
            [("d1", repr(d1)), ("d2", repr(d2))],
            invalid,
            f"Duration {invalid!r} is invalid. {VALID_CONSTRAINT}",
        )

    return (
        d1.hours == d2.hours and d1.minutes == d2.minutes and d1.seconds == d2.seconds
    )


def clone(duration: Duration) -> Duration:
    """Copy a valid duration into a new instance with the same values."""
    if not is_valid(duration):
        raise InvalidDurationError(
            "clone", [("duration", repr(duration))], duration
        )

    return Duration(
        hours=duration.hours, minutes=duration.minutes, seconds=duration.seconds
    )


def with_fields(
    duration: Duration,
    *,
    hours: int | None = None,
    minutes: int | None = None,
    seconds: int | None = None,
) -> Duration:
    """Return a copy of ``duration`` with some fields replaced.

    This is the update a picker wheel performs when the user scrolls a single
    column. Both the input and the result must be valid.

    Example:
        >>> with_fields(Duration(hours=1, minutes=30), minutes=45)
        Duration(hours=1, minutes=45, seconds=0)
    """
    changes = {
        name: value
        for name, value in (("hours", hours), ("minutes", minutes), ("seconds", seconds))
        if value is not None
    }
    inputs = [("duration", repr(duration))] + [
        (name, repr(value)) for name, value in changes.items()
    ]

    if not is_valid(duration):
        raise InvalidDurationError("with_fields", inputs, duration)

    result = replace(duration, **changes)
    if not is_valid(result):
        raise InvalidDurationError(
            "with_fields",
            inputs,
            result,
            f"Result {result!r} is invalid. {VALID_CONSTRAINT}",
        )
    return result
