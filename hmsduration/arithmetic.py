"""Carry/borrow arithmetic on durations.

Every operation goes through a scalar second count: validate, convert with
:func:`~hmsduration.convert.to_seconds`, compute, convert back. Results are
new ``Duration`` instances; nothing is clamped.
"""

import logging
from collections.abc import Sequence
from functools import reduce

from hmsduration.convert import _require_count, from_seconds, to_seconds
from hmsduration.duration import Duration, find_invalid, is_valid
from hmsduration.errors import (
    VALID_CONSTRAINT,
    DurationOperationError,
    InvalidDurationError,
    NegativeSecondsError,
    UnderflowError,
)
from hmsduration.formatting import to_string

logger = logging.getLogger(__name__)


def _render_all(durations: Sequence[Duration], valid: bool) -> str:
    render = to_string if valid else repr
    return f"[{', '.join(render(duration) for duration in durations)}]"


def _check_operands(operation: str, durations: Sequence[Duration]) -> None:
    if not durations:
        raise DurationOperationError(
            operation,
            [],
            f"At least one duration is required.\n"
            f"Example: {operation}(d1, d2, d3)",
        )

    invalid = find_invalid(durations)
    if invalid is not None:
        raise InvalidDurationError(
            operation,
            [("durations", _render_all(durations, valid=False))],
            invalid,
            f"Duration {invalid!r} is invalid. {VALID_CONSTRAINT}",
        )


def plus_seconds(duration: Duration, seconds: int) -> Duration:
    """Add a non-negative number of seconds to a duration.

    Example:
        >>> plus_seconds(Duration(hours=3, minutes=5, seconds=11), 605)
        Duration(hours=3, minutes=15, seconds=16)
    """
    if not is_valid(duration):
        raise InvalidDurationError(
            "plus_seconds",
            [("duration", repr(duration)), ("seconds", str(seconds))],
            duration,
        )
    _require_count(seconds, "seconds")
    if seconds < 0:
        raise NegativeSecondsError(
            "plus_seconds",
            [("duration", to_string(duration)), ("seconds", str(seconds))],
            "Negative seconds are invalid. Use 'minus_seconds' to subtract seconds.",
        )

    return from_seconds(to_seconds(duration) + seconds)


def minus_seconds(duration: Duration, seconds: int) -> Duration:
    """Subtract a non-negative number of seconds from a duration.

    A duration cannot be negative, so taking away more seconds than the
    duration holds raises ``UnderflowError`` instead of returning zero.
    """
    if not is_valid(duration):
        raise InvalidDurationError(
            "minus_seconds",
            [("duration", repr(duration)), ("seconds", str(seconds))],
            duration,
        )
    _require_count(seconds, "seconds")
    if seconds < 0:
        raise NegativeSecondsError(
            "minus_seconds",
            [("duration", to_string(duration)), ("seconds", str(seconds))],
            "Negative seconds are invalid. Use 'plus_seconds' to add seconds.",
        )

    total = to_seconds(duration)
    if total < seconds:
        raise UnderflowError(
            "minus_seconds",
            [("duration", to_string(duration)), ("seconds", str(seconds))],
            "Seconds are larger than duration, but a duration cannot be negative.",
        )

    return from_seconds(total - seconds)


def durations_sum(*durations: Duration) -> Duration:
    """Sum up all provided durations.

    The first duration seeds the total; there is no implicit zero, so at
    least one duration is required.

    Example:
        >>> durations_sum(
        ...     Duration(hours=1, seconds=59), Duration(hours=7, minutes=23, seconds=30)
        ... )
        Duration(hours=8, minutes=24, seconds=29)
    """
    _check_operands("durations_sum", durations)

    def reducer(total: Duration, nxt: Duration) -> Duration:
        return plus_seconds(total, to_seconds(nxt))

    return reduce(reducer, durations)


def durations_difference(*durations: Duration) -> Duration:
    """Subtract all other provided durations from the first one.

    If the running total would drop below zero at any point, the whole call
    fails with an ``UnderflowError`` that lists every argument. The step
    that failed is chained as ``__cause__``.
    """
    _check_operands("durations_difference", durations)

    def reducer(total: Duration, nxt: Duration) -> Duration:
        return minus_seconds(total, to_seconds(nxt))

    try:
        return reduce(reducer, durations)
    except UnderflowError as error:
        logger.debug("Difference of %d durations underflowed: %s", len(durations), error)
        raise UnderflowError(
            "durations_difference",
            [("durations", _render_all(durations, valid=True))],
            "Subtracting all durations would lead to a negative duration, "
            "which is invalid.",
        ) from error
