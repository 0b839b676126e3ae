"""Conversion between durations and scalar second counts.

Also bridges to the two duration types most callers already have lying
around: ``datetime.timedelta`` and python-dateutil's ``relativedelta``.
"""

import logging
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from hmsduration.duration import Duration, is_valid
from hmsduration.errors import (
    DurationOperationError,
    InvalidDurationError,
    NegativeSecondsError,
)
from hmsduration.util import DAY, HOUR, MINUTE

logger = logging.getLogger(__name__)

# relativedelta components that describe calendar positions, not spans of time
_CALENDAR_FIELDS = (
    "years",
    "months",
    "leapdays",
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def _require_count(value: object, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            f"{name} must be an int (whole seconds).\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )


def to_seconds(duration: Duration) -> int:
    """Convert a valid duration into its total number of seconds."""
    if not is_valid(duration):
        raise InvalidDurationError(
            "to_seconds", [("duration", repr(duration))], duration
        )

    return duration.hours * HOUR + duration.minutes * MINUTE + duration.seconds


def from_seconds(seconds: int) -> Duration:
    """Convert a non-negative number of seconds into a duration.

    The result is always valid: minutes and seconds carry into the next
    larger field, hours absorb everything else.

    Example:
        >>> from_seconds(26610)
        Duration(hours=7, minutes=23, seconds=30)
    """
    _require_count(seconds, "seconds")
    if seconds < 0:
        raise NegativeSecondsError(
            "from_seconds",
            [("seconds", str(seconds))],
            "Seconds have to be greater or equal to 0",
        )

    return Duration(
        hours=seconds // HOUR,
        minutes=(seconds % HOUR) // MINUTE,
        seconds=seconds % MINUTE,
    )


def to_timedelta(duration: Duration) -> timedelta:
    """Convert a valid duration into a ``datetime.timedelta``."""
    return timedelta(seconds=to_seconds(duration))


def from_timedelta(delta: timedelta) -> Duration:
    """Convert a non-negative timedelta into a duration.

    Sub-second parts are dropped, since the clock has no field for them.
    """
    if delta < timedelta(0):
        raise NegativeSecondsError(
            "from_timedelta",
            [("delta", repr(delta))],
            "Timedelta has to be greater or equal to 0",
        )

    return from_seconds(delta.days * DAY + delta.seconds)


def to_relativedelta(duration: Duration) -> relativedelta:
    """Convert a valid duration into a dateutil ``relativedelta``.

    relativedelta carries hours past 23 into ``days``; :func:`from_relativedelta`
    folds them back.
    """
    if not is_valid(duration):
        raise InvalidDurationError(
            "to_relativedelta", [("duration", repr(duration))], duration
        )

    return relativedelta(
        hours=duration.hours, minutes=duration.minutes, seconds=duration.seconds
    )


def from_relativedelta(delta: relativedelta) -> Duration:
    """Convert a relativedelta made of days, hours, minutes and seconds.

    Years, months and absolute fields (``day=``, ``weekday=``, ...) depend on
    a calendar position and have no fixed length in seconds, so they are
    rejected. Sub-second parts are truncated toward zero after the sign check.
    """
    calendar = [
        name
        for name in _CALENDAR_FIELDS
        if getattr(delta, name, None) not in (None, 0)
    ]
    if calendar:
        logger.debug(
            "Rejecting relativedelta with calendar components %s", calendar
        )
        raise DurationOperationError(
            "from_relativedelta",
            [("delta", repr(delta))],
            f"Calendar components {', '.join(calendar)} have no fixed length "
            f"in seconds.",
        )

    total = delta.days * DAY + delta.hours * HOUR + delta.minutes * MINUTE
    total += delta.seconds + delta.microseconds / 1_000_000
    if total < 0:
        raise NegativeSecondsError(
            "from_relativedelta",
            [("delta", repr(delta))],
            "Relativedelta has to be greater or equal to 0",
        )

    return from_seconds(int(total))
