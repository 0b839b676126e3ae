"""Render durations as clock strings.

The picker widgets show durations like ``01:30:00`` or, with unit suffixes,
``01h:30m:00s``. Fields can be left out individually; separators only appear
between the fields that are included.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields

from hmsduration.duration import Duration, is_valid
from hmsduration.errors import InvalidDurationError
from hmsduration.util import FIELDS


@dataclass(frozen=True, kw_only=True)
class Include:
    """Which fields of a duration to render."""

    hours: bool = True
    minutes: bool = True
    seconds: bool = True


@dataclass(frozen=True, kw_only=True)
class Units:
    """Suffix appended after each rendered field, e.g. ``"h"``."""

    hours: str = ""
    minutes: str = ""
    seconds: str = ""


def _coerce_include(include: "Include | Mapping[str, bool]") -> Include:
    if isinstance(include, Include):
        return include
    _check_keys(include, "include")
    # Missing keys mean "leave this field out"
    return Include(**{name: bool(include.get(name, False)) for name in FIELDS})


def _coerce_units(units: "Units | Mapping[str, str]") -> Units:
    if isinstance(units, Units):
        return units
    _check_keys(units, "units")
    # None behaves like a missing key
    return Units(
        **{
            name: "" if units.get(name) is None else str(units[name])
            for name in FIELDS
        }
    )


def _check_keys(options: Mapping[str, object], name: str) -> None:
    unknown = set(options) - set(FIELDS)
    if unknown:
        raise TypeError(
            f"Unknown {name} keys: {sorted(unknown)}.\n"
            f"Valid keys: {', '.join(FIELDS)}"
        )


def _describe(options: Include | Units) -> str:
    inner = ", ".join(f"{f.name}: {getattr(options, f.name)!r}" for f in fields(options))
    return f"{{{inner}}}"


def _pad(value: int) -> str:
    return f"0{value}" if value < 10 else str(value)


def to_string(
    duration: Duration,
    include: "Include | Mapping[str, bool] | None" = None,
    units: "Units | Mapping[str, str] | None" = None,
) -> str:
    """Transform a duration into its string representation.

    Adds a leading zero to one-digit values. Can output only part of the
    duration, e.g. just hours and minutes, and can append units like ``"h"``,
    ``"m"`` and ``"s"`` after each field.

    Args:
        duration: Duration to render
        include: Which fields to render (all by default). A mapping with
                 missing keys leaves those fields out.
        units: Suffix for each field (none by default)

    Raises:
        InvalidDurationError: If ``duration`` is invalid, even when nothing
            would be rendered

    Example:
        >>> to_string(Duration(hours=10, minutes=22, seconds=35))
        '10:22:35'
        >>> to_string(
        ...     Duration(hours=10, minutes=22, seconds=35),
        ...     include={"hours": True, "seconds": True},
        ... )
        '10:35'
    """
    include = Include() if include is None else _coerce_include(include)
    units = Units() if units is None else _coerce_units(units)

    if not is_valid(duration):
        raise InvalidDurationError(
            "to_string",
            [
                ("duration", repr(duration)),
                ("include", _describe(include)),
                ("units", _describe(units)),
            ],
            duration,
        )

    parts = [
        _pad(getattr(duration, name)) + getattr(units, name)
        for name in FIELDS
        if getattr(include, name)
    ]
    return ":".join(parts)
