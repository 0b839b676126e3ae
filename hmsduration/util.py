"""Clock arithmetic constants shared by the duration modules."""

from typing import Literal, TypeAlias

# Seconds per clock unit
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# Clock fields, in display order
Field: TypeAlias = Literal["hours", "minutes", "seconds"]
FIELDS: tuple[Field, ...] = ("hours", "minutes", "seconds")

# Exclusive upper bound for minutes and seconds
CLOCK_LIMIT = 60
