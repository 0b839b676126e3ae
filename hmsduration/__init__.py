import logging
from importlib.resources import files

from .arithmetic import durations_difference, durations_sum, minus_seconds, plus_seconds
from .convert import (
    from_relativedelta,
    from_seconds,
    from_timedelta,
    to_relativedelta,
    to_seconds,
    to_timedelta,
)
from .duration import Duration, clone, equals, find_invalid, is_valid, with_fields
from .errors import (
    DurationOperationError,
    InvalidDurationError,
    NegativeSecondsError,
    UnderflowError,
)
from .formatting import Include, Units, to_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Duration",
    "Include",
    "Units",
    "is_valid",
    "find_invalid",
    "to_seconds",
    "from_seconds",
    "to_timedelta",
    "from_timedelta",
    "to_relativedelta",
    "from_relativedelta",
    "plus_seconds",
    "minus_seconds",
    "durations_sum",
    "durations_difference",
    "equals",
    "clone",
    "with_fields",
    "to_string",
    "DurationOperationError",
    "InvalidDurationError",
    "NegativeSecondsError",
    "UnderflowError",
    "docs",
]
