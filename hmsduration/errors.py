"""Errors raised by duration operations.

Every domain-rule violation surfaces as a ``DurationOperationError``. The
subclasses tell the failures apart for callers that care; everyone else can
catch the base class (or ``ValueError``) and be done.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hmsduration.duration import Duration

VALID_CONSTRAINT = (
    "Duration has to be positive and minutes and seconds have to be smaller than 60."
)


class DurationOperationError(ValueError):
    """A duration operation was called with input it cannot handle.

    Attributes:
        operation: Name of the function that failed
        inputs: ``(name, rendered value)`` pairs describing the arguments
        reason: The constraint that was violated
    """

    def __init__(
        self,
        operation: str,
        inputs: Iterable[tuple[str, str]],
        reason: str,
    ):
        self.operation: str = operation
        self.inputs: tuple[tuple[str, str], ...] = tuple(inputs)
        self.reason: str = reason
        super().__init__(self._compose())

    def _compose(self) -> str:
        rendered = ", ".join(f"{{{name}: {value}}}" for name, value in self.inputs)
        return f'Operation "{self.operation}" failed for input [{rendered}]: {self.reason}'


class InvalidDurationError(DurationOperationError):
    """A duration argument has negative fields or minutes/seconds >= 60."""

    def __init__(
        self,
        operation: str,
        inputs: Iterable[tuple[str, str]],
        duration: "Duration",
        reason: str = VALID_CONSTRAINT,
    ):
        self.duration: "Duration" = duration
        super().__init__(operation, inputs, reason)


class NegativeSecondsError(DurationOperationError):
    """A scalar second count was negative."""


class UnderflowError(DurationOperationError):
    """A subtraction would have produced a negative duration."""
