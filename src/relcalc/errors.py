"""
Failure taxonomy for flight calculations.

Calculations never raise for bad inputs or extreme physics. They return an
Outcome that carries either a value or a CalcError, and the caller decides
how to report each kind. The kinds are deliberately distinct:

- INVALID_INPUT: an input violates a precondition (client error)
- PHYSICALLY_INVALID: inputs are in range but describe a degenerate or
  self-contradictory scenario
- OVERFLOW: a transcendental evaluation left double precision
- NOT_FOUND: a by-name lookup did not resolve to a star

All failures are deterministic functions of the input, so retrying with
the same input reproduces the same failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    PHYSICALLY_INVALID = "physically_invalid"
    OVERFLOW = "overflow"
    NOT_FOUND = "not_found"

    @property
    def exit_code(self) -> int:
        """Process exit code reported by the scripts for this kind."""
        return _EXIT_CODES[self]


_EXIT_CODES = {
    ErrorKind.INVALID_INPUT: 2,
    ErrorKind.PHYSICALLY_INVALID: 3,
    ErrorKind.OVERFLOW: 4,
    ErrorKind.NOT_FOUND: 5,
}


@dataclass(frozen=True)
class CalcError:
    kind: ErrorKind
    message: str

    def __str__(self):
        return f"{self.kind.value}: {self.message}"


class CalculationError(Exception):
    """Raised by Outcome.unwrap() for callers that prefer exceptions."""

    def __init__(self, error: CalcError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class Outcome:
    """
    Result of a calculation: exactly one of `value` or `error` is set.

    Use `ok` to branch, or `unwrap()` to get the value and raise
    CalculationError otherwise.
    """

    value: Any = None
    error: Optional[CalcError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error")

    @classmethod
    def success(cls, value: Any) -> 'Outcome':
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> 'Outcome':
        return cls(error=CalcError(kind, message))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Any:
        if self.error is not None:
            raise CalculationError(self.error)
        return self.value
