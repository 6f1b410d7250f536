"""Calculation error taxonomy.

Engine functions raise these; the API, dashboard, CLI and catalogue recover
from them at the point of computation and show the message instead of a result.
"""


class CalculationError(ValueError):
    """Base class for every user-recoverable calculation failure."""

    message = "Calculation error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self.args[0])


class MissingInputError(CalculationError):
    """A required input is empty or not a number. Shown as an empty state."""

    message = "Enter your details to see results"


class DomainError(CalculationError):
    """An input is outside the range the formula supports."""

    message = "Input out of range"


class NumericError(CalculationError):
    """Division by zero, NaN or an infinite result."""

    message = "Calculation error"


class DoesNotAmortizeError(DomainError):
    """The payment never outpaces interest, so the balance is never repaid."""

    message = "Payment does not cover interest; the balance never pays off"
