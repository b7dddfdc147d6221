"""Custom exceptions for mntax."""

from decimal import Decimal


class TaxComputationError(Exception):
    """Base exception for basic tax computation errors."""


class UnknownFilingStatusError(TaxComputationError, ValueError):
    """Raised when a filing status string does not map to a known status."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown filing status: {value!r}")


class NoMatchingBracketError(TaxComputationError):
    """Raised in strict mode when no bracket covers the income."""

    def __init__(self, status: str, income: Decimal):
        self.status = status
        self.income = income
        super().__init__(f"No tax bracket for {status} matches income {income}")


class DataValidationError(TaxComputationError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class BracketDataError(TaxComputationError):
    """Raised when a bracket data file cannot be loaded."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Bracket data error in {source}: {message}")
