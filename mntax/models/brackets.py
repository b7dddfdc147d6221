"""Tax bracket and basic tax result models."""

from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mntax.models.enums import FilingStatus, IssueSeverity

UNBOUNDED_SENTINEL = Decimal("-1")


class TaxBracket(BaseModel):
    """One income band of the basic tax table for a single filing status.

    The lower bound is inclusive. The upper bound is inclusive too, or
    ``None`` for the open-ended top bracket.
    """

    model_config = ConfigDict(frozen=True)

    status: FilingStatus
    base_tax: Decimal = Field(ge=0)
    rate: Decimal = Field(ge=0, lt=1)
    lower_bound: Decimal = Field(ge=0)
    upper_bound: Decimal | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: object) -> FilingStatus:
        return FilingStatus.from_value(value)

    @field_validator("upper_bound", mode="before")
    @classmethod
    def _sentinel_to_none(cls, value: object) -> object:
        if value is None:
            return None
        # -1 is the conventional "no upper limit" marker in published tables
        try:
            is_sentinel = Decimal(str(value)) == UNBOUNDED_SENTINEL
        except InvalidOperation:
            return value  # left for the Decimal field to reject
        return None if is_sentinel else value

    @model_validator(mode="after")
    def _check_bounds(self) -> "TaxBracket":
        if self.upper_bound is not None and self.upper_bound <= self.lower_bound:
            raise ValueError(
                f"upper_bound {self.upper_bound} must exceed lower_bound {self.lower_bound}"
            )
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    def contains(self, income: Decimal) -> bool:
        if income < self.lower_bound:
            return False
        return self.upper_bound is None or income <= self.upper_bound

    def tax_for(self, income: Decimal) -> Decimal:
        """base_tax + rate * (income - lower_bound)"""
        return self.base_tax + self.rate * (income - self.lower_bound)


class BasicTaxResult(BaseModel):
    status: FilingStatus
    income: Decimal
    bracket: TaxBracket | None
    basic_tax: Decimal

    @property
    def matched(self) -> bool:
        return self.bracket is not None


class BracketIssue(BaseModel):
    """A problem found while validating a bracket table."""

    status: FilingStatus
    severity: IssueSeverity
    message: str
