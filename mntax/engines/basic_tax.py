"""Basic tax engine.

Looks up the bracket that covers an income for a filing status and applies
that bracket's linear formula:

    basic_tax = base_tax + rate * (income - lower_bound)

Brackets are scanned in table order and the first one containing the income
wins, so an income sitting exactly on a shared boundary is taxed by the lower
bracket. An income that no bracket covers yields a basic tax of 0 (logged as a
data-integrity warning) unless ``strict`` is requested.
"""

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from itertools import pairwise
from types import MappingProxyType

from mntax.engines.brackets import BASIC_TAX_BRACKETS, CONTINUITY_TOLERANCE, BracketRow
from mntax.exceptions import DataValidationError, NoMatchingBracketError, UnknownFilingStatusError
from mntax.models.brackets import BasicTaxResult, BracketIssue, TaxBracket
from mntax.models.enums import FilingStatus, IssueSeverity

logger = logging.getLogger(__name__)

Income = Decimal | int | float | str
StatusLike = FilingStatus | str


def to_income(value: Income) -> Decimal:
    """Convert an income value to Decimal, rejecting non-numeric and non-finite input."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise DataValidationError("income", f"expected a number, got {type(value).__name__}")
    try:
        # str() first so floats keep their shortest repr instead of binary noise
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        # ValueError: ints beyond the interpreter's int-to-str digit limit
        raise DataValidationError("income", f"not a number: {_preview(value)}") from None
    if not amount.is_finite():
        raise DataValidationError("income", f"must be finite, got {value!r}")
    return amount


def _preview(value: Income) -> str:
    if isinstance(value, int):
        return f"integer of {value.bit_length()} bits"
    return repr(value)


def _first_match(brackets: Iterable[TaxBracket], amount: Decimal) -> TaxBracket | None:
    for bracket in brackets:
        if bracket.contains(amount):
            return bracket
    return None


class BracketTable:
    """Immutable per-status basic tax brackets.

    Brackets are grouped by their ``status`` and kept in the order given;
    lookups rely on that order.
    """

    def __init__(self, brackets: Iterable[TaxBracket]) -> None:
        grouped: dict[FilingStatus, list[TaxBracket]] = {}
        for bracket in brackets:
            grouped.setdefault(bracket.status, []).append(bracket)
        self._brackets: Mapping[FilingStatus, tuple[TaxBracket, ...]] = MappingProxyType(
            {status: tuple(rows) for status, rows in grouped.items()}
        )

    @classmethod
    def from_rows(cls, rows: Mapping[FilingStatus, Iterable[BracketRow]]) -> "BracketTable":
        """Build a table from (base_tax, rate, lower_bound, upper_bound) tuples."""
        return cls(
            TaxBracket(
                status=status,
                base_tax=base_tax,
                rate=rate,
                lower_bound=lower,
                upper_bound=upper,
            )
            for status, status_rows in rows.items()
            for base_tax, rate, lower, upper in status_rows
        )

    def __repr__(self) -> str:
        counts = ", ".join(f"{s.name}={len(b)}" for s, b in self._brackets.items())
        return f"BracketTable({counts})"

    @property
    def statuses(self) -> tuple[FilingStatus, ...]:
        return tuple(self._brackets)

    def brackets_for(self, status: StatusLike) -> tuple[TaxBracket, ...]:
        filing_status = FilingStatus.from_value(status)
        try:
            return self._brackets[filing_status]
        except KeyError:
            raise UnknownFilingStatusError(status) from None

    def find_bracket(self, status: StatusLike, income: Income) -> TaxBracket | None:
        """Return the first bracket containing the income, or None."""
        return _first_match(self.brackets_for(status), to_income(income))

    def evaluate(
        self, status: StatusLike, income: Income, strict: bool = False
    ) -> BasicTaxResult:
        """Compute the basic tax and report which bracket produced it."""
        filing_status = FilingStatus.from_value(status)
        amount = to_income(income)
        bracket = _first_match(self.brackets_for(filing_status), amount)

        if bracket is None:
            if strict:
                raise NoMatchingBracketError(filing_status, amount)
            logger.warning(
                "No %s bracket covers income %s; basic tax defaults to 0. "
                "The bracket table may have a gap.",
                filing_status.name,
                amount,
            )
            return BasicTaxResult(
                status=filing_status, income=amount, bracket=None, basic_tax=Decimal("0")
            )

        logger.debug(
            "%s income %s -> bracket [%s, %s] base=%s rate=%s",
            filing_status.name,
            amount,
            bracket.lower_bound,
            bracket.upper_bound if bracket.upper_bound is not None else "inf",
            bracket.base_tax,
            bracket.rate,
        )
        return BasicTaxResult(
            status=filing_status,
            income=amount,
            bracket=bracket,
            basic_tax=bracket.tax_for(amount),
        )

    def basic_tax(self, status: StatusLike, income: Income, strict: bool = False) -> Decimal:
        return self.evaluate(status, income, strict=strict).basic_tax

    def validate(self) -> list[BracketIssue]:
        """Check every status for coverage of [0, inf) and continuity.

        Gaps, overlaps, a first bracket not starting at 0 and a missing or
        misplaced unbounded bracket are errors. A bracket whose base tax does
        not equal the previous bracket's tax at the shared boundary is a
        warning.
        """
        issues: list[BracketIssue] = []
        for status, brackets in self._brackets.items():
            issues.extend(_check_brackets(status, brackets))
        return issues

    @property
    def is_valid(self) -> bool:
        return not any(issue.severity == IssueSeverity.ERROR for issue in self.validate())

    def to_dict(self) -> dict[str, list[dict]]:
        """JSON-ready form, readable by ``load_bracket_table``."""
        return {
            status.value: [
                bracket.model_dump(mode="json", exclude={"status"}) for bracket in brackets
            ]
            for status, brackets in self._brackets.items()
        }


def _check_brackets(
    status: FilingStatus, brackets: tuple[TaxBracket, ...]
) -> list[BracketIssue]:
    issues: list[BracketIssue] = []

    def error(message: str) -> None:
        issues.append(BracketIssue(status=status, severity=IssueSeverity.ERROR, message=message))

    first, last = brackets[0], brackets[-1]
    if first.lower_bound != 0:
        error(f"first bracket starts at {first.lower_bound}, not 0")

    for prev, cur in pairwise(brackets):
        if prev.upper_bound is None:
            error(f"unbounded bracket starting at {prev.lower_bound} is not the last bracket")
            continue
        if cur.lower_bound > prev.upper_bound:
            error(f"gap between {prev.upper_bound} and {cur.lower_bound}")
            continue
        if cur.lower_bound < prev.upper_bound:
            error(f"bracket starting at {cur.lower_bound} overlaps bracket ending at {prev.upper_bound}")
            continue

        expected = prev.tax_for(prev.upper_bound)
        if abs(cur.base_tax - expected) > CONTINUITY_TOLERANCE:
            issues.append(BracketIssue(
                status=status,
                severity=IssueSeverity.WARNING,
                message=(
                    f"base tax {cur.base_tax} at {cur.lower_bound} differs from "
                    f"{expected} owed at the top of the previous bracket"
                ),
            ))

    if last.upper_bound is not None:
        error(f"top bracket ends at {last.upper_bound}; higher incomes match no bracket")

    return issues


BASIC_TAX_TABLE = BracketTable.from_rows(BASIC_TAX_BRACKETS)


def compute_basic_tax(
    filing_status_text: StatusLike,
    income: Income,
    table: BracketTable = BASIC_TAX_TABLE,
    strict: bool = False,
) -> float:
    """Calculate the taxpayer's basic tax from filing status and income.

    ``filing_status_text`` is free-form ("married filing jointly", "MFJ",
    "head_of_household", ...). Raises ``UnknownFilingStatusError`` when it
    names no known status. Returns 0.0 when no bracket covers the income,
    or raises ``NoMatchingBracketError`` if ``strict`` is set.
    """
    return float(table.basic_tax(filing_status_text, income, strict=strict))
