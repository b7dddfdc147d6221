"""Basic tax bracket configuration.

Minnesota individual income tax brackets keyed by filing status. Each entry is
(base_tax, rate, lower_bound, upper_bound); the upper bound is None for the
top bracket. Never hardcode brackets in computation functions.

Basic tax for an income in a bracket:
    base_tax + rate * (income - lower_bound)

Source:
  - Minnesota Department of Revenue, Individual Income Tax Algorithm (2014),
    http://www.revenue.state.mn.us/Forms_and_Instructions/it_algorithm_14.pdf

Values are kept exactly as published in the original table, including the
base amounts that do not line up with the preceding bracket; run
``mntax check`` to list them.
"""

from decimal import Decimal

from mntax.models.enums import FilingStatus

BracketRow = tuple[Decimal, Decimal, Decimal, Decimal | None]

BASIC_TAX_BRACKETS: dict[FilingStatus, list[BracketRow]] = {
    FilingStatus.MFJ: [
        (Decimal("0"), Decimal("0.0535"), Decimal("0"), Decimal("36080")),
        (Decimal("1930.28"), Decimal("0.0705"), Decimal("36080"), Decimal("90000")),
        (Decimal("5731.64"), Decimal("0.0705"), Decimal("90000"), Decimal("143350")),
        (Decimal("9492.82"), Decimal("0.0785"), Decimal("143350"), Decimal("254240")),
        (Decimal("18197.69"), Decimal("0.0985"), Decimal("254240"), None),
    ],
    FilingStatus.MFS: [
        (Decimal("0"), Decimal("0.0535"), Decimal("0"), Decimal("18040")),
        (Decimal("695.14"), Decimal("0.0705"), Decimal("18040"), Decimal("71680")),
        (Decimal("4746.76"), Decimal("0.0785"), Decimal("71680"), Decimal("90000")),
        (Decimal("6164.88"), Decimal("0.0785"), Decimal("90000"), Decimal("127120")),
        (Decimal("9098.80"), Decimal("0.0985"), Decimal("127120"), None),
    ],
    FilingStatus.SINGLE: [
        (Decimal("0"), Decimal("0.0535"), Decimal("0"), Decimal("24680")),
        (Decimal("1320.38"), Decimal("0.0705"), Decimal("24680"), Decimal("81080")),
        (Decimal("5296.58"), Decimal("0.0785"), Decimal("81080"), Decimal("90000")),
        (Decimal("59996.80"), Decimal("0.0785"), Decimal("90000"), Decimal("152540")),
        (Decimal("10906.19"), Decimal("0.0985"), Decimal("152540"), None),
    ],
    FilingStatus.HOH: [
        (Decimal("0"), Decimal("0.0535"), Decimal("0"), Decimal("30390")),
        (Decimal("1625.87"), Decimal("0.0705"), Decimal("30390"), Decimal("90000")),
        (Decimal("5828.38"), Decimal("0.0705"), Decimal("90000"), Decimal("122110")),
        (Decimal("8092.13"), Decimal("0.0785"), Decimal("122110"), Decimal("203390")),
        (Decimal("14472.61"), Decimal("0.0985"), Decimal("203390"), None),
    ],
}

# Tolerance when comparing a bracket's base_tax with the previous bracket's
# formula at the shared boundary (published bases are rounded to cents).
CONTINUITY_TOLERANCE = Decimal("0.01")
