"""mntax: Minnesota basic tax calculator."""

from mntax.engines.basic_tax import BASIC_TAX_TABLE, BracketTable, compute_basic_tax
from mntax.exceptions import NoMatchingBracketError, UnknownFilingStatusError
from mntax.models.enums import FilingStatus

__version__ = "0.1.0"

__all__ = [
    "BASIC_TAX_TABLE",
    "BracketTable",
    "FilingStatus",
    "NoMatchingBracketError",
    "UnknownFilingStatusError",
    "compute_basic_tax",
]
