"""Data models for mntax."""

from mntax.models.brackets import BasicTaxResult, BracketIssue, TaxBracket
from mntax.models.enums import FilingStatus, IssueSeverity

__all__ = [
    "BasicTaxResult",
    "BracketIssue",
    "FilingStatus",
    "IssueSeverity",
    "TaxBracket",
]
