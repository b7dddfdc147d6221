"""Enumerations for mntax."""

import re
from enum import StrEnum

from mntax.exceptions import UnknownFilingStatusError

_SEPARATORS = re.compile(r"[\s_\-]+")


class FilingStatus(StrEnum):
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    SINGLE = "SINGLE"
    HOH = "HEAD_OF_HOUSEHOLD"

    @classmethod
    def from_value(cls, value: object) -> "FilingStatus":
        """Parse a filing status from free-form text.

        Case is ignored and spaces, hyphens and underscores are treated alike,
        so "married filing jointly", "Married-Filing-Jointly" and "MFJ" all
        resolve to ``FilingStatus.MFJ``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownFilingStatusError(value)
        key = _SEPARATORS.sub("_", value.strip()).strip("_").upper()
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnknownFilingStatusError(value) from None


class IssueSeverity(StrEnum):
    WARNING = "WARNING"
    ERROR = "ERROR"


_ALIASES: dict[str, FilingStatus] = {status.value: status for status in FilingStatus}
_ALIASES.update({status.name: status for status in FilingStatus})
# Older Minnesota tables spell it "filling"
_ALIASES.update({
    "MARRIED_FILLING_JOINTLY": FilingStatus.MFJ,
    "MARRIED_FILLING_SEPARATELY": FilingStatus.MFS,
})
