"""Tests for filing status parsing."""

import pytest

from mntax.exceptions import TaxComputationError, UnknownFilingStatusError
from mntax.models.enums import FilingStatus


class TestFromValue:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("married filing jointly", FilingStatus.MFJ),
            ("MARRIED_FILING_JOINTLY", FilingStatus.MFJ),
            ("Married-Filing-Jointly", FilingStatus.MFJ),
            ("  married   filing_jointly ", FilingStatus.MFJ),
            ("married filing separately", FilingStatus.MFS),
            ("single", FilingStatus.SINGLE),
            ("Single", FilingStatus.SINGLE),
            ("head of household", FilingStatus.HOH),
            ("head_of_household", FilingStatus.HOH),
        ],
    )
    def test_normalizes_case_and_separators(self, text, expected):
        assert FilingStatus.from_value(text) is expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("mfj", FilingStatus.MFJ),
            ("MFS", FilingStatus.MFS),
            ("hoh", FilingStatus.HOH),
        ],
    )
    def test_short_codes(self, text, expected):
        assert FilingStatus.from_value(text) is expected

    def test_historical_filling_spelling(self):
        assert FilingStatus.from_value("married filling jointly") is FilingStatus.MFJ
        assert FilingStatus.from_value("MARRIED_FILLING_SEPARATELY") is FilingStatus.MFS

    def test_passes_through_enum_member(self):
        assert FilingStatus.from_value(FilingStatus.HOH) is FilingStatus.HOH

    @pytest.mark.parametrize("text", ["not_a_status", "", "   ", "married", "widow"])
    def test_unknown_text_raises(self, text):
        with pytest.raises(UnknownFilingStatusError) as exc_info:
            FilingStatus.from_value(text)
        assert exc_info.value.value == text

    @pytest.mark.parametrize("value", [None, 1, ["single"]])
    def test_non_string_raises(self, value):
        with pytest.raises(UnknownFilingStatusError):
            FilingStatus.from_value(value)

    def test_error_hierarchy(self):
        with pytest.raises(TaxComputationError):
            FilingStatus.from_value("bogus")
        with pytest.raises(ValueError):
            FilingStatus.from_value("bogus")


class TestFilingStatus:
    def test_four_statuses(self):
        assert len(FilingStatus) == 4

    def test_values(self):
        assert FilingStatus.MFJ == "MARRIED_FILING_JOINTLY"
        assert FilingStatus.MFS == "MARRIED_FILING_SEPARATELY"
        assert FilingStatus.SINGLE == "SINGLE"
        assert FilingStatus.HOH == "HEAD_OF_HOUSEHOLD"
