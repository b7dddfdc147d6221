"""Shared test fixtures for mntax."""

import json
from decimal import Decimal
from pathlib import Path

import pytest

from mntax.engines.basic_tax import BASIC_TAX_TABLE, BracketTable
from mntax.models.brackets import TaxBracket
from mntax.models.enums import FilingStatus


@pytest.fixture
def table() -> BracketTable:
    return BASIC_TAX_TABLE


@pytest.fixture
def gapped_table() -> BracketTable:
    """SINGLE table with nothing covering incomes between 1000 and 2000."""
    return BracketTable([
        TaxBracket(
            status=FilingStatus.SINGLE,
            base_tax=Decimal("0"),
            rate=Decimal("0.10"),
            lower_bound=Decimal("0"),
            upper_bound=Decimal("1000"),
        ),
        TaxBracket(
            status=FilingStatus.SINGLE,
            base_tax=Decimal("100"),
            rate=Decimal("0.20"),
            lower_bound=Decimal("2000"),
            upper_bound=None,
        ),
    ])


@pytest.fixture
def flat_brackets_data() -> dict:
    """A two-bracket SINGLE table in the JSON file layout."""
    return {
        "single": [
            {"base_tax": "0", "rate": "0.05", "lower_bound": 0, "upper_bound": 10000},
            {"base_tax": "500", "rate": "0.10", "lower_bound": 10000, "upper_bound": -1},
        ],
    }


@pytest.fixture
def flat_brackets_file(tmp_path: Path, flat_brackets_data: dict) -> Path:
    path = tmp_path / "brackets.json"
    path.write_text(json.dumps(flat_brackets_data))
    return path


@pytest.fixture
def gapped_brackets_file(tmp_path: Path, gapped_table: BracketTable) -> Path:
    path = tmp_path / "gapped.json"
    path.write_text(json.dumps(gapped_table.to_dict()))
    return path
