"""Basic tax computation engines."""

from mntax.engines.basic_tax import BASIC_TAX_TABLE, BracketTable, compute_basic_tax
from mntax.engines.loader import dump_bracket_table, load_bracket_table

__all__ = [
    "BASIC_TAX_TABLE",
    "BracketTable",
    "compute_basic_tax",
    "dump_bracket_table",
    "load_bracket_table",
]
