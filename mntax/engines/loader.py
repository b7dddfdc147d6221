"""Load and save basic tax bracket tables as JSON.

File layout, keyed by filing status (any spelling ``FilingStatus.from_value``
accepts):

    {
      "SINGLE": [
        {"base_tax": "0", "rate": "0.0535", "lower_bound": "0", "upper_bound": "24680"},
        ...
        {"base_tax": "10906.19", "rate": "0.0985", "lower_bound": "152540", "upper_bound": null}
      ],
      ...
    }

``upper_bound`` may also be -1 for the top bracket.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from mntax.engines.basic_tax import BracketTable
from mntax.exceptions import BracketDataError, UnknownFilingStatusError
from mntax.models.brackets import TaxBracket
from mntax.models.enums import FilingStatus

logger = logging.getLogger(__name__)


def load_bracket_table(path: Path) -> BracketTable:
    """Read a bracket table from a JSON file."""
    source = str(path)
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise BracketDataError(source, "file not found") from None
    except json.JSONDecodeError as exc:
        raise BracketDataError(source, f"invalid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise BracketDataError(source, str(exc)) from exc

    table = parse_bracket_table(data, source)
    logger.debug("Loaded %r from %s", table, source)
    return table


def parse_bracket_table(data: object, source: str = "<data>") -> BracketTable:
    """Build a bracket table from already-decoded JSON data."""
    if not isinstance(data, dict) or not data:
        raise BracketDataError(source, "expected a non-empty object keyed by filing status")

    brackets: list[TaxBracket] = []
    seen: set[FilingStatus] = set()
    for key, rows in data.items():
        try:
            status = FilingStatus.from_value(key)
        except UnknownFilingStatusError as exc:
            raise BracketDataError(source, str(exc)) from exc
        if status in seen:
            raise BracketDataError(source, f"duplicate status {status.name} (key {key!r})")
        seen.add(status)
        if not isinstance(rows, list) or not rows:
            raise BracketDataError(source, f"{key}: expected a non-empty list of brackets")

        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                raise BracketDataError(source, f"{key}[{index}]: expected an object")
            try:
                brackets.append(TaxBracket(**{**row, "status": status}))
            except ValidationError as exc:
                raise BracketDataError(source, f"{key}[{index}]: {exc}") from exc

    return BracketTable(brackets)


def dump_bracket_table(table: BracketTable, path: Path) -> None:
    """Write a bracket table as JSON, in the format ``load_bracket_table`` reads."""
    Path(path).write_text(json.dumps(table.to_dict(), indent=2) + "\n", encoding="utf-8")
