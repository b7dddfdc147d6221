"""Typer CLI interface for mntax."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mntax.engines.basic_tax import BASIC_TAX_TABLE, BracketTable
from mntax.engines.loader import dump_bracket_table, load_bracket_table
from mntax.exceptions import (
    BracketDataError,
    DataValidationError,
    NoMatchingBracketError,
    UnknownFilingStatusError,
)
from mntax.models.enums import FilingStatus, IssueSeverity

app = typer.Typer(
    name="mntax",
    help="mntax: Minnesota basic tax calculator.",
)

BRACKETS_FILE_OPTION = typer.Option(
    None,
    "--brackets-file",
    "-b",
    envvar="MNTAX_BRACKETS_FILE",
    help="JSON bracket table to use instead of the built-in one",
)

VALID_STATUSES = "SINGLE, MFJ, MFS, HOH"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """mntax: Minnesota basic tax calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_table(brackets_file: Path | None) -> BracketTable:
    if brackets_file is None:
        return BASIC_TAX_TABLE
    try:
        return load_bracket_table(brackets_file)
    except BracketDataError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _parse_status(filing_status: str) -> FilingStatus:
    try:
        return FilingStatus.from_value(filing_status)
    except UnknownFilingStatusError:
        typer.echo(
            f"Error: Invalid filing status '{filing_status}'. Valid: {VALID_STATUSES}",
            err=True,
        )
        raise typer.Exit(1)


def _format_bound(value) -> str:
    return "no limit" if value is None else f"${value:,.2f}"


# Negative incomes look like short options to Click; pass them through as INCOME
@app.command(context_settings={"ignore_unknown_options": True})
def compute(
    filing_status: str = typer.Argument(..., help="Filing status, e.g. 'single' or 'married filing jointly'"),
    income: str = typer.Argument(..., help="Income amount"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail instead of returning 0 when no bracket covers the income",
    ),
    brackets_file: Path | None = BRACKETS_FILE_OPTION,
) -> None:
    """Compute the basic tax for a filing status and income."""
    table = _load_table(brackets_file)
    status = _parse_status(filing_status)

    try:
        result = table.evaluate(status, income, strict=strict)
    except UnknownFilingStatusError:
        typer.echo(f"Error: No brackets defined for {status.name} in this table.", err=True)
        raise typer.Exit(1)
    except (DataValidationError, NoMatchingBracketError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        payload = result.model_dump(mode="json")
        payload["matched"] = result.matched
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"Filing status: {result.status.name}")
    typer.echo(f"Income:        ${result.income:,.2f}")
    if result.bracket is None:
        typer.echo("Bracket:       none (no bracket covers this income)")
    else:
        b = result.bracket
        typer.echo(
            f"Bracket:       {_format_bound(b.lower_bound)} to {_format_bound(b.upper_bound)}"
            f", ${b.base_tax:,.2f} + {b.rate * 100:.2f}% over ${b.lower_bound:,.2f}"
        )
    typer.echo(f"Basic tax:     ${result.basic_tax:,.2f}")


@app.command()
def brackets(
    filing_status: str | None = typer.Argument(None, help="Only show this filing status"),
    brackets_file: Path | None = BRACKETS_FILE_OPTION,
) -> None:
    """Show the bracket table."""
    table = _load_table(brackets_file)
    statuses = table.statuses if filing_status is None else (_parse_status(filing_status),)
    console = Console()

    for status in statuses:
        try:
            rows = table.brackets_for(status)
        except UnknownFilingStatusError:
            typer.echo(f"Error: No brackets defined for {status.name} in this table.", err=True)
            raise typer.Exit(1)

        tbl = Table(title=status.name, show_header=True)
        tbl.add_column("From", justify="right", style="cyan")
        tbl.add_column("To", justify="right", style="cyan")
        tbl.add_column("Base Tax", justify="right", style="green")
        tbl.add_column("Rate", justify="right", style="green")
        for b in rows:
            tbl.add_row(
                _format_bound(b.lower_bound),
                _format_bound(b.upper_bound),
                f"${b.base_tax:,.2f}",
                f"{b.rate * 100:.2f}%",
            )
        console.print(tbl)


@app.command()
def check(
    brackets_file: Path | None = BRACKETS_FILE_OPTION,
) -> None:
    """Validate the bracket table for gaps, overlaps and discontinuities."""
    table = _load_table(brackets_file)
    issues = table.validate()

    if not issues:
        typer.echo("Bracket table OK.")
        return

    for issue in issues:
        typer.echo(f"[{issue.severity.value}] {issue.status.name}: {issue.message}")

    errors = sum(1 for issue in issues if issue.severity == IssueSeverity.ERROR)
    warnings = len(issues) - errors
    typer.echo(f"{errors} error(s), {warnings} warning(s).")
    if errors:
        raise typer.Exit(1)


@app.command()
def export(
    output: Path = typer.Argument(..., help="Where to write the JSON bracket table"),
    brackets_file: Path | None = BRACKETS_FILE_OPTION,
) -> None:
    """Write the bracket table as JSON."""
    table = _load_table(brackets_file)
    dump_bracket_table(table, output)
    typer.echo(f"Wrote {len(table.statuses)} filing status table(s) to {output}")


if __name__ == "__main__":
    app()
