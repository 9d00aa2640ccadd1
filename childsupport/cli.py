"""Typer CLI interface for the child support calculator."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer

app = typer.Typer(
    name="childsupport",
    help="Child support worksheet calculator (primary and shared custody).",
)

SCHEDULE_OPTION_HELP = (
    "Path to a schedule JSON file. Defaults to $CHILDSUPPORT_SCHEDULE, "
    "then the bundled demonstration schedule."
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Child support worksheet calculator (primary and shared custody)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_schedule(schedule: Path | None):
    """Load the requested schedule or the bundled demo; exit 1 on failure."""
    from childsupport.exceptions import ChildSupportError
    from childsupport.ingestion.schedule_file import ScheduleLoader, load_demo_schedule

    try:
        if schedule is None:
            return load_demo_schedule()
        return ScheduleLoader().load(schedule)
    except (FileNotFoundError, ChildSupportError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def calculate(
    case_file: Path = typer.Argument(..., help="Case JSON file"),
    schedule: Path | None = typer.Option(
        None,
        "--schedule",
        envvar="CHILDSUPPORT_SCHEDULE",
        help=SCHEDULE_OPTION_HELP,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Compute the recommended child support order for a case."""
    from childsupport.engines.calculator import CaseCalculator
    from childsupport.exceptions import ChildSupportError
    from childsupport.ingestion.case_file import CaseFileAdapter
    from childsupport.reports.worksheet import WorksheetReportGenerator

    adapter = CaseFileAdapter()
    try:
        inputs = adapter.parse(case_file)
    except (FileNotFoundError, ChildSupportError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for warning in adapter.validate(inputs):
        typer.echo(f"Warning: {warning}", err=True)

    table = _load_schedule(schedule)
    try:
        result = CaseCalculator(table).calculate(inputs)
    except ChildSupportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    typer.echo(WorksheetReportGenerator().render(result))


@app.command()
def lookup(
    income: str = typer.Argument(..., help="Combined monthly adjusted actual income"),
    children: int = typer.Argument(..., help="Number of children in this case"),
    schedule: Path | None = typer.Option(
        None,
        "--schedule",
        envvar="CHILDSUPPORT_SCHEDULE",
        help=SCHEDULE_OPTION_HELP,
    ),
) -> None:
    """Look up the basic obligation for one income and child count."""
    from rich.console import Console
    from rich.table import Table

    from childsupport.engines.schedule import lookup_basic_obligation
    from childsupport.exceptions import ChildSupportError

    try:
        combined = Decimal(income)
    except InvalidOperation:
        typer.echo(f"Error: Invalid income '{income}'", err=True)
        raise typer.Exit(1)
    if not combined.is_finite():
        typer.echo(f"Error: Invalid income '{income}'", err=True)
        raise typer.Exit(1)

    table = _load_schedule(schedule)
    try:
        result = lookup_basic_obligation(table, combined, children)
    except ChildSupportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    out = Table(title="Schedule Lookup")
    out.add_column("Combined income", justify="right")
    out.add_column("Children", justify="right")
    out.add_column("Row used", justify="right")
    out.add_column("Basic obligation", justify="right")
    out.add_column("Status")
    out.add_row(
        f"${combined:,.2f}",
        str(children),
        f"${result.used_row_income:,.2f}" if result.used_row_income is not None else "-",
        f"${result.amount:,.2f}" if result.amount is not None else "court discretion",
        str(result.status),
    )
    Console().print(out)


@app.command(name="check-schedule")
def check_schedule(
    schedule: Path | None = typer.Option(
        None,
        "--schedule",
        envvar="CHILDSUPPORT_SCHEDULE",
        help=SCHEDULE_OPTION_HELP,
    ),
) -> None:
    """Validate a schedule file (ascending incomes, aligned columns)."""
    table = _load_schedule(schedule)
    typer.echo(
        f"Schedule OK: {len(table.incomes)} income rows "
        f"(${table.incomes[0]:,.2f} to ${table.incomes[-1]:,.2f}), "
        f"child counts {', '.join(str(c) for c in table.child_counts)}"
    )
