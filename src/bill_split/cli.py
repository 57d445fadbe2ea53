"""CLI for BillSplit."""

import logging
import random
import sys

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .allocator import allocate, allocate_among
from .config import Settings, load_settings
from .exceptions import BillSplitError
from .i18n import display_name, get_strings
from .models import AllocationResult
from .money import format_amount, parse_amount
from .ui import collect_names_interactive

app = typer.Typer(
    name="bill-split",
    help="Split a bill fairly, spreading the rounding remainder at random",
)

console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _load(
    rounding_unit: int | None, language: str | None
) -> tuple[Settings, dict[str, str]]:
    overrides = {}
    if rounding_unit is not None:
        overrides["rounding_unit"] = rounding_unit
    if language is not None:
        overrides["language"] = language
    settings = load_settings(**overrides)
    return settings, get_strings(settings.language)


def _make_rng(seed: int | None) -> random.Random | None:
    """A seeded generator for reproducible output, else the default one."""
    return random.Random(seed) if seed is not None else None


def display_result(result: AllocationResult, settings: Settings):
    """Display an allocation result in a table."""
    strings = get_strings(settings.language)
    places = settings.decimal_places
    currency = settings.currency_code

    console.print(f"\n[bold]{strings['title']}[/bold]")

    table = Table(
        title=strings["split_result"], show_header=True, header_style="bold magenta"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column(strings["name"], style="cyan")
    table.add_column(strings["share"], justify="right")
    table.add_column(strings["extra"], justify="center")

    for participant in result.participants:
        name = display_name(participant.name, participant.index, settings.language)
        table.add_row(
            str(participant.index + 1),
            escape(name),
            f"[green]{format_amount(participant.share, places)}[/green] {currency}",
            "✓" if participant.received_extra else "",
        )

    console.print()
    console.print(table)

    console.print()
    console.print(
        f"[bold]{strings['total']}:[/bold] "
        f"{format_amount(result.allocated_total, places)} {currency}"
    )

    if result.allocated_total == result.total:
        console.print(f"  [green]✓ {strings['totals_match']}[/green]")
    else:
        console.print(
            f"  [red]✗ {strings['totals_mismatch']}: "
            f"{result.allocated_total} != {result.total}[/red]"
        )


@app.command()
def quick(
    total: str = typer.Argument(..., help="Total bill, e.g. 1,000.00"),
    people: int | None = typer.Option(
        None, "--people", "-n", help="Number of people (default from settings)"
    ),
    rounding_unit: int | None = typer.Option(
        None, "--rounding-unit", help="Rounding increment in minor units"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed the shuffle for reproducible output"
    ),
    language: str | None = typer.Option(
        None, "--lang", help="Output language: en, ar or tr"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Split a bill among a number of people.

    Participants are labelled Person 1..N.
    """
    setup_logging(verbose)

    try:
        settings, _ = _load(rounding_unit, language)
        count = people if people is not None else settings.default_participants
        amount = parse_amount(total, settings.decimal_places)

        result = allocate(
            amount,
            count,
            rounding_unit=settings.rounding_unit,
            rng=_make_rng(seed),
        )
        display_result(result, settings)

    except BillSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def manual(
    total: str = typer.Argument(..., help="Total bill, e.g. 1,000.00"),
    person: list[str] | None = typer.Option(
        None, "--person", "-p", help="Participant name (repeatable)"
    ),
    rounding_unit: int | None = typer.Option(
        None, "--rounding-unit", help="Rounding increment in minor units"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed the shuffle for reproducible output"
    ),
    language: str | None = typer.Option(
        None, "--lang", help="Output language: en, ar or tr"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Split a bill among named people.

    Without --person options, names are entered interactively.
    """
    setup_logging(verbose)

    try:
        settings, strings = _load(rounding_unit, language)
        amount = parse_amount(total, settings.decimal_places)

        names = [name.strip() for name in person or [] if name.strip()]
        if not person:
            console.print(f"\n[bold blue]{strings['people_list']}[/bold blue]")
            collected = collect_names_interactive(strings["enter_name"])
            if collected is None:
                console.print("[yellow]No split made.[/yellow]")
                return
            names = collected

        result = allocate_among(
            amount,
            names,
            rounding_unit=settings.rounding_unit,
            rng=_make_rng(seed),
        )
        display_result(result, settings)

    except BillSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    app()
