"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.memory_store import InMemoryRestaurantStore
from ..api.app import build_query_handler, create_app
from ..config import AppConfig
from ..domain.exceptions import DataStoreError

app = typer.Typer(
    name="tablefinder",
    help="Look up restaurant table availability",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _load(config_file: Optional[Path]) -> tuple[AppConfig, InMemoryRestaurantStore]:
    """Load configuration and restaurant data, exiting on failure."""
    try:
        config = AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _configure_logging(config.log_level)

    try:
        store = InMemoryRestaurantStore.from_json_file(config.data_file, timezone=config.timezone)
    except DataStoreError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    return config, store


@app.command()
def serve(
    config_file: ConfigOption = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Bind port")] = None,
):
    """
    Run the availability HTTP API.
    """
    config, store = _load(config_file)

    bind_host = host or config.server.host
    bind_port = port or config.server.port

    console.print(f"[bold cyan]tablefinder[/bold cyan] listening on http://{bind_host}:{bind_port}")
    uvicorn.run(
        create_app(config, store),
        host=bind_host,
        port=bind_port,
        log_level=config.log_level.lower(),
    )


@app.command()
def check(
    slug: Annotated[str, typer.Argument(help="Restaurant slug")],
    day: Annotated[str, typer.Option("--day", help="Date (YYYY-MM-DD)")],
    time: Annotated[str, typer.Option("--time", help="Time of day (HH:MM:SS)")],
    party_size: Annotated[str, typer.Option("--party-size", "-n", help="Number of guests")],
    config_file: ConfigOption = None,
):
    """
    Check availability for a single request.

    Examples:

        tablefinder check vivaan-fine-indian-cuisine-ottawa --day 2023-02-03 --time 15:00:00 -n 4
    """
    config, store = _load(config_file)
    handler = build_query_handler(config, store)

    outcome = asyncio.run(
        handler.handle(slug=slug, day=day, time=time, party_size=party_size)
    )

    if not outcome.ok:
        console.print(f"[bold red]Error ({outcome.error_kind.value}):[/bold red] {outcome.message}")
        raise typer.Exit(1)

    if not outcome.availabilities:
        console.print("[yellow]⚠ No candidate times within opening hours.[/yellow]")
        return

    table = Table(
        title=f"Availability for {slug} on {day} (party of {party_size})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Time", style="bold")
    table.add_column("Available")

    for availability in outcome.availabilities:
        table.add_row(
            availability.time,
            "[green]yes[/green]" if availability.available else "[red]no[/red]"
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def list_restaurants(config_file: ConfigOption = None):
    """
    List all known restaurants.
    """
    _, store = _load(config_file)
    restaurants = asyncio.run(store.list_restaurants())

    if not restaurants:
        console.print("[yellow]No restaurants in the data file.[/yellow]")
        return

    table = Table(
        title="Restaurants",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Slug", style="bold yellow")
    table.add_column("Name")
    table.add_column("Hours", style="dim")
    table.add_column("Tables", justify="right")
    table.add_column("Seats", justify="right")

    for restaurant in restaurants:
        table.add_row(
            restaurant.slug,
            restaurant.display_name(),
            f"{restaurant.open_time} - {restaurant.close_time}",
            str(len(restaurant.tables)),
            str(restaurant.total_seats()),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]tablefinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
