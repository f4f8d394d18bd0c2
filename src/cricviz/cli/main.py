"""Main CLI interface for the cricviz statistics engine."""

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import settings
from ..database import configure_database, create_tables, drop_tables, get_session
from ..errors import PlayerNotFoundError
from ..innings import update_innings as run_update_innings
from ..models import Cricketer, COUNTER_FIELDS
from ..schemas import CricketerCreate, CricketerResponse, InningsScorecard
from ..store import SqlAlchemyPlayerStore

# Initialize rich console
console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Route loguru output through rich, plus an optional log file."""
    logger.remove()
    logger.add(
        RichHandler(console=console, show_time=True, show_path=False),
        level=level.upper(),
        format="{message}",
    )
    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
        )


app = typer.Typer(
    name="cricviz",
    help="Cricviz - cumulative cricket player statistics",
    no_args_is_help=True
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
    db_url: Optional[str] = typer.Option(None, "--db-url", help="Override the configured database URL"),
):
    """Cricviz - cumulative cricket player statistics."""
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)

    if db_url:
        configure_database(db_url)


@app.command("setup-db")
def setup_db(force: bool = typer.Option(False, "--force", help="Force recreation of tables")):
    """Initialize database schema."""
    console.print("[bold]Setting up database schema...[/bold]")

    try:
        if force:
            console.print("Dropping existing tables...")
            drop_tables()

        create_tables()
        console.print("[green]✅ Database schema initialized successfully![/green]")

    except Exception as e:
        console.print(f"[red]❌ Database setup failed: {e}[/red]")
        raise typer.Exit(1)


@app.command("add-player")
def add_player(
    name: str = typer.Argument(..., help="Player name (unique)"),
    country: Optional[str] = typer.Option(None, "--country", help="Country represented"),
    role: Optional[str] = typer.Option(None, "--role", help="Batter, Bowler, All-rounder or Wicketkeeper"),
    matches: int = typer.Option(0, "--matches", min=0),
    innings_batted: int = typer.Option(0, "--innings-batted", min=0),
    not_out: int = typer.Option(0, "--not-out", min=0),
    runs_scored: int = typer.Option(0, "--runs-scored", min=0),
    balls_faced: Optional[int] = typer.Option(0, "--balls-faced", min=0, help="Omit with --balls-faced-unknown"),
    balls_faced_unknown: bool = typer.Option(False, "--balls-faced-unknown", help="Record balls faced as missing"),
    high_score: int = typer.Option(0, "--high-score", min=0),
    centuries: int = typer.Option(0, "--centuries", min=0),
    half_centuries: int = typer.Option(0, "--half-centuries", min=0),
):
    """Create a player record."""
    try:
        data = CricketerCreate(
            name=name,
            country=country,
            role=role,
            matches=matches,
            innings_batted=innings_batted,
            not_out=not_out,
            runs_scored=runs_scored,
            balls_faced=None if balls_faced_unknown else balls_faced,
            high_score=high_score,
            centuries=centuries,
            half_centuries=half_centuries,
        )
    except ValidationError as e:
        console.print(f"[red]❌ Invalid player: {e}[/red]")
        raise typer.Exit(2)

    try:
        with get_session() as session:
            SqlAlchemyPlayerStore(session).add(Cricketer(**data.model_dump()))
        console.print(f"[green]✅ Added {name}[/green]")
    except Exception as e:
        console.print(f"[red]❌ Add failed: {e}[/red]")
        raise typer.Exit(1)


@app.command("update-innings")
def update_innings(
    scorecard_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with batting and bowling rows"),
):
    """Apply one innings scorecard file to player statistics."""
    try:
        payload = json.loads(scorecard_file.read_text(encoding="utf-8"))
        scorecard = InningsScorecard.model_validate(payload)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]❌ Invalid scorecard: {e}[/red]")
        raise typer.Exit(2)

    try:
        with get_session() as session:
            stats = run_update_innings(
                SqlAlchemyPlayerStore(session), scorecard.batting, scorecard.bowling
            )
    except PlayerNotFoundError as e:
        console.print(f"[red]❌ Player not found: {e.name}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]❌ Update failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Innings Applied")
    table.add_column("Scorecard", style="cyan")
    table.add_column("Entries", style="green")
    for key, count in stats.items():
        table.add_row(key, str(count))
    console.print(table)
    console.print("[green]✅ Innings update completed[/green]")


def _fmt(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


@app.command("show")
def show(name: str = typer.Argument(..., help="Player name")):
    """Show a player's counters and derived metrics."""
    try:
        with get_session() as session:
            record = SqlAlchemyPlayerStore(session).find_by_name(name)
            if record is None:
                raise PlayerNotFoundError(name)

            data = CricketerResponse.model_validate(record)

        table = Table(title=f"{data.name} ({data.country or '-'}, {data.role or '-'})")
        table.add_column("Stat", style="cyan")
        table.add_column("Value", style="green")
        for field in COUNTER_FIELDS + ("batting_average", "batting_strike_rate"):
            table.add_row(field, _fmt(getattr(data, field)))
    except PlayerNotFoundError as e:
        console.print(f"[red]❌ Player not found: {e.name}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]❌ Show failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(table)


@app.command("ban")
def ban(name: str = typer.Argument(..., help="Player name")):
    """Delete a player's record."""
    try:
        with get_session() as session:
            SqlAlchemyPlayerStore(session).ban(name)
        console.print(f"[green]✅ Removed {name}[/green]")
    except PlayerNotFoundError as e:
        console.print(f"[red]❌ Player not found: {e.name}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]❌ Ban failed: {e}[/red]")
        raise typer.Exit(1)
