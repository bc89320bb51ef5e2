"""
CLI commands for managing the database.

Typical first run:

    lfc db init        # create the tables
    lfc db seed        # load the bundled sample data
    lfc db status      # check what is there

`lfc db reset` drops everything and starts again; it asks for confirmation
unless --yes is given.
"""

import logging
import sys
from pathlib import Path

import typer

from ..config.settings import settings
from ..database.connection import get_session_context
from ..database.init_db import create_database, drop_database, reset_database
from ..database.models import (
    Competition,
    Contract,
    Manager,
    Match,
    Player,
    PlayerStats,
    Season,
    Stadium,
    Trophy,
)
from ..database.seed import seed_database

app = typer.Typer(help="Database management commands")

STATUS_MODELS = (
    ("Competitions", Competition),
    ("Stadiums", Stadium),
    ("Managers", Manager),
    ("Seasons", Season),
    ("Trophies", Trophy),
    ("Contracts", Contract),
    ("Player Stats", PlayerStats),
    ("Players", Player),
    ("Matches", Match),
)


def setup_logging():
    """
    Configure logging for CLI operations.

    Sets up dual logging output:
    - File logging for permanent records
    - Console logging for real-time feedback
    """
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_file),
            logging.StreamHandler(sys.stdout),
        ],
    )


@app.command()
def init():
    """Create all tables. Existing tables are left untouched."""
    setup_logging()
    typer.echo("Initializing database...")
    try:
        create_database()
        typer.echo("✅ Database initialized successfully!")
    except Exception as e:
        typer.echo(f"❌ Database initialization failed: {e}")
        raise typer.Exit(1) from e


@app.command()
def drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Drop all tables - every document is lost."""
    setup_logging()
    if not yes:
        typer.confirm("Drop all tables? This cannot be undone", abort=True)
    try:
        drop_database()
        typer.echo("✅ Database dropped")
    except Exception as e:
        typer.echo(f"❌ Dropping the database failed: {e}")
        raise typer.Exit(1) from e


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Drop and recreate all tables."""
    setup_logging()
    if not yes:
        typer.confirm("Reset the database? All data will be lost", abort=True)
    try:
        reset_database()
        typer.echo("✅ Database reset complete")
    except Exception as e:
        typer.echo(f"❌ Database reset failed: {e}")
        raise typer.Exit(1) from e


@app.command()
def seed(
    file: Path = typer.Option(None, "--file", "-f", help="Seed JSON file (default: bundled sample data)"),
    reset_first: bool = typer.Option(False, "--reset", help="Drop and recreate all tables before seeding"),
):
    """
    Load sample data through the services, so it is validated like API writes.

    Examples:
        lfc db seed
        lfc db seed --file my_club.json --reset
    """
    setup_logging()

    if file is not None and not file.exists():
        typer.echo(f"❌ Seed file {file} does not exist")
        raise typer.Exit(1) from None

    try:
        create_database()
        with get_session_context() as session:
            counts = seed_database(session, file, reset=reset_first)
        typer.echo("✅ Seed data loaded!")
        for collection, count in counts.items():
            typer.echo(f"  {collection}: {count}")
    except Exception as e:
        typer.echo(f"❌ Seeding failed: {e}")
        raise typer.Exit(1) from e


@app.command()
def status():
    """Show record counts for every collection."""
    try:
        with get_session_context() as session:
            typer.echo("📊 Database Status:")
            for label, model in STATUS_MODELS:
                typer.echo(f"  {label}: {session.query(model).count():,}")
    except Exception as e:
        typer.echo(f"❌ Failed to get database status: {e}")
        raise typer.Exit(1) from e
