"""CLI interface for the Liverpool FC data API."""

import typer
import uvicorn

from ..config.settings import settings
from .database import app as db_app
from .database import setup_logging

main = typer.Typer(help="Liverpool FC data API CLI")

# Add sub-applications
main.add_typer(db_app, name="db", help="Database management commands")


@main.command()
def serve(
    host: str = typer.Option(settings.api_host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.api_port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(settings.api_reload, "--reload/--no-reload", help="Restart on code changes"),
):
    """
    Run the REST and GraphQL API with uvicorn.

    Examples:
        lfc serve
        lfc serve --port 9000 --reload
    """
    setup_logging()
    typer.echo(f"Serving on http://{host}:{port} (REST {settings.api_prefix}, GraphQL {settings.graphql_path})")
    uvicorn.run("lfc_api.api.main:app", host=host, port=port, reload=reload, log_level=settings.log_level.lower())
