#!/usr/bin/env python3
"""
Main CLI entry point for the moviegraph server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from moviegraph import __version__
from moviegraph.config import settings
from moviegraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="moviegraph")
def cli() -> None:
    """moviegraph CLI - run the server and inspect its schema and seed data."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the moviegraph API server."""
    debug = log_level == "debug"

    # The app module configures logging from settings.debug when imported
    settings.debug = debug
    settings.log_level = log_level
    configure_logging(debug=debug)

    logger.info(
        "Starting moviegraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        if reload:
            # The reload worker is a fresh process that rebuilds settings from the environment
            os.environ["MOVIEGRAPH_DEBUG"] = "true" if debug else "false"
            os.environ["MOVIEGRAPH_LOG_LEVEL"] = log_level
            uvicorn.run(
                "moviegraph.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from moviegraph.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the schema to this file instead of stdout",
)
def export_schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from moviegraph.graphql.schema import export_schema as render_schema

    sdl = render_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


@cli.command("check-seed")
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
def check_seed(path: Path | None) -> None:
    """Validate a seed file (or the configured seed) and summarize it."""
    from moviegraph.store import SeedDataError, load_seed

    configure_logging()

    source = path or settings.seed_data_path
    try:
        seed = load_seed(source)
    except SeedDataError as e:
        logger.error("Seed data check failed", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(f"Seed: {source or 'built-in'}")
    click.echo(f"  Actors: {len(seed.actors)}")
    click.echo(f"  Movies: {len(seed.movies)}")

    dangling = seed.dangling_movies()
    if dangling:
        click.echo(f"  Dangling actor references ({len(dangling)}):")
        for movie in dangling:
            click.echo(f"    • movie {movie.id} '{movie.name}' -> actor {movie.actor_id}")
    else:
        click.echo("  No dangling actor references")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
