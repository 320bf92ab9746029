#!/usr/bin/env python3
"""
Main CLI entry point for TinyHouse backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from tinyhouse import __version__
from tinyhouse.config import settings
from tinyhouse.database.factory import STORE_BACKENDS
from tinyhouse.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="tinyhouse")
def cli() -> None:
    """TinyHouse CLI - run the API server and seed listings."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=9000, type=int, help="Port to bind to (default: 9000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the TinyHouse API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting TinyHouse API server", host=host, port=port, reload=reload)

    # The app reads its settings at import time
    if log_level == "debug":
        os.environ["TINYHOUSE_DEBUG"] = "true"
    else:
        os.environ.setdefault("TINYHOUSE_DEBUG", "false")
    os.environ.setdefault("TINYHOUSE_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "tinyhouse.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--backend",
    type=click.Choice(STORE_BACKENDS),
    default=None,
    help="Store backend to seed (default: TINYHOUSE_STORE_BACKEND)",
)
def seed(backend: str | None) -> None:
    """Seed the listings collection with fixture listings."""
    from tinyhouse.database.connection import close_database, init_database
    from tinyhouse.database.seed_data import seed_listings

    configure_logging()

    if (backend or settings.store_backend) == "memory":
        click.echo(
            "⚠ The memory backend lives only in this process; seeded listings are discarded "
            "on exit. Use --backend mongo to seed a persistent store.",
            err=True,
        )

    async def do_seed() -> int:
        db = init_database(backend=backend, force_reinit=True)
        try:
            return await seed_listings(db)
        finally:
            await close_database()

    try:
        inserted = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed listings", error=str(e))
        click.echo(f"✗ Error seeding listings: {e}", err=True)
        sys.exit(1)

    if inserted:
        click.echo(f"✓ Seeded {inserted} listing(s)")
    else:
        click.echo("✓ Listings already present, nothing to seed")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
