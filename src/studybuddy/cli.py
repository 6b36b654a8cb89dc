"""Command-line interface for StudyBuddy.

This module provides the CLI commands for running and maintaining the
StudyBuddy authentication service.
"""

import asyncio
from typing import NoReturn

import click

from studybuddy import __version__
from studybuddy.core.config import get_settings
from studybuddy.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="StudyBuddy")
def cli() -> None:
    """StudyBuddy - JWT authentication backend.

    Settings are read from STUDYBUDDY_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option("--workers", type=int, default=None, help="Number of worker processes")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the StudyBuddy server."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)
    logger = get_logger(__name__)
    logger.info(
        "Starting StudyBuddy server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "studybuddy.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create the database tables."""
    from studybuddy.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo("ERROR: Running in production mode. Use --force to proceed.", err=True)
        raise SystemExit(1)

    if not force:
        click.confirm("This will create all database tables. Continue?", abort=True, default=False)

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await init_database()
            if settings.is_production:
                await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command("prune-denylist")
def prune_denylist() -> None:
    """Delete denylist entries whose tokens have already expired."""
    from studybuddy.infrastructure.persistence.database import get_db_manager
    from studybuddy.infrastructure.persistence.repositories import JwtDenylistRepository

    configure_logging(get_settings())
    logger = get_logger(__name__)

    async def prune() -> int:
        db = get_db_manager()
        try:
            async with db.session() as session:
                return await JwtDenylistRepository(session).prune_expired()
        finally:
            await db.disconnect()

    removed = asyncio.run(prune())
    logger.info("Denylist pruned", removed=removed)
    click.echo(f"Removed {removed} expired denylist entr{'y' if removed == 1 else 'ies'}.")


@cli.command()
def info() -> None:
    """Show the effective configuration (secrets masked)."""
    settings = get_settings()
    click.echo(f"StudyBuddy v{settings.app_version}")
    click.echo(f"Environment:   {settings.environment}")
    click.echo(f"Database:      {settings.database_url}")
    click.echo(f"API prefix:    {settings.api_prefix or '/'}")
    click.echo(f"Token expiry:  {settings.access_token_expire_hours}h ({settings.jwt_algorithm})")
    click.echo(f"Secret key:    {settings.secret_key}")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()
    raise SystemExit(0)
