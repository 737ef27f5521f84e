"""Fintrack CLI application using Typer.

Provides deployment helpers and the recurring transaction runner meant
to be called from cron.
"""

import asyncio
import logging
import secrets
import sys

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fintrack.application.commands.recurring import (
    ProcessDueRecurringRulesCommand,
    ProcessDueResult,
)
from fintrack.application.context import UserContext
from fintrack.infrastructure.persistence.sqlalchemy.database import (
    create_engine_for_url,
    create_tables,
    ensure_sqlite_directory,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from fintrack_config.settings import get_settings
from fintrack_identity import User
from fintrack_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fintrack",
    help="Fintrack - personal finance tracker CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

recurring_app = typer.Typer(
    name="recurring",
    help="Recurring transaction processing",
    no_args_is_help=True,
)
app.add_typer(recurring_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret for the .env file."""
    console.print("\n[bold green]Fintrack Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]",
    )
    console.print(
        "[dim]Copy the value to your config/.env (production) or "
        "config/.env.dev (local) file.[/dim]\n",
    )


def _configure_cli_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def _create_engine() -> AsyncEngine:
    settings = get_settings()
    ensure_sqlite_directory(settings.database_url)
    return create_engine_for_url(settings.database_url, echo=settings.database_echo)


async def process_user(
    session_maker: async_sessionmaker[AsyncSession],
    user: User,
) -> ProcessDueResult:
    """Process the due rules of one user in a dedicated session."""
    async with session_maker() as session:
        factory = SQLAlchemyRepositoryFactory(session, UserContext.create(user))
        return await ProcessDueRecurringRulesCommand.from_factory(factory).execute()


async def process_all_users(
    session_maker: async_sessionmaker[AsyncSession],
) -> dict[str, ProcessDueResult | Exception]:
    """Process every user sequentially.

    A failing user is recorded and does not stop the others.
    """
    async with session_maker() as session:
        users = await UserRepositorySQLAlchemy(session).list_all()

    outcomes: dict[str, ProcessDueResult | Exception] = {}
    for user in users:
        try:
            outcomes[user.email] = await process_user(session_maker, user)
        except Exception as e:
            logger.exception("Recurring processing failed for %s", user.email)
            outcomes[user.email] = e
    return outcomes


async def _run_for_email(email: str) -> ProcessDueResult | None:
    engine = _create_engine()
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            user = await UserRepositorySQLAlchemy(session).find_by_email(email)
        if user is None:
            return None
        return await process_user(session_maker, user)
    finally:
        await engine.dispose()


async def _run_for_all() -> dict[str, ProcessDueResult | Exception]:
    engine = _create_engine()
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        return await process_all_users(session_maker)
    finally:
        await engine.dispose()


@recurring_app.command("process")
def process_recurring(
    email: str = typer.Option(..., "--email", "-e", help="User to process"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Materialize the due recurring transactions of one user."""
    _configure_cli_logging(verbose)

    result = asyncio.run(_run_for_email(email))
    if result is None:
        console.print(f"[red]User not found:[/red] {email}")
        raise typer.Exit(code=1)

    console.print(
        f"[green]Processed {result.processed} recurring transaction(s)[/green] "
        f"for {email}",
    )
    for txn in result.transactions:
        console.print(
            f"  {txn.date:%Y-%m-%d} {txn.transaction_type.value:<8} "
            f"{txn.amount:>10} {txn.category}",
        )


@recurring_app.command("process-all")
def process_all(
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Materialize due recurring transactions for every user (cron entry point)."""
    _configure_cli_logging(verbose)

    outcomes = asyncio.run(_run_for_all())

    table = Table(title="Recurring processing")
    table.add_column("User")
    table.add_column("Processed", justify="right")
    table.add_column("Status")

    failed = 0
    for email, outcome in outcomes.items():
        if isinstance(outcome, Exception):
            failed += 1
            table.add_row(email, "-", f"[red]failed: {outcome}[/red]")
        else:
            table.add_row(email, str(outcome.processed), "[green]ok[/green]")

    console.print(table)
    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
