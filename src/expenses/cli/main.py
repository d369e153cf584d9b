#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

Dispatches the first command-line token to one expense operation:

    expenses add AMOUNT MEMO [DATE]
    expenses list
    expenses search QUERY
    expenses delete ID
    expenses clear

A missing or unrecognized action prints the command summary and exits 0.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click
from sqlalchemy.exc import SQLAlchemyError

from ..core.config import get_config
from ..core.dates import FinancialDate
from ..store import ExpenseStore

logger = logging.getLogger(__name__)

HELP_TEXT = """An expense recording system

Commands:

add AMOUNT MEMO [DATE] - record a new expense
clear - delete all expenses
list - list all expenses
delete NUMBER - remove expense with id NUMBER
search QUERY - list expenses with a matching memo field"""

CLEAR_PROMPT = "Are you sure you want to delete all expenses? [y/N] "

# Amounts, ids and memos may start with "-"; surplus arguments are ignored
PASSTHROUGH_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


class ExpenseGroup(click.Group):
    """Command group that answers unknown actions with the help text instead of an error."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return "help", self.get_command(ctx, "help"), []
        return super().resolve_command(ctx, args)


@contextmanager
def open_store(ctx: click.Context) -> Iterator[ExpenseStore]:
    """
    Open the expense store for one command.

    Database failures end the command with exit status 1 and the driver's
    own message; nothing is retried.
    """
    database_url = ctx.obj["database_url"]
    try:
        with ExpenseStore.open(database_url) as store:
            yield store
    except SQLAlchemyError as e:
        logger.debug(f"Database operation failed: {e}")
        cause = getattr(e, "orig", None)
        raise click.ClickException(str(cause) if cause is not None else str(e)) from e


@click.group(cls=ExpenseGroup, invoke_without_command=True)
@click.option(
    "--database-url",
    help="Override the database URL (default: EXPENSES_DATABASE_URL)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, database_url: str | None, debug: bool) -> None:
    """
    Expense Tracker - record, list, search and delete expenses.
    """
    ctx.ensure_object(dict)

    config = get_config()

    # Configure debug logging if requested
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expenses").setLevel(logging.DEBUG)

    ctx.obj["config"] = config
    ctx.obj["database_url"] = database_url or config.database.url
    ctx.obj["debug"] = debug

    if ctx.invoked_subcommand is None:
        click.echo(HELP_TEXT)


@main.command("help")
def help_command() -> None:
    """Show the command summary."""
    click.echo(HELP_TEXT)


@main.command(context_settings=PASSTHROUGH_ARGS)
@click.argument("amount")
@click.argument("memo")
@click.argument("date_str", metavar="[DATE]", required=False)
@click.pass_context
def add(ctx: click.Context, amount: str, memo: str, date_str: str | None) -> None:
    """
    Record a new expense.

    AMOUNT is passed to the database as entered. DATE (YYYY-MM-DD) defaults to
    the database's current date.

    Examples:
      expenses add 12.50 Coffee
      expenses add 5.00 "Tea with milk" 2026-10-01
    """
    if not amount or not memo:
        raise click.UsageError("add requires a non-empty AMOUNT and MEMO", ctx)

    created_on = None
    if date_str:
        try:
            created_on = FinancialDate.from_string(date_str)
        except ValueError:
            raise click.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD", param_hint="DATE")

    with open_store(ctx) as store:
        store.add_expense(amount, memo, created_on)


@main.command("list", context_settings=PASSTHROUGH_ARGS)
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List all expenses, most recent first."""
    with open_store(ctx) as store:
        store.list_expenses()


@main.command(context_settings=PASSTHROUGH_ARGS)
@click.argument("query")
@click.pass_context
def search(ctx: click.Context, query: str) -> None:
    """List expenses whose memo contains QUERY (case-insensitive)."""
    with open_store(ctx) as store:
        store.search(query)


@main.command(context_settings=PASSTHROUGH_ARGS)
@click.argument("expense_id", metavar="ID")
@click.pass_context
def delete(ctx: click.Context, expense_id: str) -> None:
    """Remove the expense with id ID."""
    with open_store(ctx) as store:
        store.delete_row(expense_id)


@main.command(context_settings=PASSTHROUGH_ARGS)
@click.pass_context
def clear(ctx: click.Context) -> None:
    """
    Delete all expenses after a single-keystroke confirmation.

    Only 'y' or 'Y' proceeds; no Enter is needed. Any other key does nothing.
    """
    with open_store(ctx) as store:
        click.echo(CLEAR_PROMPT, nl=False)
        answer = click.getchar()
        click.echo()

        if answer not in ("y", "Y"):
            logger.debug(f"Clear cancelled by keystroke {answer!r}")
            return

        store.delete_all_expenses()


@main.command()
def version() -> None:
    """Show version information."""
    from expenses import __author__, __version__

    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  Database URL: {settings['database']['url']}")
    click.echo(f"  SQL Echo: {settings['database']['echo']}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


if __name__ == "__main__":
    main()
