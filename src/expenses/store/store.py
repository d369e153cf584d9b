#!/usr/bin/env python3
"""
Expense Store - Persistence and Presentation

Owns the database connection and implements the five expense operations.
Each operation runs as one parameterized statement (or a lookup plus a
statement) inside its own transaction and prints its own result.

Database errors are not caught here. They propagate to the caller unchanged.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import click
from sqlalchemy import create_engine, delete, insert, select
from sqlalchemy.engine import Connection

from ..core.dates import FinancialDate
from .formatting import render_expenses
from .models import Expense
from .schema import ensure_schema, expenses_table

logger = logging.getLogger(__name__)

NO_EXPENSES_MESSAGE = "There are no expenses."
DELETED_MESSAGE = "The following expense has been deleted:"
CLEARED_MESSAGE = "All expenses have been deleted."


class ExpenseStore:
    """
    Expense operations over a single open connection.

    The table is created on construction if it does not exist. Use
    ``ExpenseStore.open()`` to get a store whose connection and engine are
    released when the ``with`` block exits, on success or error.

    Example:
        with ExpenseStore.open(config.database.url) as store:
            store.add_expense("12.50", "Coffee")
            store.list_expenses()
    """

    def __init__(self, connection: Connection, echo: Callable[[str], Any] = click.echo):
        """
        Args:
            connection: Open SQLAlchemy connection, held for the store's lifetime
            echo: Line printer; defaults to click.echo on stdout
        """
        self.connection = connection
        self.echo = echo
        ensure_schema(connection)

    @classmethod
    @contextmanager
    def open(cls, database_url: str) -> Iterator["ExpenseStore"]:
        """
        Connect to the database and yield a ready store.

        Args:
            database_url: SQLAlchemy URL, e.g. postgresql+psycopg2:///expenses

        Yields:
            ExpenseStore bound to one connection
        """
        engine = create_engine(database_url)
        logger.debug(f"Connecting to {engine.url.render_as_string(hide_password=True)}")
        try:
            with engine.connect() as connection:
                yield cls(connection)
        finally:
            engine.dispose()

    def add_expense(self, amount: str, memo: str, created_on: FinancialDate | None = None) -> None:
        """
        Insert a new expense.

        Args:
            amount: Amount as entered; the database parses and rounds it
            memo: Free-form description
            created_on: Expense date; the database's current date when None
        """
        values: dict[str, Any] = {"amount": amount, "memo": memo}
        if created_on is not None:
            values["created_on"] = created_on.date

        with self.connection.begin():
            self.connection.execute(insert(expenses_table).values(**values))
        logger.debug(f"Added expense: amount={amount} memo={memo!r} created_on={created_on}")

    def fetch_all(self) -> list[Expense]:
        """All expenses, most recent first."""
        query = select(expenses_table).order_by(
            expenses_table.c.created_on.desc(), expenses_table.c.id.desc()
        )
        return self._fetch(query)

    def fetch_matching(self, query: str) -> list[Expense]:
        """Expenses whose memo contains ``query``, ignoring case."""
        statement = (
            select(expenses_table)
            .where(expenses_table.c.memo.icontains(query, autoescape=True))
            .order_by(expenses_table.c.created_on.desc(), expenses_table.c.id.desc())
        )
        return self._fetch(statement)

    def list_expenses(self) -> None:
        """Print every expense with a count line and total."""
        expenses = self.fetch_all()
        if not expenses:
            self.echo(NO_EXPENSES_MESSAGE)
            return
        self._print(render_expenses(expenses))

    def search(self, query: str) -> None:
        """Print expenses whose memo contains ``query``; prints nothing when none match."""
        expenses = self.fetch_matching(query)
        logger.debug(f"Search {query!r} matched {len(expenses)} expenses")
        self._print(render_expenses(expenses))

    def delete_row(self, expense_id: str | int) -> None:
        """
        Delete one expense by id and print what was removed.

        A missing id is reported, not raised.
        """
        with self.connection.begin():
            statement = select(expenses_table).where(expenses_table.c.id == expense_id)
            rows = self.connection.execute(statement).all()
            if not rows:
                self.echo(f"There is no expense with the id '{expense_id}'.")
                return

            expense = Expense.from_row(rows[0])
            self.connection.execute(delete(expenses_table).where(expenses_table.c.id == expense.id))

        logger.debug(f"Deleted expense {expense.id}")
        self.echo(DELETED_MESSAGE)
        self._print(render_expenses([expense], show_count=False))

    def delete_all_expenses(self) -> None:
        """Delete every expense."""
        with self.connection.begin():
            result = self.connection.execute(delete(expenses_table))
        logger.debug(f"Deleted {result.rowcount} expenses")
        self.echo(CLEARED_MESSAGE)

    def _fetch(self, statement: Any) -> list[Expense]:
        with self.connection.begin():
            rows = self.connection.execute(statement).all()
        return [Expense.from_row(row) for row in rows]

    def _print(self, lines: list[str]) -> None:
        for line in lines:
            self.echo(line)
