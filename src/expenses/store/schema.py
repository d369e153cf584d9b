#!/usr/bin/env python3
"""
Expenses Table Schema

Single table, created lazily on first run:

    expenses(id serial PK, amount numeric(6,2) not null,
             memo text not null, created_on date not null default current_date)
"""

import logging

from sqlalchemy import Column, Date, Integer, MetaData, Numeric, Table, Text, func
from sqlalchemy.engine import Connection
from sqlalchemy.schema import CreateTable

logger = logging.getLogger(__name__)

metadata = MetaData()

expenses_table = Table(
    "expenses",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("amount", Numeric(6, 2), nullable=False),
    Column("memo", Text, nullable=False),
    Column("created_on", Date, nullable=False, server_default=func.current_date()),
)


def ensure_schema(connection: Connection) -> None:
    """
    Create the expenses table if it does not already exist.

    Issues a single CREATE TABLE IF NOT EXISTS so concurrent first runs cannot
    race between an existence check and the create.
    """
    with connection.begin():
        connection.execute(CreateTable(expenses_table, if_not_exists=True))
    logger.debug(f"Ensured table exists: {expenses_table.name}")
