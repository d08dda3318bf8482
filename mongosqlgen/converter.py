"""Conversion of parsed SQL queries into MongoDB queries."""

from __future__ import annotations

from mongosqlgen.mongo import MongoCommand, MongoQuery
from mongosqlgen.parser import QueryError
from mongosqlgen.sql import SqlCommand, SqlQuery

__all__ = ["convert_sql_command_to_mongo_command", "convert_sql_query_to_mongo_query"]

_COMMANDS = {
    SqlCommand.SELECT: MongoCommand.FIND,
    SqlCommand.INSERT: MongoCommand.INSERT,
    SqlCommand.UPDATE: MongoCommand.UPDATE,
    SqlCommand.DELETE: MongoCommand.DELETE,
}


def convert_sql_command_to_mongo_command(command: SqlCommand | str) -> MongoCommand:
    """Return the MongoDB command that corresponds to a SQL command."""
    try:
        return _COMMANDS[SqlCommand(command)]
    except ValueError:
        raise QueryError(f"unknown command: {command}") from None


def convert_sql_query_to_mongo_query(query: SqlQuery) -> MongoQuery:
    """Turn a parsed SQL query into the equivalent MongoDB query."""
    return MongoQuery(
        command=convert_sql_command_to_mongo_command(query.command),
        database=query.database,
        collections=query.table,
        fields=list(query.columns),
        filter=query.filter,
        values=list(query.values),
    )