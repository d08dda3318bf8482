"""Parsing of simple SQL statements into structured queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from mongosqlgen.parser import (
    QueryError,
    contains_command,
    count_occurrences,
    find_after,
    find_between,
    parse_user_input,
    split_input_by_delimiters,
)

__all__ = [
    "SqlCommand",
    "SqlQuery",
    "parse_sql_command",
    "get_command_from_user_input",
    "handle_select_user_input",
    "handle_insert_user_input",
    "handle_update_user_input",
    "handle_delete_user_input",
    "convert_user_input_to_sql_query",
]

_NAME_DELIMITERS = (" ", ",")
_FILTER_DELIMITERS = (" ", ",", "'")


class SqlCommand(str, Enum):
    """The SQL statements that are understood."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass
class SqlQuery:
    """A parsed SQL statement."""

    command: SqlCommand | str
    database: str = ""
    table: str = ""
    columns: list[str] = field(default_factory=list)
    filter: str = ""
    values: list[Any] = field(default_factory=list)


def parse_sql_command(command: str) -> SqlCommand:
    """Map a statement keyword to its command."""
    try:
        return SqlCommand(command)
    except ValueError:
        raise QueryError(f"unknown command: {command}") from None


def get_command_from_user_input(text: str) -> SqlCommand:
    """Return the command named by the first word of *text*."""
    return parse_sql_command(parse_user_input(text)[0])


def _first_name(fragment: str) -> str:
    return split_input_by_delimiters(fragment, _NAME_DELIMITERS)[0]


def _filter_after_where(text: str) -> str:
    return "".join(split_input_by_delimiters(find_after(text, "WHERE"), _FILTER_DELIMITERS))


def handle_select_user_input(text: str) -> SqlQuery:
    """Parse a SELECT statement."""
    columns = split_input_by_delimiters(find_between(text, "SELECT", "FROM"), _NAME_DELIMITERS)
    if contains_command(text, "WHERE"):
        table = _first_name(find_between(text, "FROM", "WHERE"))
        condition = _filter_after_where(text)
    else:
        table = _first_name(find_after(text, "FROM"))
        condition = ""
    return SqlQuery(command=SqlCommand.SELECT, table=table, columns=columns, filter=condition)


def handle_insert_user_input(text: str) -> SqlQuery:
    """Parse an INSERT statement, with or without a column list."""
    parens = count_occurrences(text, "(")
    table_end = "VALUES" if parens == 1 else "("
    table = _first_name(find_between(text, "INTO", table_end))

    if parens == 2:
        columns = split_input_by_delimiters(find_between(text, "(", ")"), _NAME_DELIMITERS)
    else:
        columns = []

    values: list[Any] = split_input_by_delimiters(
        find_after(text, "VALUES"), (" ", ",", "(", ")", "'")
    )

    if columns and len(columns) != len(values):
        raise QueryError("number of columns and values do not match")
    return SqlQuery(command=SqlCommand.INSERT, table=table, columns=columns, values=values)


def handle_update_user_input(text: str) -> SqlQuery:
    """Parse an UPDATE statement."""
    table = _first_name(find_between(text, "UPDATE", "SET"))

    has_where = contains_command(text, "WHERE")
    condition = _filter_after_where(text) if has_where else ""
    assignments = find_between(text, "SET", "WHERE") if has_where else find_after(text, "SET")

    columns: list[str] = []
    values: list[Any] = []
    for assignment in split_input_by_delimiters(assignments, (",",)):
        parts = split_input_by_delimiters(assignment, ("=", " ", "'"))
        if len(parts) < 2:
            raise QueryError(f"invalid assignment: {assignment.strip()}")
        columns.append(parts[0])
        values.append(parts[1])

    return SqlQuery(
        command=SqlCommand.UPDATE,
        table=table,
        columns=columns,
        filter=condition,
        values=values,
    )


def handle_delete_user_input(text: str) -> SqlQuery:
    """Parse a DELETE statement."""
    if not contains_command(text, "DELETE"):
        raise QueryError("invalid command")

    if contains_command(text, "WHERE"):
        table = _first_name(find_between(text, "FROM", "WHERE"))
        condition = _filter_after_where(text)
    else:
        table = _first_name(find_after(text, "FROM"))
        condition = ""
    return SqlQuery(command=SqlCommand.DELETE, table=table, filter=condition)


_HANDLERS: dict[SqlCommand, Callable[[str], SqlQuery]] = {
    SqlCommand.SELECT: handle_select_user_input,
    SqlCommand.INSERT: handle_insert_user_input,
    SqlCommand.UPDATE: handle_update_user_input,
    SqlCommand.DELETE: handle_delete_user_input,
}


def convert_user_input_to_sql_query(text: str) -> SqlQuery:
    """Parse any supported SQL statement."""
    return _HANDLERS[get_command_from_user_input(text)](text)