"""Rendering of structured MongoDB queries as shell commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mongosqlgen.parser import QueryError, split_input_by_delimiters

__all__ = ["MongoCommand", "MongoQuery", "generate_mongo_query"]

_FILTER_OPERATORS = ("=", ">", "<", "!=", ">=", "<=")


class MongoCommand(str, Enum):
    """The MongoDB shell commands that can be generated."""

    FIND = "find"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "deleteOne"


@dataclass
class MongoQuery:
    """A MongoDB operation on one collection."""

    command: MongoCommand | str
    database: str = ""
    collections: str = ""
    fields: list[str] = field(default_factory=list)
    filter: str = ""
    values: list[Any] = field(default_factory=list)


def _render_filter(condition: str) -> str | None:
    """Render a ``name=value`` filter as document entries.

    Returns None when the filter holds nothing but operators.
    """
    try:
        parts = split_input_by_delimiters(condition, _FILTER_OPERATORS)
    except QueryError:
        return None
    if len(parts) % 2:
        raise QueryError(f"filter has a name without a value: {condition}")
    pairs = [f'{name}: "{value}"' for name, value in zip(parts[::2], parts[1::2])]
    if len(parts) > 2:
        return ", , ".join(pairs) + ", "
    return pairs[0]


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _render_assignments(fields: list[str], values: list[Any]) -> str:
    if len(values) < len(fields):
        raise QueryError("fewer values than fields")
    return ", ".join(f"{name}: {_format_value(value)}" for name, value in zip(fields, values))


def _call(query: MongoQuery, body: str) -> str:
    command = query.command.value if isinstance(query.command, MongoCommand) else query.command
    return f"db.{query.collections}.{command}({body})"


def _find(query: MongoQuery) -> str:
    rendered_filter: str | None = ""
    if query.filter and query.fields:
        rendered_filter = _render_filter(query.filter)
        if rendered_filter is None:
            return ""

    projection = ""
    last = len(query.fields) - 1
    for position, name in enumerate(query.fields):
        if name == "*":
            if not query.filter:
                return _call(query, "{" + projection + "}")
            projection += rendered_filter
            continue
        projection += f"{name}: 1"
        if position != last:
            projection += ", "
        else:
            return _call(query, "{" + rendered_filter + "}, {" + projection + "}")
    return _call(query, "{" + projection + "}")


def _insert(query: MongoQuery) -> str:
    return _call(query, "{" + _render_assignments(query.fields, query.values) + "}")


def _update(query: MongoQuery) -> str:
    body = ""
    if query.filter:
        rendered_filter = _render_filter(query.filter)
        if rendered_filter is None:
            return ""
        body = rendered_filter + "}, {$set: {"
    body += _render_assignments(query.fields, query.values)
    return _call(query, "{" + body + "}}")


def _delete(query: MongoQuery) -> str:
    body = ""
    if query.filter:
        rendered_filter = _render_filter(query.filter)
        if rendered_filter is None:
            return ""
        body = rendered_filter
    return _call(query, "{" + body + "}")


_RENDERERS = {
    MongoCommand.FIND: _find,
    MongoCommand.INSERT: _insert,
    MongoCommand.UPDATE: _update,
    MongoCommand.DELETE: _delete,
}


def generate_mongo_query(query: MongoQuery) -> str:
    """Render *query* as a shell command; unknown commands give an empty string."""
    try:
        command = MongoCommand(query.command)
    except ValueError:
        return ""
    return _RENDERERS[command](query)