"""End-to-end generation of MongoDB shell commands from SQL text."""

from __future__ import annotations

import logging

from mongosqlgen.converter import convert_sql_query_to_mongo_query
from mongosqlgen.mongo import generate_mongo_query
from mongosqlgen.sql import convert_user_input_to_sql_query

__all__ = ["generate_mongo_query_from_sql_query"]

_log = logging.getLogger(__name__)


def generate_mongo_query_from_sql_query(text: str) -> str:
    """Translate one SQL statement into a MongoDB shell command."""
    sql_query = convert_user_input_to_sql_query(text)
    _log.debug("SQL query: %s", sql_query)

    mongo_query = convert_sql_query_to_mongo_query(sql_query)
    _log.debug("Mongo query: %s", mongo_query)

    return generate_mongo_query(mongo_query)