import pytest

from mongosqlgen.generator import generate_mongo_query_from_sql_query
from mongosqlgen.parser import QueryError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("SELECT * FROM users", "db.users.find({})"),
        (
            "SELECT * FROM users WHERE firstName = 'John'",
            'db.users.find({firstName: "John"})',
        ),
        (
            "SELECT firstName, lastName FROM users",
            "db.users.find({}, {firstName: 1, lastName: 1})",
        ),
        (
            "SELECT firstName, lastName FROM users WHERE firstName = 'John'",
            'db.users.find({firstName: "John"}, {firstName: 1, lastName: 1})',
        ),
        (
            "INSERT INTO users (firstName, lastName) VALUES ('John', 'Doe')",
            'db.users.insert({firstName: "John", lastName: "Doe"})',
        ),
        (
            "UPDATE users SET firstName = 'John' WHERE lastName = 'Doe'",
            'db.users.update({lastName: "Doe"}, {$set: {firstName: "John"}})',
        ),
        (
            "UPDATE users SET firstName = 'John', lastName = 'Doe' WHERE lastName = 'Doe'",
            'db.users.update({lastName: "Doe"}, {$set: {firstName: "John", lastName: "Doe"}})',
        ),
        (
            "DELETE FROM users WHERE firstName = 'John'",
            'db.users.deleteOne({firstName: "John"})',
        ),
    ],
)
def test_generate_mongo_query_from_sql_query(text, expected):
    assert generate_mongo_query_from_sql_query(text) == expected


def test_unknown_statement_raises():
    with pytest.raises(QueryError):
        generate_mongo_query_from_sql_query("UNKNOWN")


def test_unsupported_keyword_raises():
    with pytest.raises(QueryError):
        generate_mongo_query_from_sql_query("DROP TABLE users")


def test_mismatched_insert_raises():
    with pytest.raises(QueryError):
        generate_mongo_query_from_sql_query("INSERT INTO users (name, age) VALUES ('Bob')")