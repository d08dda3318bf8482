# mongosqlgen

Turn simple SQL statements into MongoDB shell queries.

`mongosqlgen` reads a small subset of SQL: `SELECT`, `INSERT`, `UPDATE` and
`DELETE` against a single table, with an optional `WHERE` clause of the
form `column = 'value'`. Each statement becomes the matching
`db.<collection>.<command>(...)` call.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

The whole pipeline, from SQL text to MongoDB query, is one call:

```python
from mongosqlgen.generator import generate_mongo_query_from_sql_query

generate_mongo_query_from_sql_query("SELECT * FROM users")
# 'db.users.find({})'

generate_mongo_query_from_sql_query("SELECT * FROM users WHERE firstName = 'John'")
# 'db.users.find({firstName: "John"})'

generate_mongo_query_from_sql_query("SELECT firstName, lastName FROM users")
# 'db.users.find({}, {firstName: 1, lastName: 1})'

generate_mongo_query_from_sql_query("SELECT firstName, lastName FROM users WHERE firstName = 'John'")
# 'db.users.find({firstName: "John"}, {firstName: 1, lastName: 1})'

generate_mongo_query_from_sql_query("INSERT INTO users (firstName, lastName) VALUES ('John', 'Doe')")
# 'db.users.insert({firstName: "John", lastName: "Doe"})'

generate_mongo_query_from_sql_query("UPDATE users SET firstName = 'John' WHERE lastName = 'Doe'")
# 'db.users.update({lastName: "Doe"}, {$set: {firstName: "John"}})'

generate_mongo_query_from_sql_query("DELETE FROM users WHERE firstName = 'John'")
# 'db.users.deleteOne({firstName: "John"})'
```

Statements that cannot be read raise `mongosqlgen.parser.QueryError`, a
subclass of `ValueError`. This happens, for example, when the first word is
not a known command or when an `INSERT` names a different number of columns
and values.

The parsed SQL query and the resulting MongoDB query are logged at `DEBUG`
level on the `mongosqlgen.generator` logger.

### The individual steps

Each stage can also be used on its own:

- `mongosqlgen.sql.convert_user_input_to_sql_query(text)` parses SQL text
  into an `SqlQuery` with `command`, `database`, `table`, `columns`,
  `filter` and `values`. The per-statement parsers
  `handle_select_user_input`, `handle_insert_user_input`,
  `handle_update_user_input` and `handle_delete_user_input` are available
  too, as are `parse_sql_command` and `get_command_from_user_input`.
- `mongosqlgen.converter.convert_sql_query_to_mongo_query(query)` maps an
  `SqlQuery` onto a `MongoQuery`; `convert_sql_command_to_mongo_command`
  maps a single `SqlCommand` onto a `MongoCommand`.
- `mongosqlgen.mongo.generate_mongo_query(query)` renders a `MongoQuery` as
  shell text. A command it does not know yields an empty string.

The command mapping is:

| SQL      | MongoDB     |
|----------|-------------|
| `SELECT` | `find`      |
| `INSERT` | `insert`    |
| `UPDATE` | `update`    |
| `DELETE` | `deleteOne` |

When a `MongoQuery` is built by hand, string values are quoted, integers are
written as they are and floats are written with six decimal places:

```python
from mongosqlgen.mongo import MongoCommand, MongoQuery, generate_mongo_query

generate_mongo_query(MongoQuery(
    command=MongoCommand.INSERT,
    collections="test",
    fields=["name", "age"],
    values=["John", 25],
))
# 'db.test.insert({name: "John", age: 25})'
```

`mongosqlgen.parser` holds the small tokenising helpers that the SQL reader
is built on: `parse_user_input`, `find_after`, `find_between`,
`contains_command`, `split_input_by_delimiters` and `count_occurrences`.

## Command line

Installing the package also installs a `mongosqlgen` command:

```
mongosqlgen
```

At present it only prints a short banner and exits. It does not read or
translate SQL; use `generate_mongo_query_from_sql_query` from Python for
that.

## Limitations

- Only one table per statement. Joins, ordering, grouping and limits are not
  supported.
- A `WHERE` clause is read as `column = 'value'`; its value is always
  rendered as a string.
- Values parsed from SQL text are kept as strings, so `VALUES ('Bob', 20)`
  gives `age: "20"`.
- Quoting is simple. Values may not contain spaces, commas or quotes.
- Queries are only generated as text; nothing connects to a database.