import pytest

from mongosqlgen.mongo import MongoCommand, MongoQuery, generate_mongo_query
from mongosqlgen.parser import QueryError


def test_generate_single_insert_query():
    query = MongoQuery(
        command=MongoCommand.INSERT,
        database="test",
        collections="test",
        fields=["name", "age"],
        values=["John", 25],
    )
    assert generate_mongo_query(query) == 'db.test.insert({name: "John", age: 25})'


def test_generate_update_query():
    query = MongoQuery(
        command=MongoCommand.UPDATE,
        database="test",
        collections="test",
        fields=["name", "age"],
        values=["John", 25],
        filter="name=John",
    )
    assert (
        generate_mongo_query(query)
        == 'db.test.update({name: "John"}, {$set: {name: "John", age: 25}})'
    )


def test_generate_delete_query():
    query = MongoQuery(
        command=MongoCommand.DELETE,
        database="test",
        collections="test",
        filter="name=John",
    )
    assert generate_mongo_query(query) == 'db.test.deleteOne({name: "John"})'


def test_find_all():
    query = MongoQuery(command=MongoCommand.FIND, collections="users", fields=["*"])
    assert generate_mongo_query(query) == "db.users.find({})"


def test_find_all_with_filter():
    query = MongoQuery(
        command=MongoCommand.FIND, collections="users", fields=["*"], filter="firstName=John"
    )
    assert generate_mongo_query(query) == 'db.users.find({firstName: "John"})'


def test_find_projection():
    query = MongoQuery(
        command=MongoCommand.FIND, collections="users", fields=["firstName", "lastName"]
    )
    assert generate_mongo_query(query) == "db.users.find({}, {firstName: 1, lastName: 1})"


def test_find_projection_with_filter():
    query = MongoQuery(
        command=MongoCommand.FIND,
        collections="users",
        fields=["firstName", "lastName"],
        filter="firstName=John",
    )
    assert (
        generate_mongo_query(query)
        == 'db.users.find({firstName: "John"}, {firstName: 1, lastName: 1})'
    )


def test_find_without_fields():
    query = MongoQuery(command=MongoCommand.FIND, collections="users")
    assert generate_mongo_query(query) == "db.users.find({})"


def test_insert_float_value():
    query = MongoQuery(
        command=MongoCommand.INSERT, collections="items", fields=["price"], values=[1.5]
    )
    assert generate_mongo_query(query) == "db.items.insert({price: 1.500000})"


def test_insert_with_missing_values_raises():
    query = MongoQuery(
        command=MongoCommand.INSERT, collections="items", fields=["a", "b"], values=["x"]
    )
    with pytest.raises(QueryError):
        generate_mongo_query(query)


def test_update_without_filter():
    query = MongoQuery(
        command=MongoCommand.UPDATE, collections="test", fields=["name"], values=["John"]
    )
    assert generate_mongo_query(query) == 'db.test.update({name: "John"}})'


def test_delete_without_filter():
    query = MongoQuery(command=MongoCommand.DELETE, collections="test")
    assert generate_mongo_query(query) == "db.test.deleteOne({})"


def test_filter_of_only_operators_gives_empty_string():
    query = MongoQuery(command=MongoCommand.DELETE, collections="test", filter="==")
    assert generate_mongo_query(query) == ""


def test_filter_without_value_raises():
    query = MongoQuery(command=MongoCommand.DELETE, collections="test", filter="a=b=c")
    with pytest.raises(QueryError):
        generate_mongo_query(query)


def test_unknown_command_gives_empty_string():
    query = MongoQuery(command="aggregate", collections="test")
    assert generate_mongo_query(query) == ""


def test_command_accepts_plain_string():
    query = MongoQuery(command="deleteOne", collections="test", filter="name=John")
    assert generate_mongo_query(query) == 'db.test.deleteOne({name: "John"})'