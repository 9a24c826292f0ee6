import pytest

from sysforge.db.errors import DuplicateKeyError, MissingPrimaryKeyError
from sysforge.db.row import Row
from sysforge.db.schema import Schema
from sysforge.db.table import Table

PEOPLE = ((1, "Alice", 30), (2, "Bob", 20), (3, "Carol", 35))


def _table(*people):
    table = Table("users", Schema("id", ["id", "name", "age"]))
    for row_id, name, age in people:
        table.insert(Row({"id": row_id, "name": name, "age": age}))
    return table


def _names(rows):
    return [row.get("name") for row in rows]


def by_id(row_id):
    return lambda r: r.get("id") == row_id


def by_name(name):
    return lambda r: r.get("name") == name


def age_at_least(limit):
    return lambda r: r.get("age") >= limit


def test_empty_table_count_is_zero():
    assert _table().count() == 0


def test_insert_and_select_all_keep_order():
    table = _table(*PEOPLE)
    assert table.count() == 3
    assert _names(table.select_all()) == ["Alice", "Bob", "Carol"]


def test_insert_duplicate_pk_raises():
    table = _table(*PEOPLE[:1])
    with pytest.raises(DuplicateKeyError):
        table.insert(Row({"id": 1, "name": "Alice2", "age": 31}))
    assert table.count() == 1


def test_insert_missing_pk_raises():
    table = _table()
    with pytest.raises(MissingPrimaryKeyError):
        table.insert(Row({"name": "No ID"}))
    assert table.count() == 0


def test_null_primary_key_counts_as_present():
    table = _table()
    table.insert(Row({"id": None}))
    assert table.count() == 1
    with pytest.raises(DuplicateKeyError):
        table.insert(Row({"id": None}))


def test_keys_of_different_types_are_distinct():
    table = _table()
    for key in (1, True, 1.0, "1"):
        table.insert(Row({"id": key}))
    assert table.count() == 4


@pytest.mark.parametrize(
    "predicate, expected",
    [
        (age_at_least(30), ["Alice", "Carol"]),
        (age_at_least(31), ["Carol"]),
        (by_name("Nobody"), []),
        (by_id(2), ["Bob"]),
        (by_id(99), []),
    ],
)
def test_select_where(predicate, expected):
    assert _names(_table(*PEOPLE).select_where(predicate)) == expected


@pytest.mark.parametrize(
    "predicate, removed, remaining",
    [
        (by_name("Bob"), 1, ["Alice", "Carol"]),
        (by_id(999), 0, ["Alice", "Bob", "Carol"]),
        (age_at_least(30), 2, ["Bob"]),
    ],
)
def test_delete_where(predicate, removed, remaining):
    table = _table(*PEOPLE)
    assert table.delete_where(predicate) == removed
    assert _names(table.select_all()) == remaining


def test_deleted_key_can_be_inserted_again():
    table = _table(*PEOPLE)
    table.delete_where(by_id(1))
    table.insert(Row({"id": 1, "name": "Again", "age": 40}))
    assert _names(table.select_where(by_id(1))) == ["Again"]


@pytest.mark.parametrize(
    "predicate, age, updated, ages",
    [
        (by_name("Alice"), 31, 1, [31, 20, 35]),
        (by_id(999), 0, 0, [30, 20, 35]),
        (age_at_least(30), 0, 2, [0, 20, 0]),
    ],
)
def test_update_where(predicate, age, updated, ages):
    table = _table(*PEOPLE)
    assert table.update_where(predicate, lambda r: r.set("age", age)) == updated
    assert [row.get("age") for row in table.select_all()] == ages


def test_insert_stores_a_copy():
    table = _table()
    row = Row({"id": 1, "name": "Alice", "age": 30})
    table.insert(row)
    row.set("name", "Changed")
    assert _names(table.select_all()) == ["Alice"]


def test_name_and_schema_are_kept():
    table = _table()
    assert (table.name, table.schema.primary_key) == ("users", "id")