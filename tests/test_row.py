from sysforge.db.row import Row


def test_new_row_is_empty():
    assert Row().column_count() == 0


def test_set_and_get_integer():
    r = Row()
    r.set("id", 1)
    assert r.get("id") == 1


def test_get_missing_column_returns_none():
    r = Row()
    assert r.get("nonexistent") is None
    assert not r.has("nonexistent")


def test_set_overwrites_existing_value():
    r = Row()
    r.set("x", 1)
    r.set("x", 99)
    assert r.get("x") == 99
    assert r.column_count() == 1


def test_has_existing_and_missing_column():
    r = Row()
    r.set("name", "Alice")
    assert r.has("name")
    assert not r.has("age")


def test_column_count():
    r = Row()
    r.set("a", 1)
    r.set("b", True)
    assert r.column_count() == 2
    r.set("a", None)
    assert r.column_count() == 2


def test_null_value_stored():
    r = Row()
    r.set("optional", None)
    assert r.has("optional")
    assert r.get("optional") is None
    assert r.column_count() == 1


def test_float_and_bool_values():
    r = Row()
    r.set("score", 9.5)
    r.set("active", True)
    assert r.get("score") == 9.5
    assert r.get("active") is True


def test_rows_with_same_fields_are_equal():
    a = Row()
    b = Row()
    a.set("id", 1)
    b.set("id", 1)
    assert a == b
    b.set("name", "X")
    assert a != b


def test_rows_do_not_share_storage():
    a = Row()
    b = Row()
    a.set("id", 1)
    assert b.column_count() == 0