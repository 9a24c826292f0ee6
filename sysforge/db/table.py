"""In-memory storage for a single relation."""

from __future__ import annotations

from typing import Callable, List, Tuple

from sysforge.db.errors import DuplicateKeyError, MissingPrimaryKeyError
from sysforge.db.row import Row
from sysforge.db.schema import Schema
from sysforge.db.value import Value

Predicate = Callable[[Row], bool]
Updater = Callable[[Row], None]


def _key(value: Value) -> Tuple[type, Value]:
    # Keep booleans, integers and floats apart: True, 1 and 1.0 are distinct keys.
    return (type(value), value)


class Table:
    """Rows kept in insertion order, unique on the schema's primary key."""

    def __init__(self, name: str, schema: Schema) -> None:
        self.name = name
        self.schema = schema
        self._rows: List[Row] = []

    def insert(self, row: Row) -> None:
        """Store a copy of ``row``.

        Raises MissingPrimaryKeyError if the primary-key column is absent and
        DuplicateKeyError if a row with the same primary key already exists.
        """
        primary_key = self.schema.primary_key
        if not row.has(primary_key):
            raise MissingPrimaryKeyError()
        key = _key(row.get(primary_key))
        if any(
            existing.has(primary_key) and _key(existing.get(primary_key)) == key
            for existing in self._rows
        ):
            raise DuplicateKeyError()
        self._rows.append(Row(dict(row.fields)))

    def select_all(self) -> List[Row]:
        """Every row, in insertion order."""
        return list(self._rows)

    def select_where(self, predicate: Predicate) -> List[Row]:
        """Rows for which ``predicate`` is true, in insertion order."""
        return [row for row in self._rows if predicate(row)]

    def delete_where(self, predicate: Predicate) -> int:
        """Delete rows matching ``predicate``; return how many were removed."""
        kept = [row for row in self._rows if not predicate(row)]
        removed = len(self._rows) - len(kept)
        self._rows = kept
        return removed

    def update_where(self, predicate: Predicate, updater: Updater) -> int:
        """Apply ``updater`` to each row matching ``predicate``; return the count."""
        updated = 0
        for row in self._rows:
            if predicate(row):
                updater(row)
                updated += 1
        return updated

    def count(self) -> int:
        """Number of rows in the table."""
        return len(self._rows)