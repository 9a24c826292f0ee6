"""A single record: a mapping of column name to value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from sysforge.db.value import Value


@dataclass
class Row:
    """Column values of one record."""

    fields: Dict[str, Value] = field(default_factory=dict)

    def set(self, column: str, value: Value) -> None:
        """Insert or overwrite ``column`` with ``value``."""
        self.fields[column] = value

    def get(self, column: str) -> Value:
        """Return the value of ``column``, or None if absent.

        A stored NULL is also None; use ``has`` to tell the two apart.
        """
        return self.fields.get(column)

    def has(self, column: str) -> bool:
        """True if this row holds a value (possibly NULL) for ``column``."""
        return column in self.fields

    def column_count(self) -> int:
        """Number of distinct columns set on this row."""
        return len(self.fields)