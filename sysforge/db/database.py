"""A collection of named tables."""

from __future__ import annotations

from typing import Dict, List, Optional

from sysforge.db.schema import Schema
from sysforge.db.table import Table


class Database:
    """Holds tables by name."""

    def __init__(self) -> None:
        self._tables: Dict[str, Table] = {}

    def create_table(self, name: str, schema: Schema) -> None:
        """Create an empty table, replacing any table of the same name."""
        self._tables[name] = Table(name, schema)

    def get_table(self, name: str) -> Optional[Table]:
        """The table called ``name``, or None if it does not exist."""
        return self._tables.get(name)

    def drop_table(self, name: str) -> bool:
        """Remove a table; return True if it existed."""
        return self._tables.pop(name, None) is not None

    def table_names(self) -> List[str]:
        """Names of all tables."""
        return list(self._tables)

    def table_count(self) -> int:
        """Number of tables."""
        return len(self._tables)