"""Table structure: the column list and the primary key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Schema:
    """Names a table's primary-key column and its declared columns."""

    primary_key: str
    columns: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.columns = list(self.columns)

    def has_column(self, column: str) -> bool:
        """True if ``column`` is declared in this schema."""
        return column in self.columns

    def column_count(self) -> int:
        """Number of declared columns."""
        return len(self.columns)