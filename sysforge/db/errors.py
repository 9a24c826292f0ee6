"""Errors raised by the in-memory database."""

from __future__ import annotations


class DbError(Exception):
    """Base class for database errors; errors of one kind with one message are equal."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DbError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingPrimaryKeyError(DbError):
    """A row lacks its table's primary-key column."""

    def __init__(self) -> None:
        super().__init__("missing primary key")


class DuplicateKeyError(DbError):
    """A row with the same primary key already exists."""

    def __init__(self) -> None:
        super().__init__("duplicate key")


class TableNotFoundError(DbError):
    """The named table does not exist."""

    def __init__(self) -> None:
        super().__init__("table not found")


class ColumnNotFoundError(DbError):
    """The named column does not exist."""

    def __init__(self, column: str) -> None:
        super().__init__(f"column not found: {column}")
        self.column = column