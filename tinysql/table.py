"""In-memory tables and the database that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Union

from tinysql.errors import TinySQLError

Data = Union[int, str]
Row = list  # a list of Data values, one per column


class ColumnType(enum.Enum):
    """SQL type of a column."""

    INTEGER = "INTEGER"
    TEXT = "TEXT"


def column_type(type_str: str) -> ColumnType:
    """Return the column type named by ``type_str``."""
    try:
        return ColumnType(type_str)
    except ValueError:
        raise TinySQLError(f"Unkown column type {type_str}.") from None


def type_string(column_type: ColumnType) -> str:
    """Return the SQL name of a column type."""
    if isinstance(column_type, ColumnType):
        return column_type.value
    return "UNKOWN TYPE"


@dataclass(frozen=True)
class Column:
    """A named, typed column."""

    name: str
    type: ColumnType


@dataclass
class Table:
    """Columns and the rows stored under them."""

    name: str = ""
    columns: list[Column] = field(default_factory=list)
    rows: list[list[Data]] = field(default_factory=list)

    def add_column(self, name: str, column_type: ColumnType) -> None:
        """Append a column to the table."""
        self.columns.append(Column(name, column_type))

    def add_row(self, row) -> None:
        """Append a row of values to the table."""
        self.rows.append(list(row))

    def remove_rows(self, predicate: Callable[[list[Data]], bool]) -> int:
        """Remove every row for which ``predicate`` is true; return how many went."""
        kept = [row for row in self.rows if not predicate(row)]
        removed = len(self.rows) - len(kept)
        self.rows[:] = kept
        return removed

    def column_index(self, name: str) -> int:
        """Return the position of the column called ``name``."""
        for index, column in enumerate(self.columns):
            if column.name == name:
                return index
        raise TinySQLError(
            f"Where Error: Column '{name}' does not exist in table '{self.name}'."
        )


@dataclass
class Database:
    """A set of tables keyed by name."""

    tables: dict[str, Table] = field(default_factory=dict)

    def add_table(self, name: str, table: Table) -> None:
        """Add a table, refusing a name that is already taken."""
        if name in self.tables:
            raise TinySQLError(f"Error: table with name '{name}' already exists.")
        self.tables[name] = table

    def get_table(self, name: str) -> Table:
        """Return the table called ``name``."""
        try:
            return self.tables[name]
        except KeyError:
            raise TinySQLError(f"Table not found: {name}.") from None

    def remove_table(self, name: str) -> None:
        """Remove the table called ``name``."""
        if self.tables.pop(name, None) is None:
            raise TinySQLError(f"Drop Error: Table '{name}' does not exist.")