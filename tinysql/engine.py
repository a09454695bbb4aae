"""Executing parsed statements against an in-memory database."""

from __future__ import annotations

import operator
from typing import Callable, Sequence

from tinysql.errors import TinySQLError
from tinysql.parser import (
    CreateStatement,
    DeleteStatement,
    DropStatement,
    InsertStatement,
    OpType,
    SelectResult,
    SelectStatement,
    Statement,
    WhereClause,
)
from tinysql.printer import print_select_result
from tinysql.table import ColumnType, Data, Database, Table, column_type, type_string

_COMPARISONS: dict[OpType, Callable[[object, object], bool]] = {
    OpType.EQ: operator.eq,
    OpType.GT: operator.gt,
    OpType.LT: operator.lt,
    OpType.GTE: operator.ge,
    OpType.LTE: operator.le,
    OpType.NEQ: operator.ne,
}


def _is_int(value: Data) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _order_key(value: Data) -> tuple[int, Data]:
    # Integers sort before strings, and values of the same kind by value.
    return (0, value) if _is_int(value) else (1, value)


def types_match(expected_type: ColumnType, value: Data) -> bool:
    """Tell whether ``value`` may be stored in a column of ``expected_type``."""
    if expected_type is ColumnType.INTEGER and not _is_int(value):
        return False
    if expected_type is ColumnType.TEXT and not isinstance(value, str):
        return False
    return True


def evaluate(lhs: Data, op: OpType, rhs: Data) -> bool:
    """Compare two values with ``op``."""
    comparison = _COMPARISONS.get(op)
    if comparison is None:
        return False
    return comparison(_order_key(lhs), _order_key(rhs))


def evaluate_where_clause(table: Table, row: Sequence[Data], where: WhereClause) -> bool:
    """Tell whether every condition of at least one group holds for ``row``."""
    for group in where.condition_groups:
        for condition in group:
            index = table.column_index(condition.column_name)
            expected = table.columns[index].type
            if not types_match(expected, condition.value):
                raise TinySQLError(
                    f"Where Error: Column '{condition.column_name}' expects "
                    f"{type_string(expected)}."
                )
            if not evaluate(row[index], condition.op, condition.value):
                break
        else:
            return True
    return False


class Engine:
    """Runs statements against the database it owns."""

    def __init__(self) -> None:
        self._db = Database()

    @property
    def tables(self) -> dict[str, Table]:
        """The tables of the database, keyed by name."""
        return dict(self._db.tables)

    def execute_statement(self, statement: Statement) -> None:
        """Run a statement and print what it did."""
        if isinstance(statement, CreateStatement):
            self._execute_create(statement)
            print(f"Succesfully created table '{statement.table_name}'!")
        elif isinstance(statement, InsertStatement):
            self._execute_insert(statement)
            print(f"Succesfully added 1 row to table '{statement.table_name}'!")
        elif isinstance(statement, SelectStatement):
            result = self.execute_select_statement(statement)
            print_select_result(result.column_names, result.rows)
        elif isinstance(statement, DeleteStatement):
            deleted = self._execute_delete(statement)
            print(f"Delete succesfull, {deleted} rows deleted!")
        elif isinstance(statement, DropStatement):
            self._db.remove_table(statement.table_name)
            print(f"Succesfully dropped table '{statement.table_name}'!")
        else:
            raise TinySQLError("Unkown statement type.")

    def execute_select_statement(self, statement: SelectStatement) -> SelectResult:
        """Return the columns and rows a SELECT asks for."""
        table = self._db.get_table(statement.table_name)
        table_names = [column.name for column in table.columns]

        keep: list[int] = []
        names: list[str] = []
        for wanted in statement.column_names:
            if wanted == "*":
                keep.extend(range(len(table_names)))
                names.extend(table_names)
                continue
            if wanted not in table_names:
                raise TinySQLError(
                    f"Select Error: Table '{statement.table_name}' does not have "
                    f"a column named '{wanted}'."
                )
            keep.append(table_names.index(wanted))
            names.append(wanted)

        where = statement.where
        if where is not None:
            selected = [row for row in table.rows if evaluate_where_clause(table, row, where)]
        else:
            selected = list(table.rows)

        if statement.order is not None:
            order_index = table.column_index(statement.order.column_name)
            selected.sort(
                key=lambda row: _order_key(row[order_index]),
                reverse=not statement.order.is_asc,
            )

        rows = [[row[index] for index in keep] for row in selected]
        return SelectResult(names, rows)

    def _execute_create(self, statement: CreateStatement) -> None:
        table = Table(statement.table_name)
        for name, type_name in statement.columns:
            table.add_column(name, column_type(type_name))
        self._db.add_table(statement.table_name, table)

    def _execute_insert(self, statement: InsertStatement) -> None:
        table = self._db.get_table(statement.table_name)
        columns = table.columns
        if len(statement.values) != len(columns):
            raise TinySQLError(
                f"Insert Error: Column count mismatch, expected {len(columns)} "
                f"got {len(statement.values)}."
            )
        for column, value in zip(columns, statement.values):
            if not types_match(column.type, value):
                raise TinySQLError(
                    f"Type Error: Column '{column.name}' expects type "
                    f"{type_string(column.type)}."
                )
        table.add_row(statement.values)

    def _execute_delete(self, statement: DeleteStatement) -> int:
        table = self._db.get_table(statement.table_name)
        return table.remove_rows(
            lambda row: evaluate_where_clause(table, row, statement.where)
        )