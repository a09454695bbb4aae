"""Text rendering of tables and query results."""

from __future__ import annotations

from typing import Mapping, Sequence

from tinysql.table import Data, Table

_NO_ROWS = "0 rows were found.\n"


def data_to_string(value: Data) -> str:
    """Return the display text of a stored value."""
    if isinstance(value, int):
        return str(value)
    return value


def format_tables(tables: Mapping[str, Table]) -> str:
    """Return one line per table with its name and row count."""
    return "".join(
        f"  -{name} ({len(table.rows)} rows)\n" for name, table in tables.items()
    )


def format_select_result(
    column_names: Sequence[str], rows: Sequence[Sequence[Data]]
) -> str:
    """Return the rows drawn as a boxed text table under their column names."""
    if not rows:
        return _NO_ROWS

    widths = [len(name) for name in column_names]
    for row in rows:
        for index, value in enumerate(row):
            widths[index] = max(widths[index], len(data_to_string(value)))

    separator = "+" + "".join("-" * (width + 2) + "+" for width in widths)

    def line(cells: Sequence[str]) -> str:
        return "|" + "".join(
            f" {cell.ljust(width)} |" for cell, width in zip(cells, widths)
        )

    lines = [separator, line(list(column_names)), separator]
    lines.extend(line([data_to_string(value) for value in row]) for row in rows)
    lines.append(separator)
    return "\n".join(lines) + "\n"


def print_tables(tables: Mapping[str, Table]) -> None:
    """Print one line per table with its name and row count."""
    print(format_tables(tables), end="")


def print_select_result(
    column_names: Sequence[str], rows: Sequence[Sequence[Data]]
) -> None:
    """Print the rows of a query result as a boxed text table."""
    print(format_select_result(column_names, rows), end="")