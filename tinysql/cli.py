"""Interactive console that reads queries line by line."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from tinysql.engine import Engine
from tinysql.errors import TinySQLError
from tinysql.parser import parse
from tinysql.printer import print_tables
from tinysql.tokenizer import tokenize


def execute_console_command(line: str, engine: Engine) -> None:
    """Run a console line: ``.tables`` lists tables, anything else is a query."""
    if line == ".tables":
        print_tables(engine.tables)
        return
    engine.execute_statement(parse(tokenize(line)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines from standard input and run them until ``.quit`` or end of input."""
    engine = Engine()
    while True:
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print("\nEOF received, exiting.")
            break
        if line.endswith("\n"):
            line = line[:-1]
        if line == ".quit":
            break
        if not line:
            continue
        try:
            execute_console_command(line, engine)
        except TinySQLError as error:
            print(error)
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())