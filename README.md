# tinysql

A tiny in-memory SQL database. It keeps tables in memory and understands a
small subset of SQL. It comes with an interactive shell.

## Installation

```
pip install .
```

## The shell

```
tinysql
```

`python -m tinysql.cli` starts the same shell.

The prompt is `> `. Type one statement per line. Empty lines are ignored.
Besides SQL, the shell knows two commands:

- `.tables`: list every table with its row count, as `  -users (1 rows)`
- `.quit`: leave the shell. End of input also works.

When a statement fails, the shell prints the error and keeps running. It
prints a blank line after each command.

```
> CREATE TABLE users (name TEXT, age INTEGER, balance INTEGER)
Succesfully created table 'users'!

> INSERT INTO users VALUES ('Ayellet', 21, 1000)
Succesfully added 1 row to table 'users'!

> SELECT name, age FROM users WHERE age > 18 ORDER BY age DESC
+---------+-----+
| name    | age |
+---------+-----+
| Ayellet | 21  |
+---------+-----+

> DELETE FROM users WHERE age < 30
Delete succesfull, 1 rows deleted!
```

If a SELECT matches no rows, the shell prints `0 rows were found.`

## Supported SQL

- `CREATE TABLE name (col TYPE, ...)`: the column types are `INTEGER` and
  `TEXT`, written in upper case.
- `INSERT INTO name VALUES (v1, v2, ...)`: give exactly one value per column,
  and each value must have the type of its column.
- `SELECT cols FROM name [WHERE ...] [ORDER BY col ASC|DESC]`: you can mix `*`
  with column names, for example `SELECT *, name FROM users`. `ORDER BY` needs
  a direction.
- `DELETE FROM name WHERE ...`: the `WHERE` clause is required.
- `DROP TABLE name`

### WHERE clauses

A `WHERE` clause is made of conditions of the form `column OP literal`. `OP`
is one of `=`, `!=`, `<`, `<=`, `>` and `>=`.

- Join conditions with `AND` and `OR`. `AND` binds tighter than `OR`.
- The literal must have the type of its column. Text is compared
  lexicographically.

### Syntax rules

- Keywords are case-insensitive.
- Table and column names are made of letters and underscores.
- String literals can use single or double quotes.
- Integer literals are whole numbers and may be negative. They must fit in
  32 bits.

## Using it from Python

```python
from tinysql.engine import Engine
from tinysql.parser import parse
from tinysql.tokenizer import tokenize

engine = Engine()
engine.execute_statement(parse(tokenize("CREATE TABLE t (id INTEGER, name TEXT)")))
engine.execute_statement(parse(tokenize("INSERT INTO t VALUES (1, 'one')")))

result = engine.execute_select_statement(parse(tokenize("SELECT * FROM t")))
print(result.column_names, result.rows)  # ['id', 'name'] [[1, 'one']]
```

`Engine.execute_statement` runs any statement and prints a summary of what it
did. `Engine.execute_select_statement` returns a `SelectResult` and prints
nothing. `Engine.tables` maps table names to `tinysql.table.Table` objects.

For display, `tinysql.printer.format_select_result` and
`tinysql.printer.format_tables` return the text the shell prints.

Failures raise `tinysql.errors.TinySQLError`.

## What it does not do

- Data lives only in memory. Nothing is saved to disk, so all tables are lost
  when the shell exits.
- There is no `UPDATE` statement.
- There are no joins, aggregates or `NULL` values.
- Only one statement can be run per line.