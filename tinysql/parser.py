"""Turning a token list into statement objects."""

from __future__ import annotations

import enum
import re
import string
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence

from tinysql.errors import TinySQLError
from tinysql.table import Data
from tinysql.tokenizer import Token, TokenType

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_TRAILING_COMMA = (
    "Error syntax: Trailing comma found before ')', eg: (name TEXT, )"
)
_STAR = "*"


class StatementType(enum.Enum):
    """Kind of a statement."""

    CREATE = enum.auto()
    INSERT = enum.auto()
    SELECT = enum.auto()
    DELETE = enum.auto()
    DROP = enum.auto()


class OpType(enum.Enum):
    """Comparison operator of a condition."""

    EQ = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    NEQ = "!="


@dataclass
class Statement:
    """Base of every statement; subclasses set ``type``."""

    type: ClassVar[StatementType]


@dataclass
class CreateStatement(Statement):
    """CREATE TABLE: a table name and (column name, type name) pairs."""

    type: ClassVar[StatementType] = StatementType.CREATE
    table_name: str = ""
    columns: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class InsertStatement(Statement):
    """INSERT INTO: a table name and one row of values."""

    type: ClassVar[StatementType] = StatementType.INSERT
    table_name: str = ""
    values: list[Data] = field(default_factory=list)


@dataclass
class Condition:
    """A single ``column op value`` comparison."""

    column_name: str
    op: OpType
    value: Data


@dataclass
class WhereClause:
    """Groups of conditions: each group is AND-ed, groups are OR-ed."""

    condition_groups: list[list[Condition]] = field(default_factory=list)


@dataclass
class OrderClause:
    """ORDER BY column and direction."""

    column_name: str
    is_asc: bool


@dataclass
class SelectStatement(Statement):
    """SELECT with optional WHERE and ORDER BY clauses."""

    type: ClassVar[StatementType] = StatementType.SELECT
    column_names: list[str] = field(default_factory=list)
    table_name: str = ""
    where: Optional[WhereClause] = None
    order: Optional[OrderClause] = None


@dataclass
class SelectResult:
    """Column names and rows produced by a SELECT."""

    column_names: list[str] = field(default_factory=list)
    rows: list[list[Data]] = field(default_factory=list)


@dataclass
class DeleteStatement(Statement):
    """DELETE FROM with a required WHERE clause."""

    type: ClassVar[StatementType] = StatementType.DELETE
    table_name: str = ""
    where: WhereClause = field(default_factory=WhereClause)


@dataclass
class DropStatement(Statement):
    """DROP TABLE."""

    type: ClassVar[StatementType] = StatementType.DROP
    table_name: str = ""


class Parser:
    """Builds one statement from a sequence of tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self._pos = 0

    def parse(self) -> Statement:
        """Return the statement the tokens describe."""
        if self._match(TokenType.KEYWORD, "CREATE"):
            return self._parse_create()
        if self._match(TokenType.KEYWORD, "INSERT"):
            return self._parse_insert()
        if self._match(TokenType.KEYWORD, "SELECT"):
            return self._parse_select()
        if self._match(TokenType.KEYWORD, "DELETE"):
            return self._parse_delete()
        if self._match(TokenType.KEYWORD, "DROP"):
            return self._parse_drop()
        raise TinySQLError(f"Syntax Error: Unexpected token {self._peek().value}.")

    def _parse_create(self) -> CreateStatement:
        statement = CreateStatement()
        self._expect(TokenType.KEYWORD, "TABLE")
        statement.table_name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.PUNCTUATION, "(")
        while True:
            name = self._expect(TokenType.IDENTIFIER).value
            type_name = self._expect(TokenType.IDENTIFIER).value
            statement.columns.append((name, type_name))
            if not self._next_in_list():
                break
        self._expect(TokenType.PUNCTUATION, ")")
        return statement

    def _parse_insert(self) -> InsertStatement:
        statement = InsertStatement()
        self._expect(TokenType.KEYWORD, "INTO")
        statement.table_name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.KEYWORD, "VALUES")
        self._expect(TokenType.PUNCTUATION, "(")
        while True:
            statement.values.append(resolve_data(self._expect(TokenType.LITERAL)))
            if not self._next_in_list():
                break
        self._expect(TokenType.PUNCTUATION, ")")
        return statement

    def _parse_select(self) -> SelectStatement:
        statement = SelectStatement()
        while True:
            if self._peek().value == _STAR:
                column = self._expect(TokenType.PUNCTUATION, _STAR)
            else:
                column = self._expect(TokenType.IDENTIFIER)
            statement.column_names.append(column.value)
            if not self._next_in_list():
                break
        self._expect(TokenType.KEYWORD, "FROM")
        statement.table_name = self._expect(TokenType.IDENTIFIER).value
        if self._match(TokenType.KEYWORD, "WHERE"):
            statement.where = self._parse_where()
        if self._match(TokenType.KEYWORD, "ORDER"):
            self._expect(TokenType.KEYWORD, "BY")
            column_name = self._expect(TokenType.IDENTIFIER).value
            direction = self._expect(TokenType.KEYWORD).value
            statement.order = OrderClause(column_name, direction == "ASC")
        return statement

    def _parse_drop(self) -> DropStatement:
        self._expect(TokenType.KEYWORD, "TABLE")
        return DropStatement(table_name=self._expect(TokenType.IDENTIFIER).value)

    def _parse_delete(self) -> DeleteStatement:
        self._expect(TokenType.KEYWORD, "FROM")
        table_name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.KEYWORD, "WHERE")
        return DeleteStatement(table_name=table_name, where=self._parse_where())

    def _parse_where(self) -> WhereClause:
        result = WhereClause()
        group: list[Condition] = []
        while True:
            column_name = self._expect(TokenType.IDENTIFIER).value
            op = get_operator(self._expect(TokenType.OPERATOR).value)
            value = resolve_data(self._expect(TokenType.LITERAL))
            group.append(Condition(column_name, op, value))

            upcoming = self._peek()
            if upcoming.type is TokenType.END_OF_QUERY or upcoming.value == "ORDER":
                result.condition_groups.append(group)
                break

            gate = self._expect(TokenType.KEYWORD).value
            if gate == "OR":
                result.condition_groups.append(group)
                group = []
            elif gate != "AND":
                raise TinySQLError(f"Syntax Error: Expected AND/OR, got '{gate}'.")
        return result

    def _next_in_list(self) -> bool:
        """Consume a list comma; reject a comma directly before ')'."""
        if not self._match(TokenType.PUNCTUATION, ","):
            return False
        if self._peek().value == ")":
            raise TinySQLError(_TRAILING_COMMA)
        return True

    def _peek(self) -> Token:
        if self._pos >= len(self.tokens):
            return Token(TokenType.END_OF_QUERY, "")
        return self.tokens[self._pos]

    def _consume(self) -> Token:
        current = self._peek()
        if current.type is not TokenType.END_OF_QUERY:
            self._pos += 1
        return current

    def _match(self, token_type: TokenType, value: str = "") -> Optional[Token]:
        current = self._peek()
        if current.type is token_type and (not value or current.value == value):
            return self._consume()
        return None

    def _expect(self, token_type: TokenType, value: str = "") -> Token:
        matched = self._match(token_type, value)
        if matched is not None:
            return matched
        raise TinySQLError(
            f"Syntax Error: expected {value} got {self._peek().value} ."
        )


def parse(tokens: Sequence[Token]) -> Statement:
    """Return the statement described by ``tokens``."""
    return Parser(tokens).parse()


def resolve_data(token: Token) -> Data:
    """Return the int or string value of a literal token."""
    text = token.value
    if not text:
        return ""
    first = text[0]
    if first == "-" or first in string.digits:
        found = _LEADING_INT.match(text)
        if found is None:
            raise TinySQLError(f"Invalid integer literal {text}.")
        number = int(found.group(1))
        if not _INT_MIN <= number <= _INT_MAX:
            raise TinySQLError(f"Integer literal out of range {text}.")
        return number
    return text[1:-1]


_OPERATORS = {op.value: op for op in OpType}


def get_operator(op: str) -> OpType:
    """Return the operator written as ``op``."""
    try:
        return _OPERATORS[op]
    except KeyError:
        raise TinySQLError(f"Unkown operator{op}.") from None