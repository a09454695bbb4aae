"""Splitting a query string into tokens."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Iterable, Iterator

from tinysql.errors import TinySQLError

KEYWORDS = frozenset(
    {
        "CREATE", "TABLE", "SELECT", "INSERT", "INTO",
        "DELETE", "FROM", "WHERE", "DROP", "VALUES",
        "ORDER", "BY", "ASC", "DESC", "AND", "OR",
    }
)

_BLANKS = " \t"
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_WORD_CHARS = _LETTERS | {"_"}
_PUNCTUATION = frozenset(",()*")


class TokenType(enum.Enum):
    """Kind of a token."""

    KEYWORD = enum.auto()
    IDENTIFIER = enum.auto()
    OPERATOR = enum.auto()
    PUNCTUATION = enum.auto()
    LITERAL = enum.auto()
    DATA_TYPE = enum.auto()
    END_OF_QUERY = enum.auto()
    UNKNOWN = enum.auto()


@dataclass(frozen=True)
class Token:
    """A token type with the text it was read from."""

    type: TokenType
    value: str


class Tokenizer:
    """Turns one query string into a list of tokens."""

    def __init__(self, query: str) -> None:
        self.query = query

    def tokenize(self) -> list[Token]:
        """Return the tokens of the query."""
        return list(self._tokens())

    def _tokens(self) -> Iterator[Token]:
        query = self.query
        size = len(query)
        pos = 0
        while pos < size:
            char = query[pos]
            following = query[pos + 1] if pos + 1 < size else ""

            if char in _BLANKS:
                pos += 1
            elif char in _DIGITS or (char == "-" and following in _DIGITS and following):
                end = pos + 1
                while end < size and query[end] in _DIGITS:
                    end += 1
                yield Token(TokenType.LITERAL, query[pos:end])
                pos = end
            elif char in "'\"":
                end = query.find(char, pos + 1)
                if end == -1:
                    raise TinySQLError("Unterminated string literal.")
                yield Token(TokenType.LITERAL, query[pos:end + 1])
                pos = end + 1
            elif char in _LETTERS:
                end = pos
                while end < size and query[end] in _WORD_CHARS:
                    end += 1
                word = query[pos:end]
                upper = word.upper()
                if upper in KEYWORDS:
                    yield Token(TokenType.KEYWORD, upper)
                else:
                    yield Token(TokenType.IDENTIFIER, word)
                pos = end
            elif char in _PUNCTUATION:
                yield Token(TokenType.PUNCTUATION, char)
                pos += 1
            elif char in "<>!":
                if following == "=":
                    yield Token(TokenType.OPERATOR, char + following)
                    pos += 2
                elif char == "!":
                    yield Token(TokenType.UNKNOWN, char)
                    pos += 1
                else:
                    yield Token(TokenType.OPERATOR, char)
                    pos += 1
            elif char == "=":
                yield Token(TokenType.OPERATOR, char)
                pos += 1
            else:
                # includes a '-' that does not start a number
                yield Token(TokenType.UNKNOWN, char)
                pos += 1


def tokenize(query: str) -> list[Token]:
    """Return the tokens of ``query``."""
    return Tokenizer(query).tokenize()


_TYPE_NAMES = {
    TokenType.KEYWORD: "KEYWORD",
    TokenType.IDENTIFIER: "IDENTIFIER",
    TokenType.LITERAL: "LITERAL",
    TokenType.OPERATOR: "OPERATOR",
    TokenType.PUNCTUATION: "PUNCTUATION",
}


def token_type_name(token_type: TokenType) -> str:
    """Return the display name of a token type."""
    return _TYPE_NAMES.get(token_type, "UNDEFINED")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return one ``TYPE: value`` line per token."""
    return "".join(f"{token_type_name(t.type)}: {t.value}\n" for t in tokens)


def print_tokens(tokens: Iterable[Token]) -> None:
    """Print one ``TYPE: value`` line per token."""
    print(format_tokens(tokens), end="")