import pytest

from tinysql.errors import TinySQLError
from tinysql.tokenizer import (
    Token,
    TokenType,
    Tokenizer,
    format_tokens,
    print_tokens,
    token_type_name,
    tokenize,
)

K = TokenType.KEYWORD
I = TokenType.IDENTIFIER
P = TokenType.PUNCTUATION
O = TokenType.OPERATOR
L = TokenType.LITERAL
U = TokenType.UNKNOWN


def test_select():
    tokens = Tokenizer(
        "SELECT id, name FROM users WHERE age >= 30 AND balance >= 100000 ORDER BY id DESC"
    ).tokenize()
    expected = [
        Token(K, "SELECT"),
        Token(I, "id"),
        Token(P, ","),
        Token(I, "name"),
        Token(K, "FROM"),
        Token(I, "users"),
        Token(K, "WHERE"),
        Token(I, "age"),
        Token(O, ">="),
        Token(L, "30"),
        Token(K, "AND"),
        Token(I, "balance"),
        Token(O, ">="),
        Token(L, "100000"),
        Token(K, "ORDER"),
        Token(K, "BY"),
        Token(I, "id"),
        Token(K, "DESC"),
    ]
    assert tokens == expected
    assert [token_type_name(t.type) for t in tokens] == [
        token_type_name(t.type) for t in expected
    ]


def test_keywords_are_case_insensitive_and_uppercased():
    assert tokenize("select Name from Users") == [
        Token(K, "SELECT"),
        Token(I, "Name"),
        Token(K, "FROM"),
        Token(I, "Users"),
    ]


def test_string_literals_keep_quotes():
    assert tokenize("'Ayellet' \"Bar\"") == [
        Token(L, "'Ayellet'"),
        Token(L, '"Bar"'),
    ]


def test_negative_integer_literal():
    assert tokenize("-42") == [Token(L, "-42")]


def test_lone_minus_is_unknown():
    assert tokenize("- a") == [Token(U, "-"), Token(I, "a")]


def test_unterminated_string():
    with pytest.raises(TinySQLError, match="Unterminated string literal."):
        tokenize("'abc")


@pytest.mark.parametrize("op", ["=", "<", ">", "<=", ">=", "!="])
def test_operators(op):
    assert tokenize(f"a {op} 1") == [Token(I, "a"), Token(O, op), Token(L, "1")]


def test_bang_alone_is_unknown():
    assert tokenize("!") == [Token(U, "!")]


def test_punctuation_and_unknown():
    assert tokenize("(*);") == [
        Token(P, "("),
        Token(P, "*"),
        Token(P, ")"),
        Token(U, ";"),
    ]


def test_underscore_in_words():
    assert tokenize("user_name") == [Token(I, "user_name")]


def test_empty_and_blank_query():
    assert tokenize("") == []
    assert tokenize(" \t ") == []


def test_tokenize_can_run_twice():
    tokenizer = Tokenizer("DROP TABLE users")
    expected = [Token(K, "DROP"), Token(K, "TABLE"), Token(I, "users")]
    assert tokenizer.tokenize() == expected
    assert tokenizer.tokenize() == expected


def test_token_type_name_undefined():
    assert token_type_name(TokenType.END_OF_QUERY) == "UNDEFINED"
    assert token_type_name(TokenType.KEYWORD) == "KEYWORD"


def test_format_tokens():
    text = format_tokens([Token(K, "SELECT"), Token(I, "id")])
    assert text == "KEYWORD: SELECT\nIDENTIFIER: id\n"


def test_print_tokens(capsys):
    print_tokens([Token(L, "30")])
    assert capsys.readouterr().out == "LITERAL: 30\n"