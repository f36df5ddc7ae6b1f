"""Tests for the tokenizer."""

import pytest

from minyaml.errors import YamlSyntaxError
from minyaml.tokenizer import Token, TokenType, tokenize


def _kinds(text):
    return [(t.type, t.text) for t in tokenize(text)]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def test_string_property():
    assert _kinds("foo:bar") == [
        (TokenType.IDENTIFIER, "foo"),
        (TokenType.STRING, "bar"),
    ]

def test_number_property():
    assert _kinds("count: 5") == [
        (TokenType.IDENTIFIER, "count"),
        (TokenType.NUMBER, "5"),
    ]

def test_signed_and_fractional_numbers():
    assert _kinds("a: -3 b: +4 c: 2.75") == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.NUMBER, "-3"),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.NUMBER, "+4"),
        (TokenType.IDENTIFIER, "c"),
        (TokenType.NUMBER, "2.75"),
    ]

def test_whitespace_around_colon():
    assert _kinds("  key \t :\n value ") == [
        (TokenType.IDENTIFIER, "key"),
        (TokenType.STRING, "value"),
    ]

def test_alphanumeric_identifier():
    assert _kinds("item2: x")[0] == (TokenType.IDENTIFIER, "item2")

def test_token_positions():
    tokens = list(tokenize("foo:bar\n  baz: 12"))
    assert tokens[0] == Token(TokenType.IDENTIFIER, "foo", 0, 1, 1)
    assert tokens[1] == Token(TokenType.STRING, "bar", 4, 1, 5)
    assert tokens[2] == Token(TokenType.IDENTIFIER, "baz", 10, 2, 3)
    assert tokens[3] == Token(TokenType.NUMBER, "12", 15, 2, 8)


# ---------------------------------------------------------------------------
# List items
# ---------------------------------------------------------------------------

def test_list_items():
    assert _kinds("- first\n- second\n-third") == [
        (TokenType.LIST_ITEM, "first"),
        (TokenType.LIST_ITEM, "second"),
        (TokenType.LIST_ITEM, "third"),
    ]

def test_list_item_with_digits():
    assert _kinds("- item42") == [(TokenType.LIST_ITEM, "item42")]

def test_empty_list_item():
    assert _kinds("-") == [(TokenType.LIST_ITEM, "")]

def test_empty_item_before_next_line():
    assert _kinds("-\n- b") == [
        (TokenType.LIST_ITEM, ""),
        (TokenType.LIST_ITEM, "b"),
    ]

def test_mixed_lines():
    assert _kinds("name: joe\n- x\nage: 3") == [
        (TokenType.IDENTIFIER, "name"),
        (TokenType.STRING, "joe"),
        (TokenType.LIST_ITEM, "x"),
        (TokenType.IDENTIFIER, "age"),
        (TokenType.NUMBER, "3"),
    ]


# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------

def test_empty_text():
    assert list(tokenize("")) == []

def test_whitespace_only():
    assert list(tokenize(" \n\t\r\n ")) == []


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_number_followed_by_letters_fails():
    with pytest.raises(YamlSyntaxError) as info:
        list(tokenize("foo: 5abc"))
    assert info.value.offset == 5
    assert (info.value.line, info.value.column) == (1, 6)

def test_letters_followed_by_digits_fails():
    with pytest.raises(YamlSyntaxError):
        list(tokenize("foo: bar2"))

def test_punctuation_in_value_fails():
    with pytest.raises(YamlSyntaxError):
        list(tokenize("url: a.b"))

def test_missing_colon():
    with pytest.raises(YamlSyntaxError, match="expected ':'") as info:
        list(tokenize("foo bar"))
    assert info.value.offset == 4

def test_missing_value():
    with pytest.raises(YamlSyntaxError, match="expected a value"):
        list(tokenize("foo:"))

def test_trailing_garbage():
    with pytest.raises(YamlSyntaxError) as info:
        list(tokenize("foo:bar\n:baz"))
    assert (info.value.line, info.value.column) == (2, 1)

def test_tokens_before_failure_are_yielded():
    tokens = tokenize("foo:bar\n!")
    assert next(tokens).text == "foo"
    assert next(tokens).text == "bar"
    with pytest.raises(YamlSyntaxError):
        next(tokens)

def test_list_item_must_end_at_whitespace():
    with pytest.raises(YamlSyntaxError, match="list item") as info:
        list(tokenize("- a-b"))
    assert (info.value.offset, info.value.column) == (3, 4)

def test_list_item_and_scalar_end_alike():
    with pytest.raises(YamlSyntaxError):
        list(tokenize("foo: bar-"))
    with pytest.raises(YamlSyntaxError):
        list(tokenize("- bar-"))


# ---------------------------------------------------------------------------
# Large input
# ---------------------------------------------------------------------------

def test_positions_on_last_line_of_large_document():
    count = 50_000
    text = "\n".join(f"k{i}: v" for i in range(count)) + "\n  - tail"
    tokens = list(tokenize(text))
    assert len(tokens) == count * 2 + 1
    last = tokens[-1]
    assert last.type == TokenType.LIST_ITEM
    assert (last.line, last.column) == (count + 1, 5)
    assert tokens[-2].line == count
    assert tokens[-2].column == len(f"k{count - 1}: ") + 1
