"""Tokenizer for the minyaml line grammar.

::

    document   := line*
    line       := list-item | property
    property   := identifier ":" scalar
    identifier := alnum+
    scalar     := number | letters+
    number     := ["+"|"-"] digit+ ["." digit+]
    list-item  := "-" alnum*

Whitespace (including newlines) separates tokens and is otherwise ignored.
A scalar or non-empty list item must end at whitespace or end of input.
``tokenize`` yields tokens lazily, so a consumer sees every token before
the one that fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import YamlSyntaxError


class TokenType(Enum):
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    LIST_ITEM = auto()


@dataclass(slots=True)
class Token:
    type: TokenType
    text: str
    offset: int
    line: int
    column: int


_WHITESPACE = " \t\r\n\f\v"
_WHITESPACE_RE = re.compile(r"[ \t\r\n\f\v]*")
_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9]+")
_ITEM_RE = re.compile(r"[A-Za-z0-9]*")
_NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")
_LETTERS_RE = re.compile(r"[A-Za-z]+")


# ---------------------------------------------------------------------------
# Scanner state
# ---------------------------------------------------------------------------

class _Scanner:
    """Cursor over the input text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.line_start = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        end = _WHITESPACE_RE.match(self.text, self.pos).end()
        # only whitespace runs cross newlines
        newlines = self.text.count("\n", self.pos, end)
        if newlines:
            self.line += newlines
            self.line_start = self.text.rfind("\n", self.pos, end) + 1
        self.pos = end

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        return pattern.match(self.text, self.pos)

    def at_boundary(self, offset: int) -> bool:
        return offset >= len(self.text) or self.text[offset] in _WHITESPACE

    def location(self, offset: int) -> tuple[int, int]:
        """Line and column of *offset*, which must lie on the current line."""
        return self.line, offset - self.line_start + 1

    def token(self, type_: TokenType, m: re.Match[str]) -> Token:
        self.pos = m.end()
        line, column = self.location(m.start())
        return Token(type_, m.group(), m.start(), line, column)

    def error(self, message: str) -> YamlSyntaxError:
        line, column = self.location(self.pos)
        return YamlSyntaxError(message, self.pos, line, column)


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* in source order.

    Raises YamlSyntaxError at the first position that matches no rule.
    """
    scanner = _Scanner(text)
    scanner.skip_whitespace()
    while not scanner.at_end():
        # list-item first, then property
        if scanner.peek() == "-":
            yield _list_item(scanner)
        else:
            yield from _property(scanner)
        scanner.skip_whitespace()


def _list_item(scanner: _Scanner) -> Token:
    """Item text ends at whitespace like a scalar; an empty item may abut the next line."""
    scanner.pos += 1
    scanner.skip_whitespace()
    m = scanner.match(_ITEM_RE)
    if m.group() and not scanner.at_boundary(m.end()):
        scanner.pos = m.end()
        raise scanner.error("list item must be letters and digits only")
    return scanner.token(TokenType.LIST_ITEM, m)


def _property(scanner: _Scanner) -> Iterator[Token]:
    m = scanner.match(_IDENTIFIER_RE)
    if m is None:
        raise scanner.error(f"unexpected character {scanner.peek()!r}")
    yield scanner.token(TokenType.IDENTIFIER, m)

    scanner.skip_whitespace()
    if scanner.at_end() or scanner.peek() != ":":
        raise scanner.error("expected ':' after identifier")
    scanner.pos += 1
    scanner.skip_whitespace()
    if scanner.at_end():
        raise scanner.error("expected a value after ':'")

    yield _scalar(scanner)


def _scalar(scanner: _Scanner) -> Token:
    """A number if the whole token is numeric, else a run of letters."""
    m = scanner.match(_NUMBER_RE)
    if m is not None and scanner.at_boundary(m.end()):
        return scanner.token(TokenType.NUMBER, m)
    m = scanner.match(_LETTERS_RE)
    if m is not None and scanner.at_boundary(m.end()):
        return scanner.token(TokenType.STRING, m)
    raise scanner.error("value must be a number or letters only")
