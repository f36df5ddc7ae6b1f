"""minyaml — parser for flat key/value and list documents in a YAML-like syntax."""

from .builder import ANONYMOUS_LIST_KEY, DocumentBuilder
from .document import Document, ParseResult, loads, parse
from .errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    MinYamlError,
    TypeMismatchError,
    YamlSyntaxError,
)
from .tokenizer import Token, TokenType, tokenize
from .values import Value, VInt, VList, VText
from .repl import YamlRepl

__all__ = [
    "parse",
    "loads",
    "tokenize",
    "Document",
    "DocumentBuilder",
    "ParseResult",
    "ANONYMOUS_LIST_KEY",
    "Token",
    "TokenType",
    "Value",
    "VInt",
    "VList",
    "VText",
    "MinYamlError",
    "YamlSyntaxError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "IndexOutOfRangeError",
    "YamlRepl",
]
