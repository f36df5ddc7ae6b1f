"""Error types raised by minyaml."""

from __future__ import annotations


class MinYamlError(Exception):
    """Base class for every error raised by this package."""


class YamlSyntaxError(MinYamlError, ValueError):
    """Input text does not match the document grammar."""

    def __init__(self, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.offset = offset
        self.line = line
        self.column = column


class KeyNotFoundError(MinYamlError, KeyError):
    """A queried key (or the document list) does not exist."""

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f"key not found: {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class TypeMismatchError(MinYamlError, TypeError):
    """The stored value is not of the requested kind."""

    def __init__(self, where: str | int, expected: str, actual: str) -> None:
        super().__init__(f"{where!r} holds {actual}, not {expected}")
        self.where = where
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(MinYamlError, IndexError):
    """A list index is outside ``0 <= index < count()``."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"list index {index} out of range (count {count})")
        self.index = index
        self.count = count
