"""Value types stored in a minyaml Document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .errors import IndexOutOfRangeError, TypeMismatchError


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class VList:
    """Append-only sequence of values, addressed by 0-based index."""

    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def __len__(self) -> int:
        return len(self.items)

    def add(self, item: "Value") -> None:
        self.items.append(item)

    def count(self) -> int:
        return len(self.items)

    def value_as(self, index: int, kind: type) -> Any:
        """Return item *index* as a plain ``str`` or ``int``.

        Raises IndexOutOfRangeError past the end and TypeMismatchError when
        the stored item is of another kind.
        """
        if not 0 <= index < len(self.items):
            raise IndexOutOfRangeError(index, len(self.items))
        return unwrap(self.items[index], kind, index)


Value = Union[VText, VInt, VList]


# ---------------------------------------------------------------------------
# Kind recovery
# ---------------------------------------------------------------------------

_SCALAR_KINDS: dict[type, type] = {str: VText, int: VInt}

_KIND_NAMES: dict[type, str] = {
    str: "string",
    int: "integer",
    VText: "string",
    VInt: "integer",
    VList: "list",
}


def kind_of(value: Value) -> str:
    """Name of the kind held by *value*."""
    if isinstance(value, VText):
        return "string"
    if isinstance(value, VInt):
        return "integer"
    if isinstance(value, VList):
        return "list"
    raise TypeError(f"not a document value: {value!r}")


def kind_name(kind: type) -> str:
    try:
        return _KIND_NAMES[kind]
    except KeyError:
        raise TypeError(f"unsupported value kind: {kind!r}") from None


def unwrap(value: Value, kind: type, where: str | int) -> Any:
    """Recover *value* as *kind* (``str``, ``int`` or ``VList``).

    Scalars come back as plain Python values, lists as the VList itself.
    *where* names the key or index in the mismatch error.
    """
    expected = kind_name(kind)
    if kind is VList:
        if isinstance(value, VList):
            return value
    elif isinstance(value, _SCALAR_KINDS.get(kind, kind)):
        return value.value
    raise TypeMismatchError(where, expected, kind_of(value))


def to_python(value: Value) -> str | int | list:
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    return value.value
