"""Document — the value store produced by parsing minyaml text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .builder import DocumentBuilder
from .errors import KeyNotFoundError, YamlSyntaxError
from .values import Value, VList, to_python, unwrap

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of one ``Document.parse`` call."""

    ok: bool
    consumed: int
    document: "Document"
    error: YamlSyntaxError | None = None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass
class Document:
    """Mapping from key to VText / VInt / VList, filled by ``parse``."""

    values: dict[str, Value] = field(default_factory=dict)

    # -- Parsing --------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Parse *text* into this document.

        A failed parse keeps whatever entries were written before the
        failing token; callers should discard the document in that case.
        """
        builder = DocumentBuilder(self)
        try:
            consumed = builder.feed(text)
        except YamlSyntaxError as exc:
            logger.warning("parse failed: %s", exc)
            return ParseResult(ok=False, consumed=exc.offset, document=self, error=exc)
        return ParseResult(ok=True, consumed=consumed, document=self)

    # -- Queries --------------------------------------------------------

    def value_as(self, key: str, kind: type) -> Any:
        """Return the value under *key* as ``str``, ``int`` or ``VList``.

        Raises KeyNotFoundError for an unknown key and TypeMismatchError
        when the entry holds another kind.
        """
        try:
            value = self.values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None
        return unwrap(value, kind, key)

    def list(self) -> VList:
        """The document's list (the first list-valued entry)."""
        for value in self.values.values():
            if isinstance(value, VList):
                return value
        raise KeyNotFoundError("", "document has no list")

    def get(self, key: str) -> Value | None:
        return self.values.get(key)

    def keys(self) -> list[str]:
        return list(self.values)

    def to_python(self) -> dict[str, Any]:
        return {k: to_python(v) for k, v in self.values.items()}

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)


# ---------------------------------------------------------------------------
# Module-level entry points
# ---------------------------------------------------------------------------

def parse(text: str) -> ParseResult:
    """Parse *text* into a fresh Document."""
    return Document().parse(text)


def loads(text: str) -> Document:
    """Parse *text*, raising YamlSyntaxError on failure."""
    result = parse(text)
    result.raise_for_error()
    return result.document
