"""DocumentBuilder: turns a token stream into Document entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .tokenizer import Token, TokenType, tokenize
from .values import VInt, VList, VText

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)

# Identifiers are alphanumeric, so no property line can write this key.
ANONYMOUS_LIST_KEY = "-list"


class DocumentBuilder:
    """Applies tokens to one Document.

    ``current_key`` names the entry the next value or list item is written
    to.  A builder serves a single ``build`` call and is not reentrant.
    """

    def __init__(self, document: Document) -> None:
        self.document = document
        self.current_key = ""

    # -- Token dispatch -------------------------------------------------

    def build(self, tokens: Iterable[Token]) -> None:
        handlers = {
            TokenType.IDENTIFIER: self.on_identifier,
            TokenType.STRING: self.on_string_value,
            TokenType.NUMBER: self.on_numeric_value,
            TokenType.LIST_ITEM: self.on_list_item,
        }
        for token in tokens:
            handlers[token.type](token.text)

    def feed(self, text: str) -> int:
        """Tokenize and apply *text*; returns the offset consumed."""
        self.build(tokenize(text))
        return len(text)

    # -- Callbacks ------------------------------------------------------

    def on_identifier(self, text: str) -> None:
        self.current_key = text

    def on_string_value(self, text: str) -> None:
        self.document.values[self.current_key] = VText(text)

    def on_numeric_value(self, text: str) -> None:
        whole, _, fraction = text.partition(".")
        if fraction:
            logger.debug("dropping fraction of %s for key %r", text, self.current_key)
        self.document.values[self.current_key] = VInt(int(whole))

    def on_list_item(self, text: str) -> None:
        self.get_or_create_list().add(VText(text))

    # -- List anchoring -------------------------------------------------

    def get_or_create_list(self) -> VList:
        """Return the list list items go to, creating it on first use."""
        values = self.document.values
        current = values.get(self.current_key)
        if isinstance(current, VList):
            return current

        self.current_key = ANONYMOUS_LIST_KEY
        existing = values.get(ANONYMOUS_LIST_KEY)
        if isinstance(existing, VList):
            return existing

        logger.debug("starting anonymous list under %r", ANONYMOUS_LIST_KEY)
        created = VList()
        values[ANONYMOUS_LIST_KEY] = created
        return created
