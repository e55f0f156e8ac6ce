"""Parse search box input into a `Formula`.

The lexer pushes tokens to `FormulaParser` one at a time. The parser keeps the
last operator and key until a value completes the pair.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from SearchBox.core.errors import FormulaStateError
from SearchBox.core.formula import FULLTEXT_KEY, Formula, FormulaBuilder
from SearchBox.core.options import SearchBoxOptions
from SearchBox.core.tokens import Token, TokenKind
from SearchBox.lexer.lexer import Lexer
from SearchBox.utils.log import log


class FormulaParser:
    """Fold tokens into a formula."""

    def __init__(self) -> None:
        self._builder = FormulaBuilder()
        self._pending_op: Optional[str] = None
        self._pending_key: Optional[str] = None

    def consume(self, token: Token) -> None:
        """Apply one token.

        Args:
            token: Next token from the lexer.

        Raises:
            FormulaStateError: If a value arrives without a preceding key.
        """
        if token.kind is TokenKind.OPERATOR:
            self._pending_op = token.text
        elif token.kind is TokenKind.KEY:
            self._pending_key = token.text
        elif token.kind is TokenKind.VALUE:
            if self._pending_key is None:
                raise FormulaStateError(f"Value {token.text!r} at {token.offset} has no key")
            self._builder.append(self._pending_key, token.text, self._pending_op)
            self._pending_op = None
            self._pending_key = None
        elif token.kind is TokenKind.FULLTEXT:
            self._builder.append(FULLTEXT_KEY, token.text)

    def formula(self) -> Formula:
        """Return the formula built so far.

        A key still waiting for its value is dropped.
        """
        if self._pending_key is not None:
            log.debug("Dropping key without value: %s%s", self._pending_op or "", self._pending_key)
        return self._builder.build()


def parse(text: str, options: SearchBoxOptions | Mapping[str, Any] | None = None) -> Formula:
    """Parse search box input into a structured formula.

    Args:
        text: Search box input, e.g. ``-status:open urgent "exact phrase"``.
        options: Parse options or a mapping with ``keywords``.

    Returns:
        Immutable formula with literals in first-seen order.

    Raises:
        QuerySyntaxError: If the input violates the grammar.
    """
    opts = SearchBoxOptions.coerce(options)
    lexer = Lexer.for_keywords(opts.keywords)
    parser = FormulaParser()
    for token in lexer.tokenize(text):
        parser.consume(token)
    return parser.formula()
