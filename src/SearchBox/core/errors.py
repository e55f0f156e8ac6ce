"""Exceptions raised while turning search box input into a formula."""

from __future__ import annotations


class SearchBoxError(Exception):
    """Base class for all SearchBox errors."""


class QuerySyntaxError(SearchBoxError, ValueError):
    """Input contains a sequence that matches no grammar rule.

    Attributes:
        text: Full input text.
        position: Offset of the first character no rule could match.
        state: Name of the lexer state active at that offset.
    """

    def __init__(self, message: str, *, text: str, position: int, state: str) -> None:
        self.text = text
        self.position = position
        self.state = state
        super().__init__(f"{message} at position {position} ({state}): {_excerpt(text, position)!r}")


class FormulaStateError(SearchBoxError, RuntimeError):
    """Token sequence is inconsistent with the parser's pending state."""


def _excerpt(text: str, position: int, width: int = 20) -> str:
    return text[position : position + width]
