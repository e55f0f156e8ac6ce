from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Kinds of tokens handed from the lexer to the parser."""

    OPERATOR = "OP"
    KEY = "KEY"
    VALUE = "VALUE"
    FULLTEXT = "FULLTEXT"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified piece of search box input.

    Attributes:
        kind: Token kind.
        text: Matched text, quote delimiters already stripped.
        offset: Start offset of the match in the input.
    """

    kind: TokenKind
    text: str
    offset: int = 0
