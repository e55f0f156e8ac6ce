"""Search box grammar.

The grammar has two states:

- SCAN: whitespace, the negation operator (only directly before a key), keys,
  quoted phrases and bare words. Anything else is skipped one non-word
  character at a time.
- PAIR: entered after a key. Accepts the ``:`` separator and a single value,
  which returns the lexer to SCAN. There is no whitespace rule here, so
  ``status: open`` is a syntax error at the space. A value may begin with
  punctuation such as ``-`` or ``.`` (``status:-open``).

A quote that opens a phrase (at the start of the input or after a separator)
without any closing quote later in the input is a syntax error in both states.
An apostrophe inside a word (``don't``) is not an opening quote.

A bare word is a maximal run of non-separator characters that starts at the
beginning of the input or right after a separator. Boundaries are checked with
zero-width assertions and are never part of a token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from SearchBox.core.formula import FULLTEXT_KEY
from SearchBox.core.tokens import TokenKind
from SearchBox.utils.log import log

SEPARATORS = " \t\n\r\f\v.,'\"+-!?:"
OPERATORS = ("-",)
PAIR_SEPARATOR = ":"

_NON_SEPARATOR = "[^" + re.escape(SEPARATORS) + "]"
_BOUNDARY_BEFORE = f"(?<!{_NON_SEPARATOR})"
_BOUNDARY_AFTER = f"(?!{_NON_SEPARATOR})"

_RE_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")
_RE_SINGLE_QUOTED = re.compile(r"'([^'\n]*)'")
_RE_DOUBLE_QUOTED = re.compile(r'"([^"\n]*)"')
_RE_BARE_WORD = re.compile(f"{_BOUNDARY_BEFORE}{_NON_SEPARATOR}+")
_RE_NON_WORD = re.compile(r"\W")
_RE_UNTERMINATED_QUOTE = re.compile(f"{_BOUNDARY_BEFORE}(?:'[^']*|\"[^\"]*)\\Z")
# Values may open with punctuation (`status:-open`, `tag:.net`), never with
# whitespace, a colon or a quote.
_VALUE_LEAD = "[" + re.escape(".,+-!?") + "]"
_RE_VALUE_WORD = re.compile(f"{_BOUNDARY_BEFORE}(?:{_VALUE_LEAD}+{_NON_SEPARATOR}*|{_NON_SEPARATOR}+)")
_RE_PAIR_SEPARATOR = re.compile(re.escape(PAIR_SEPARATOR))


class LexerState(Enum):
    SCAN = "scan"
    PAIR = "pair"


@dataclass(frozen=True, slots=True)
class Rule:
    """One match rule of a lexer state.

    Attributes:
        name: Rule name, used in debug output.
        pattern: Compiled pattern matched at the current offset.
        kind: Kind of token to emit, or None to discard the match.
        group: Pattern group holding the token text (1 strips quotes).
        next_state: State to switch to after a match, None to stay.
        error: If set, a match is a syntax error with this message.
    """

    name: str
    pattern: re.Pattern[str]
    kind: Optional[TokenKind] = None
    group: int = 0
    next_state: Optional[LexerState] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Grammar:
    """Compiled rules per state for one set of keywords."""

    keywords: tuple[str, ...]
    states: Mapping[LexerState, tuple[Rule, ...]]

    def rules(self, state: LexerState) -> tuple[Rule, ...]:
        return self.states[state]


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Return a private, de-duplicated keyword tuple including ``fulltext``.

    Args:
        keywords: Caller-supplied key names. Not modified.

    Returns:
        Keywords in caller order, with ``fulltext`` appended if absent.

    Raises:
        TypeError: If a keyword is not a string.
        ValueError: If a keyword is empty.
    """
    out: list[str] = []
    for idx, keyword in enumerate(keywords):
        if not isinstance(keyword, str):
            raise TypeError(f"keywords[{idx}] must be a string")
        if not keyword:
            raise ValueError(f"keywords[{idx}] must not be empty")
        if keyword not in out:
            out.append(keyword)
    if FULLTEXT_KEY not in out:
        out.append(FULLTEXT_KEY)
    return tuple(out)


def compile_grammar(keywords: Iterable[str] = ()) -> Grammar:
    """Compile the two-state grammar for the given keywords.

    Args:
        keywords: Recognized key names.

    Returns:
        Compiled grammar. Grammars are cached per normalized keyword tuple.
    """
    return _compile(normalize_keywords(keywords))


@lru_cache(maxsize=64)
def _compile(keywords: tuple[str, ...]) -> Grammar:
    # Longest first so a key never loses to one of its prefixes.
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    key_body = f"(?:{alternatives}){_BOUNDARY_AFTER}"
    operators = "|".join(re.escape(op) for op in OPERATORS)

    scan = (
        Rule("WS", _RE_WHITESPACE),
        Rule("OP", re.compile(f"(?:{operators})(?={key_body})"), TokenKind.OPERATOR),
        Rule("KEY", re.compile(f"{_BOUNDARY_BEFORE}{key_body}"), TokenKind.KEY, next_state=LexerState.PAIR),
        Rule("WORDS_SQ", _RE_SINGLE_QUOTED, TokenKind.FULLTEXT, group=1),
        Rule("WORDS_DQ", _RE_DOUBLE_QUOTED, TokenKind.FULLTEXT, group=1),
        Rule("OPEN_QUOTE", _RE_UNTERMINATED_QUOTE, error="Unterminated quote"),
        Rule("WORD", _RE_BARE_WORD, TokenKind.FULLTEXT),
        Rule("NON_WORD", _RE_NON_WORD),
    )
    pair = (
        Rule("SEP", _RE_PAIR_SEPARATOR),
        Rule("WORDS_SQ", _RE_SINGLE_QUOTED, TokenKind.VALUE, group=1, next_state=LexerState.SCAN),
        Rule("WORDS_DQ", _RE_DOUBLE_QUOTED, TokenKind.VALUE, group=1, next_state=LexerState.SCAN),
        Rule("OPEN_QUOTE", _RE_UNTERMINATED_QUOTE, error="Unterminated quote"),
        Rule("WORD", _RE_VALUE_WORD, TokenKind.VALUE, next_state=LexerState.SCAN),
    )
    log.debug("Compiled grammar for keywords=%s", list(keywords))
    return Grammar(
        keywords=keywords,
        states=MappingProxyType({LexerState.SCAN: scan, LexerState.PAIR: pair}),
    )
