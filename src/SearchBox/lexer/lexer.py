"""Stateful lexer driving the search box grammar over an input string."""

from __future__ import annotations

from typing import Iterable, Iterator

from SearchBox.core.errors import QuerySyntaxError
from SearchBox.core.tokens import Token
from SearchBox.lexer.grammar import Grammar, LexerState, compile_grammar
from SearchBox.utils.log import log


class Lexer:
    """Split search box input into tokens.

    At each offset the rules of the current state are tried in order and the
    first match wins. Matches are never revisited.
    """

    def __init__(self, grammar: Grammar) -> None:
        """Initialize lexer.

        Args:
            grammar: Compiled grammar.
        """
        self.grammar = grammar

    @classmethod
    def for_keywords(cls, keywords: Iterable[str] = ()) -> Lexer:
        """Create a lexer recognizing the given keywords (plus ``fulltext``)."""
        return cls(compile_grammar(keywords))

    def tokenize(self, text: str) -> Iterator[Token]:
        """Yield tokens of ``text`` from left to right.

        Args:
            text: Raw search box input.

        Yields:
            Tokens in input order. Whitespace and separators yield nothing.

        Raises:
            QuerySyntaxError: If no rule of the current state matches.
        """
        state = LexerState.SCAN
        pos = 0
        end = len(text)
        while pos < end:
            for rule in self.grammar.rules(state):
                match = rule.pattern.match(text, pos)
                if match is not None:
                    break
            else:
                raise QuerySyntaxError("Unexpected input", text=text, position=pos, state=state.value)

            if rule.error is not None:
                raise QuerySyntaxError(rule.error, text=text, position=pos, state=state.value)
            if rule.kind is not None:
                token = Token(kind=rule.kind, text=match.group(rule.group), offset=pos)
                log.debug("token %s %r at %d (%s)", token.kind.value, token.text, pos, rule.name)
                yield token
            if rule.next_state is not None:
                state = rule.next_state
            pos = match.end()
