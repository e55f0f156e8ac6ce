"""Tokenizer for search box input."""

from __future__ import annotations

from SearchBox.lexer.grammar import Grammar, LexerState, compile_grammar, normalize_keywords
from SearchBox.lexer.lexer import Lexer

__all__ = ["Grammar", "Lexer", "LexerState", "compile_grammar", "normalize_keywords"]
