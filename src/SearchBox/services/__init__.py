"""Parsing services."""

from __future__ import annotations

from SearchBox.services.parse import FormulaParser, parse

__all__ = ["FormulaParser", "parse"]
