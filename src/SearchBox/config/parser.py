"""Parser domain configuration: recognized keywords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchBox.config.common import expect_str_list, get_section, get_value
from SearchBox.core.options import SearchBoxOptions
from SearchBox.lexer.grammar import SEPARATORS


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Store validated parser settings."""

    keywords: tuple[str, ...] = ()

    def options(self) -> SearchBoxOptions:
        return SearchBoxOptions(keywords=self.keywords)


def load_parser(raw: Mapping[str, Any]) -> ParserConfig:
    """Load the ``parser`` section.

    Keywords are stripped; blanks and repeats are dropped, order is kept.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed parser configuration.

    Raises:
        TypeError: If ``parser.keywords`` is not a string list.
    """
    section = get_section(raw, "parser")
    items = expect_str_list(get_value(section, "keywords", [], config_key="parser.keywords"), "parser.keywords")
    return ParserConfig(keywords=normalize_keyword_list(items))


def normalize_keyword_list(items: list[str]) -> tuple[str, ...]:
    normalized: list[str] = []
    for item in items:
        keyword = item.strip()
        if keyword and keyword not in normalized:
            normalized.append(keyword)
    return tuple(normalized)


def check_parser(config: ParserConfig) -> None:
    """Validate parser domain constraints.

    Raises:
        ValueError: If a keyword contains a separator character.
    """
    for keyword in config.keywords:
        bad = sorted({ch for ch in keyword if ch in SEPARATORS})
        if bad:
            raise ValueError(f"parser.keywords has keyword with separator characters {bad}: {keyword!r}")
