"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from SearchBox.config.output import OutputConfig, check_output, load_output
from SearchBox.config.parser import ParserConfig, check_parser, load_parser, normalize_keyword_list
from SearchBox.config.runtime import RuntimeConfig, check_runtime, load_runtime
from SearchBox.core.options import SearchBoxOptions

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def options(self) -> SearchBoxOptions:
        """Return parse options built from the ``parser`` section."""
        return self.parser.options()

    def with_overrides(
        self,
        *,
        keywords: Iterable[str] | None = None,
        formats: Iterable[str] | None = None,
    ) -> AppConfig:
        """Return a copy with CLI overrides applied and validated.

        Args:
            keywords: Replacement keyword list, None to keep configured ones.
            formats: Replacement output formats, None to keep configured ones.
        """
        config = self
        if keywords is not None:
            parser = ParserConfig(keywords=normalize_keyword_list(list(keywords)))
            check_parser(parser)
            config = replace(config, parser=parser)
        if formats is not None:
            output = replace(config.output, formats=tuple(dict.fromkeys(f.strip().lower() for f in formats)))
            check_output(output)
            config = replace(config, output=output)
        return config


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    parser = load_parser(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_parser(parser)
    check_output(output)

    return AppConfig(runtime=runtime, parser=parser, output=output)


def load_config(path: Path | None) -> AppConfig:
    """Load a YAML config file, or built-in defaults when path is None."""
    if path is None:
        return parse_config_dict({})
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path | None, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config by deep-merging an optional override file over the defaults file.

    Built-in defaults stand in for a missing defaults file.
    """
    has_defaults = default_path.is_file()
    if config_path is None or config_path == default_path:
        return load_config(default_path if has_defaults else None)
    base = parse_yaml(default_path.read_text(encoding="utf-8")) if has_defaults else {}
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; lists and scalars are replaced."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
