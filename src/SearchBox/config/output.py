"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchBox.config.common import expect_str, expect_str_list, get_section, get_value

_ALLOWED_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output settings."""

    formats: tuple[str, ...] = ("console",)
    base_dir: str = "output"


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration with lower-cased, de-duplicated formats.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output")
    defaults = OutputConfig()
    formats = expect_str_list(get_value(section, "formats", list(defaults.formats), config_key="output.formats"), "output.formats")
    normalized: list[str] = []
    for item in formats:
        fmt = item.strip().lower()
        if fmt and fmt not in normalized:
            normalized.append(fmt)
    return OutputConfig(
        formats=tuple(normalized),
        base_dir=expect_str(get_value(section, "base_dir", defaults.base_dir, config_key="output.base_dir"), "output.base_dir"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If formats are empty or unknown, or base_dir is blank.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = [fmt for fmt in config.formats if fmt not in _ALLOWED_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty when json output is enabled")
