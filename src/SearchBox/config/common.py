"""Shared helpers for reading config sections and typed values."""

from __future__ import annotations

from typing import Any, Mapping

_MISSING = object()


def get_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return an optional mapping section from the root config.

    Args:
        raw: Root configuration mapping.
        key: Section name.

    Returns:
        Section mapping, or an empty mapping when the section is absent.

    Raises:
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_value(section: Mapping[str, Any], field: str, default: Any = _MISSING, *, config_key: str) -> Any:
    """Return a field value, falling back to ``default`` when given.

    Raises:
        ValueError: If the field is missing and no default is given.
    """
    if field in section and section[field] is not None:
        return section[field]
    if default is _MISSING:
        raise ValueError(f"Missing required config: {config_key}")
    return default


def expect_str(value: Any, config_key: str) -> str:
    """Validate and return string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    """Validate and return boolean value."""
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a list of strings; a single string becomes a one-item list."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{config_key} must be a list")
    out: list[str] = []
    for idx, item in enumerate(value):
        out.append(expect_str(item, f"{config_key}[{idx}]"))
    return out
