"""Output renderers for parse results.

Exports the OutputWriter base class and a factory building writers from
configuration.
"""

from __future__ import annotations

from SearchBox.config import AppConfig
from SearchBox.renderers.base import MultiOutputWriter, OutputWriter
from SearchBox.renderers.console import ConsoleOutputWriter, render_text
from SearchBox.renderers.json import JsonFileWriter, load_formula, load_json_file, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer delegating to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "MultiOutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "create_output_writer",
    "load_formula",
    "load_json_file",
    "render_json",
    "render_text",
]
