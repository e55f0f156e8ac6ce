"""Command runner for coordinating CLI execution.

Configures logging, creates the output writer, runs the command and turns
failures into a clean abort.
"""

from __future__ import annotations

import click

from SearchBox.cli.commands import ParseCommand
from SearchBox.config import AppConfig
from SearchBox.core.formula import Formula
from SearchBox.renderers import create_output_writer
from SearchBox.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution for one loaded config."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_parse(self, inputs: list[str], action: str) -> list[Formula]:
        """Parse all inputs and write them to the configured outputs.

        Args:
            inputs: Raw search box inputs, one query each.
            action: The CLI command name (e.g., 'parse').

        Returns:
            Parsed formulas in input order.

        Raises:
            click.Abort: When parsing or output fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            output_writer = create_output_writer(self.config)
            command = ParseCommand(config=self.config, output_writer=output_writer)
            formulas = command.execute(inputs)
            output_writer.finalize(action)
            return formulas
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Parse failed: %s", e)
            raise click.Abort from e
