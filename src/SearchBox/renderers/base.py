"""Base classes for output writers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from SearchBox.core.formula import Formula


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, text: str, formula: Formula) -> None:
        """Write the formula parsed from one input.

        Args:
            text: Raw input the formula was parsed from.
            formula: Parsed formula.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'parse').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, text: str, formula: Formula) -> None:
        for writer in self.writers:
            writer.write_result(text, formula)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
