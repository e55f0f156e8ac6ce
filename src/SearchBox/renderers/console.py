"""Console text output.

Renders a `Formula` with its debug rendering and logs it line by line.
"""

from __future__ import annotations

from SearchBox.core.formula import Formula
from SearchBox.renderers.base import OutputWriter
from SearchBox.utils.log import log


def render_text(formula: Formula) -> str:
    """Render a formula as ``Formula:`` followed by one line per literal."""
    return str(formula)


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, text: str, formula: Formula) -> None:
        log.info("input=%r", text)
        for line in render_text(formula).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
