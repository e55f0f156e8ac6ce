"""Command implementations for the SearchBox CLI."""

from __future__ import annotations

from dataclasses import dataclass

from SearchBox.config import AppConfig
from SearchBox.core.formula import Formula
from SearchBox.renderers import OutputWriter
from SearchBox.services.parse import parse
from SearchBox.utils.log import log


@dataclass(slots=True)
class ParseCommand:
    """Parse each input with the configured keywords and hand it to the writer."""

    config: AppConfig
    output_writer: OutputWriter

    def execute(self, inputs: list[str]) -> list[Formula]:
        options = self.config.options()
        log.debug("keywords=%s", list(options.keywords))

        formulas: list[Formula] = []
        for idx, text in enumerate(inputs, start=1):
            log.debug("Parsing input %d/%d: %r", idx, len(inputs), text)
            formula = parse(text, options)
            self.output_writer.write_result(text, formula)
            formulas.append(formula)
        log.debug("Parsed %d inputs", len(formulas))
        return formulas
