"""JSON output.

Renders formulas into JSON-serializable objects, writes accumulated results to
a file, and loads them back into `Formula` objects.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from SearchBox.core.formula import Formula, Literal
from SearchBox.renderers.base import OutputWriter
from SearchBox.utils.log import log


def render_json(formula: Formula) -> list[dict[str, Any]]:
    """Render a formula into a list of literal dicts.

    Args:
        formula: Parsed formula.

    Returns:
        One ``{"key", "op", "values"}`` dict per literal, in formula order.
    """
    return [
        {"key": literal.key, "op": literal.op, "values": list(literal.values)}
        for literal in formula
    ]


def load_formula(payload: list[Mapping[str, Any]]) -> Formula:
    """Rebuild a formula from `render_json` output.

    Raises:
        KeyError: If a literal lacks ``key`` or ``values``.
    """
    return Formula(
        literals=tuple(
            Literal(key=item["key"], values=tuple(item["values"]), op=item.get("op"))
            for item in payload
        )
    )


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []
        self.output_path: Path | None = None

    def write_result(self, text: str, formula: Formula) -> None:
        self.all_results.append({"input": text, "literals": render_json(formula)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        self.output_path = output_path
        log.info("JSON saved to %s", output_path)


def load_json_file(filepath: str | Path) -> list[tuple[str, Formula]]:
    """Load ``(input, formula)`` pairs from a file written by `JsonFileWriter`.

    Args:
        filepath: Path to the JSON file.

    Returns:
        Pairs in file order.
    """
    path = Path(filepath)
    data = json.loads(path.read_text(encoding="utf-8"))

    results: list[tuple[str, Formula]] = []
    if isinstance(data, list):
        for entry in data:
            if not isinstance(entry, dict) or "literals" not in entry:
                continue
            results.append((entry.get("input", ""), load_formula(entry["literals"])))

    log.info("Loaded %d formulas from %s", len(results), path)
    return results
