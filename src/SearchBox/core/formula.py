from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

FULLTEXT_KEY = "fulltext"


@dataclass(frozen=True, slots=True)
class Literal:
    """One grouped entry of a formula.

    Attributes:
        key: Key the values are scoped to (``fulltext`` for free terms).
        values: Values in input order, duplicates kept.
        op: Operator applied to the key (only ``-`` today), or None.
    """

    key: str
    values: Sequence[str] = ()
    op: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def matches(self, key: str, op: Optional[str]) -> bool:
        """Return True if this literal holds the ``(key, op)`` group."""
        return self.key == key and self.op == op

    @property
    def negated(self) -> bool:
        return self.op == "-"


@dataclass(frozen=True, slots=True)
class Formula:
    """Structured result of parsing one search box input.

    Literals are kept in first-seen group order. Instances are immutable; use
    `FormulaBuilder` to assemble one.
    """

    literals: Sequence[Literal] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "literals", tuple(self.literals))

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __len__(self) -> int:
        return len(self.literals)

    def __bool__(self) -> bool:
        return bool(self.literals)

    def find(self, key: str, op: Optional[str] = None) -> Literal | None:
        """Return the literal for ``(key, op)`` if present.

        Args:
            key: Literal key.
            op: Operator, None for the plain group.

        Returns:
            Matching literal or None.
        """
        for literal in self.literals:
            if literal.matches(key, op):
                return literal
        return None

    def values(self, key: str, op: Optional[str] = None) -> tuple[str, ...]:
        """Return the values of the ``(key, op)`` group, empty if absent."""
        literal = self.find(key, op)
        return tuple(literal.values) if literal else ()

    @property
    def fulltext(self) -> tuple[str, ...]:
        return self.values(FULLTEXT_KEY)

    def __str__(self) -> str:
        lines = [f" {literal.op or ''}{literal.key}: [{','.join(literal.values)}]" for literal in self.literals]
        return "Formula:\n" + "\n".join(lines)


@dataclass(slots=True)
class FormulaBuilder:
    """Mutable accumulator that groups values by ``(key, op)``."""

    _groups: list[tuple[str, Optional[str], list[str]]] = field(default_factory=list)

    def append(self, key: str, value: str, op: Optional[str] = None) -> None:
        """Add a value to the ``(key, op)`` group, creating it if needed.

        Args:
            key: Literal key.
            value: Value to append.
            op: Operator or None.
        """
        for group_key, group_op, values in self._groups:
            if group_key == key and group_op == op:
                values.append(value)
                return
        self._groups.append((key, op, [value]))

    def build(self) -> Formula:
        """Return an immutable snapshot of the accumulated groups."""
        return Formula(
            literals=tuple(Literal(key=key, values=tuple(values), op=op) for key, op, values in self._groups)
        )
