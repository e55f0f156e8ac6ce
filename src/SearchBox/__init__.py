"""SearchBox: parse free-form search box input into structured formulas.

Example::

    >>> from SearchBox import parse
    >>> formula = parse('-status:open urgent', {"keywords": ["status"]})
    >>> [(lit.op, lit.key, lit.values) for lit in formula]
    [('-', 'status', ('open',)), (None, 'fulltext', ('urgent',))]
"""

from __future__ import annotations

from SearchBox.core.errors import FormulaStateError, QuerySyntaxError, SearchBoxError
from SearchBox.core.formula import FULLTEXT_KEY, Formula, Literal
from SearchBox.core.options import SearchBoxOptions
from SearchBox.services.parse import parse

__all__ = [
    "FULLTEXT_KEY",
    "Formula",
    "FormulaStateError",
    "Literal",
    "QuerySyntaxError",
    "SearchBoxError",
    "SearchBoxOptions",
    "parse",
]
