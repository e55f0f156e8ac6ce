from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class SearchBoxOptions:
    """Caller-supplied parse options.

    Attributes:
        keywords: Key names recognized in ``key:value`` pairs, in caller
            order. ``fulltext`` is always recognized in addition.
    """

    keywords: Sequence[str] = ()

    def __post_init__(self) -> None:
        if isinstance(self.keywords, str):
            raise TypeError("keywords must be a sequence of strings, not a string")
        object.__setattr__(self, "keywords", tuple(self.keywords))

    @classmethod
    def coerce(cls, value: SearchBoxOptions | Mapping[str, Any] | None) -> SearchBoxOptions:
        """Build options from None, a mapping with ``keywords``, or options.

        Args:
            value: Options object, mapping, or None.

        Returns:
            Options instance.

        Raises:
            TypeError: If value has an unsupported type.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(keywords=value.get("keywords") or ())
        raise TypeError(f"Unsupported options type: {type(value).__name__}")
