"""Typed storage for the fragments a statement accumulates."""

from dataclasses import dataclass, field
from typing import Any, Optional

from sqlassembly.builder._policy import Section

__all__ = ("Sections",)


@dataclass
class Sections:
    """One field per :class:`Section`.

    ``columns`` is kept as a list of fragments so it can be filtered after the
    fact; ``values`` holds bound parameters rather than SQL text.
    """

    columns: list[str] = field(default_factory=list)
    escaped: str = ""
    values: list[Any] = field(default_factory=list)
    where: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)
    limit: Optional[str] = None

    def has(self, section: Section) -> bool:
        """Whether ``section`` holds anything.

        Returns:
            bool: ``True`` when the section is non-empty.
        """
        match section:
            case Section.COLUMNS:
                return bool(self.columns)
            case Section.ESCAPED:
                return bool(self.escaped)
            case Section.VALUES:
                return bool(self.values)
            case Section.WHERE:
                return bool(self.where)
            case Section.ORDER_BY:
                return bool(self.order_by)
            case Section.LIMIT:
                return bool(self.limit)
