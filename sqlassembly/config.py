"""Statement assembly configuration."""

from dataclasses import dataclass, replace
from typing import Any

from sqlassembly.exceptions import ImproperConfigurationError

__all__ = ("StatementConfig",)

ORDER_DIRECTIONS = frozenset({"ASC", "DESC"})


@dataclass(frozen=True)
class StatementConfig:
    """Options shared by every statement a builder assembles.

    Attributes:
        placeholder: Token written for each bound value (qmark style by default).
        default_direction: Sort direction used by ``order_by`` when none is given.
        strict_sections: Raise as soon as a contributor targets a section the
            current statement type would drop, instead of silently ignoring it.
    """

    placeholder: str = "?"
    default_direction: str = "ASC"
    strict_sections: bool = False

    def __post_init__(self) -> None:
        if not self.placeholder:
            msg = "placeholder must be a non-empty string"
            raise ImproperConfigurationError(msg)
        if self.default_direction.upper() not in ORDER_DIRECTIONS:
            msg = f"default_direction must be one of {sorted(ORDER_DIRECTIONS)}, got {self.default_direction!r}"
            raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "StatementConfig":
        """Return a copy of this config with ``changes`` applied.

        Returns:
            StatementConfig: The modified copy.
        """
        return replace(self, **changes)
