"""Results produced when a statement is finalized."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from typing_extensions import TypeAlias

from sqlassembly.exceptions import SQLBuilderError

__all__ = ("BuildResult", "DriverArgs", "Statement")

DriverArgs: TypeAlias = Union[str, tuple[str, list[Any]]]


@dataclass(frozen=True)
class Statement:
    """A finished SQL statement and the values bound to its placeholders."""

    sql: str
    parameters: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_parameterized(self) -> bool:
        """Whether the statement carries bound values."""
        return bool(self.parameters)

    def as_driver_args(self) -> DriverArgs:
        """Shape the statement for a qmark-style driver call.

        Returns:
            DriverArgs: ``(sql, values)`` when values are bound, otherwise the bare SQL text.
        """
        if self.parameters:
            return self.sql, list(self.parameters)
        return self.sql

    def __str__(self) -> str:
        return self.sql


@dataclass(frozen=True)
class BuildResult:
    """Either a :class:`Statement` or the error that prevented one."""

    statement: Optional[Statement] = None
    error: Optional[SQLBuilderError] = None

    def __post_init__(self) -> None:
        if (self.statement is None) == (self.error is None):
            msg = "BuildResult requires exactly one of statement or error"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Statement:
        """Return the statement, raising the stored error if there is one.

        Raises:
            SQLBuilderError: The validation error captured during finalization.

        Returns:
            Statement: The finished statement.
        """
        if self.error is not None:
            raise self.error
        return self.statement  # type: ignore[return-value]
