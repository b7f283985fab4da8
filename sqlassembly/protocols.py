"""Runtime-checkable protocols for sqlassembly collaborators."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

__all__ = ("SchemaSource",)


@runtime_checkable
class SchemaSource(Protocol):
    """Protocol for the schema layer a builder is constructed from."""

    @property
    def table_name(self) -> str:
        """Name of the table statements target."""
        ...

    def aliased_columns(self) -> Sequence[str]:
        """Column fragments selected by default, aliases included."""
        ...
