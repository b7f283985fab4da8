"""A small in-memory :class:`~sqlassembly.protocols.SchemaSource`."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Union

__all__ = ("TableSchema",)


@dataclass(frozen=True)
class TableSchema:
    """Table name plus the columns selected by default.

    ``fields`` is either a sequence of column names or a mapping of
    ``alias -> column``. Columns whose alias equals their name are emitted
    without an ``AS`` clause.

    Example:
        >>> TableSchema("users", {"id": "id", "userName": "user_name"}).aliased_columns()
        ['users.id', 'users.user_name AS userName']
    """

    name: str
    fields: Union[Sequence[str], Mapping[str, str]] = field(default_factory=tuple)

    @property
    def table_name(self) -> str:
        return self.name

    def aliased_columns(self) -> list[str]:
        if isinstance(self.fields, Mapping):
            pairs = list(self.fields.items())
        else:
            pairs = [(column, column) for column in self.fields]
        return [
            f"{self.name}.{column}" if alias == column else f"{self.name}.{column} AS {alias}" for alias, column in pairs
        ]
