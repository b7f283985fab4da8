"""Fluent SQL statement assembly.

The module-level factories start a :class:`Query` of the matching kind::

    from sqlassembly.builder import insert

    sql, values = insert(users).set_values({"name": "Al"}).build().as_driver_args()
"""

from typing import Optional

from sqlassembly.builder._policy import (
    Section,
    StatementType,
    forbidden_sections,
    permitted_sections,
    required_sections,
)
from sqlassembly.builder._query import Query
from sqlassembly.builder._result import BuildResult, DriverArgs, Statement
from sqlassembly.builder._sections import Sections
from sqlassembly.builder._values import bind_value, parse_value
from sqlassembly.config import StatementConfig
from sqlassembly.protocols import SchemaSource

__all__ = (
    "BuildResult",
    "DriverArgs",
    "Query",
    "Section",
    "Sections",
    "Statement",
    "StatementType",
    "bind_value",
    "delete",
    "forbidden_sections",
    "insert",
    "parse_value",
    "permitted_sections",
    "raw",
    "required_sections",
    "select",
    "update",
)


def select(model: SchemaSource, config: Optional[StatementConfig] = None) -> Query:
    """Create a SELECT builder.

    Args:
        model: Schema source supplying the table and its default columns.
        config: Optional assembly options.

    Returns:
        Query: A new builder started as SELECT.
    """
    return Query(model, config).select()


def insert(model: SchemaSource, config: Optional[StatementConfig] = None) -> Query:
    """Create an INSERT builder.

    Args:
        model: Schema source supplying the table.
        config: Optional assembly options.

    Returns:
        Query: A new builder started as INSERT.
    """
    return Query(model, config).insert()


def update(model: SchemaSource, config: Optional[StatementConfig] = None) -> Query:
    """Create an UPDATE builder.

    Args:
        model: Schema source supplying the table.
        config: Optional assembly options.

    Returns:
        Query: A new builder started as UPDATE.
    """
    return Query(model, config).update()


def delete(model: SchemaSource, config: Optional[StatementConfig] = None) -> Query:
    """Create a DELETE builder.

    Args:
        model: Schema source supplying the table.
        config: Optional assembly options.

    Returns:
        Query: A new builder started as DELETE.
    """
    return Query(model, config).delete()


def raw(model: SchemaSource, sql: str, config: Optional[StatementConfig] = None) -> Query:
    """Create a builder holding ``sql`` verbatim.

    Returns:
        Query: A new builder started as RAW.
    """
    return Query(model, config).raw(sql)
