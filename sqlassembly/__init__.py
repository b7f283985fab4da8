"""sqlassembly: fluent, section-based SQL statement assembly."""

from sqlassembly import builder, exceptions, utils
from sqlassembly.__metadata__ import __version__
from sqlassembly.builder import BuildResult, Query, Section, Statement, StatementType, delete, insert, raw, select, update
from sqlassembly.config import StatementConfig
from sqlassembly.exceptions import (
    ForbiddenSectionError,
    ImproperConfigurationError,
    MissingSectionError,
    SectionValidationError,
    SerializationError,
    SQLAssemblyError,
    SQLBuilderError,
)
from sqlassembly.protocols import SchemaSource
from sqlassembly.schema import TableSchema

__all__ = (
    "BuildResult",
    "ForbiddenSectionError",
    "ImproperConfigurationError",
    "MissingSectionError",
    "Query",
    "SQLAssemblyError",
    "SQLBuilderError",
    "SchemaSource",
    "Section",
    "SectionValidationError",
    "SerializationError",
    "Statement",
    "StatementConfig",
    "StatementType",
    "TableSchema",
    "__version__",
    "builder",
    "delete",
    "exceptions",
    "insert",
    "raw",
    "select",
    "update",
    "utils",
)
