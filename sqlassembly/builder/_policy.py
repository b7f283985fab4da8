"""Statement types and the section policy attached to each of them."""

from enum import Enum

__all__ = (
    "Section",
    "StatementType",
    "forbidden_sections",
    "permitted_sections",
    "required_sections",
)


class StatementType(str, Enum):
    """Kinds of statement a :class:`~sqlassembly.builder.Query` can start."""

    SELECT = "select"
    UPDATE = "update"
    INSERT = "insert"
    DELETE = "delete"
    RAW = "raw"

    def __str__(self) -> str:
        return self.value


class Section(str, Enum):
    """Named statement fragments, in substitution order."""

    COLUMNS = "columns"
    ESCAPED = "escaped"
    VALUES = "values"
    WHERE = "where"
    ORDER_BY = "orderBy"
    LIMIT = "limit"

    def __str__(self) -> str:
        return self.value

    @property
    def token(self) -> str:
        """Placeholder written into a template where this section belongs."""
        return "{" + self.value + "}"


def permitted_sections(statement_type: StatementType) -> tuple[Section, ...]:
    """Sections that may be rendered into a statement of ``statement_type``.

    Bound values never render as text, so ``VALUES`` is absent from every entry.

    Returns:
        tuple[Section, ...]: Permitted sections in substitution order.
    """
    match statement_type:
        case StatementType.SELECT:
            return (Section.COLUMNS, Section.WHERE, Section.ORDER_BY, Section.LIMIT)
        case StatementType.UPDATE:
            return (Section.ESCAPED, Section.WHERE)
        case StatementType.INSERT:
            return (Section.COLUMNS, Section.ESCAPED, Section.WHERE)
        case StatementType.DELETE:
            return (Section.WHERE,)
        case StatementType.RAW:
            return ()


def required_sections(statement_type: StatementType) -> tuple[Section, ...]:
    """Sections that must be populated before ``statement_type`` can be created.

    Returns:
        tuple[Section, ...]: Required sections.
    """
    match statement_type:
        case StatementType.UPDATE | StatementType.INSERT:
            return (Section.VALUES,)
        case StatementType.DELETE:
            return (Section.WHERE,)
        case _:
            return ()


def forbidden_sections(statement_type: StatementType) -> tuple[Section, ...]:
    """Sections that must stay empty for ``statement_type``.

    Returns:
        tuple[Section, ...]: Forbidden sections.
    """
    match statement_type:
        case StatementType.SELECT:
            return (Section.VALUES,)
        case StatementType.DELETE:
            return (Section.COLUMNS, Section.VALUES)
        case _:
            return ()
