# ruff: noqa: PLR0904
"""Fluent, section-based SQL statement assembly.

A :class:`Query` is started with one of ``select``/``insert``/``update``/
``delete``/``raw``, collects fragments into named sections through chained
contributor calls, and is finalized with :meth:`Query.create`.
"""

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Union

from mypy_extensions import mypyc_attr

from sqlassembly.builder._policy import (
    Section,
    StatementType,
    forbidden_sections,
    permitted_sections,
    required_sections,
)
from sqlassembly.builder._result import BuildResult, Statement
from sqlassembly.builder._sections import Sections
from sqlassembly.builder._values import bind_value, format_in_list, format_value_list, render_literal
from sqlassembly.config import StatementConfig
from sqlassembly.exceptions import (
    ForbiddenSectionError,
    ImproperConfigurationError,
    MissingSectionError,
    SectionValidationError,
    SQLBuilderError,
)
from sqlassembly.protocols import SchemaSource
from sqlassembly.typing import Empty
from sqlassembly.utils.logging import get_logger

__all__ = ("Query",)

logger = get_logger("builder")

_ALIAS_RE = re.compile(r"\s+AS\s+", re.IGNORECASE)


def _fragment_names(fragment: str) -> set[str]:
    """Names a column fragment answers to: qualified column, bare column and alias."""
    parts = _ALIAS_RE.split(fragment.strip(), maxsplit=1)
    qualified = parts[0].strip()
    names = {qualified, qualified.rsplit(".", 1)[-1]}
    if len(parts) == 2:
        names.add(parts[1].strip())
    return names


@mypyc_attr(allow_interpreted_subclasses=True)
class Query:
    """Builder for a single SQL statement against one table.

    One instance builds one statement: call a starter, any number of
    contributors, then :meth:`create`.

    Example:
        >>> users = TableSchema("users", ["id", "name"])
        >>> Query(users).select().where("age", ">", 18).limit(10).create().unwrap().sql
        'SELECT users.id, users.name FROM users WHERE age > 18 LIMIT 0, 10'
    """

    __slots__ = ("_bound_columns", "_config", "_model", "_statement_type", "_template", "sections", "table")

    def __init__(self, model: SchemaSource, config: Optional[StatementConfig] = None) -> None:
        """Initialize the builder.

        Args:
            model: Schema source supplying the table name and default columns.
            config: Assembly options. Defaults to :class:`StatementConfig`.

        Raises:
            ImproperConfigurationError: If ``model`` does not satisfy :class:`SchemaSource`.
        """
        if not isinstance(model, SchemaSource):
            msg = f"{type(model).__name__} does not provide table_name and aliased_columns()"
            raise ImproperConfigurationError(msg)
        self._model = model
        self._config = config or StatementConfig()
        self._statement_type: Optional[StatementType] = None
        self._template = ""
        self._bound_columns = False
        self.table = model.table_name
        self.sections = Sections()

    @property
    def statement_type(self) -> Optional[StatementType]:
        return self._statement_type

    @property
    def template(self) -> str:
        return self._template

    @property
    def config(self) -> StatementConfig:
        return self._config

    # -- starters --

    def select(self) -> "Query":
        """Start a SELECT over the model's aliased columns.

        Returns:
            Query: The current builder instance for method chaining.
        """
        self.sections.columns = list(self._model.aliased_columns())
        self._bound_columns = False
        return self._start(StatementType.SELECT, f"SELECT {Section.COLUMNS.token} FROM {self.table}")

    def update(self) -> "Query":
        """Start an UPDATE.

        Returns:
            Query: The current builder instance for method chaining.
        """
        return self._start(StatementType.UPDATE, f"UPDATE {self.table} SET")

    def insert(self) -> "Query":
        """Start an INSERT.

        Returns:
            Query: The current builder instance for method chaining.
        """
        return self._start(StatementType.INSERT, f"INSERT INTO {self.table}")

    def delete(self) -> "Query":
        """Start a DELETE.

        Returns:
            Query: The current builder instance for method chaining.
        """
        return self._start(StatementType.DELETE, f"DELETE FROM {self.table}")

    def raw(self, sql: str) -> "Query":
        """Use ``sql`` verbatim. No section is rendered into a raw statement.

        Returns:
            Query: The current builder instance for method chaining.
        """
        return self._start(StatementType.RAW, sql)

    def _start(self, statement_type: StatementType, template: str) -> "Query":
        self._statement_type = statement_type
        self._template = template
        return self

    # -- contributors --

    def where(self, column: str, operator_or_value: Any, value: Any = Empty) -> "Query":
        """Add a condition, joined to earlier ones with ``AND``.

        ``where("age", 18)`` compares with ``=``; ``where("age", ">", 18)`` uses the
        given operator. The value is written inline as a literal.

        Args:
            column: Left-hand column.
            operator_or_value: The operator, or the value when ``value`` is omitted.
            value: The right-hand value.

        Returns:
            Query: The current builder instance for method chaining.
        """
        if value is Empty:
            operator, value = "=", operator_or_value
        else:
            operator = operator_or_value
        return self._add_condition(f"{column} {operator} {render_literal(value)}", "where")

    def where_in(self, column: str, values: Union[str, Iterable[Any]]) -> "Query":
        """Add ``column IN ...``.

        Args:
            column: Left-hand column.
            values: A pre-formatted list or subquery (used verbatim), or an
                iterable of values rendered as literals.

        Returns:
            Query: The current builder instance for method chaining.
        """
        text = values if isinstance(values, str) else format_in_list(values)
        return self._add_condition(f"{column} IN {text}", "where_in")

    def where_in_pivot(
        self,
        *,
        pivot: str,
        table2: str,
        column: str,
        value: Any,
        join_column: str,
        filter_by: str,
        table1: Optional[str] = None,
    ) -> "Query":
        """Restrict ids to those linked through a pivot table.

        Args:
            pivot: The pivot (join) table.
            table2: The related table filtered on.
            column: Pivot column referencing ``table2.id``.
            value: A single value or a list of values ``filter_by`` must match.
            join_column: Pivot column referencing this builder's ids.
            filter_by: ``table2`` column compared against ``value``.
            table1: The outer table. Accepted for call-site compatibility; the
                condition always targets the unqualified ``id`` column.

        Returns:
            Query: The current builder instance for method chaining.
        """
        subquery = (
            f"(SELECT t1.{join_column} FROM {pivot} AS t1 LEFT JOIN {table2} AS t2 "
            f"ON t2.id = t1.{column} WHERE t2.{filter_by} IN ({format_value_list(value)}))"
        )
        return self.where_in("id", subquery)

    def _add_condition(self, condition: str, operation: str) -> "Query":
        self._check_permitted(Section.WHERE, operation)
        self.sections.where.append(condition)
        return self

    def set_values(self, data: Mapping[str, Any]) -> "Query":
        """Bind ``data`` as the statement's column values.

        Inserts get ``(c1, c2) VALUES (?, ?)``, everything else ``c1 = ?, c2 = ?``.
        Dicts, lists and tuples are bound as JSON text.

        Args:
            data: Column name to value.

        Returns:
            Query: The current builder instance for method chaining.
        """
        if self._statement_type is not StatementType.RAW:
            self._check_permitted(Section.ESCAPED, "set_values")
        columns = list(data)
        placeholder = self._config.placeholder

        self.sections.columns = columns
        self._bound_columns = True
        if self._statement_type is StatementType.INSERT:
            self.sections.escaped = f"VALUES ({', '.join(placeholder for _ in columns)})"
        else:
            self.sections.escaped = ", ".join(f"{column} = {placeholder}" for column in columns)
        self.sections.values = [bind_value(data[column]) for column in columns]
        return self

    def order_by(self, column: str, direction: Optional[str] = None) -> "Query":
        """Add a sort key. Repeated calls add further keys.

        Returns:
            Query: The current builder instance for method chaining.
        """
        self._check_permitted(Section.ORDER_BY, "order_by")
        direction = (direction or self._config.default_direction).upper()
        self.sections.order_by.append(f"{column} {direction}")
        return self

    def limit(self, count: int, offset: int = 0) -> "Query":
        """Set ``LIMIT offset, count``, replacing any earlier limit.

        Returns:
            Query: The current builder instance for method chaining.
        """
        self._check_permitted(Section.LIMIT, "limit")
        self.sections.limit = f"LIMIT {offset}, {count}"
        return self

    def paginate(self, page: int, page_size: int) -> "Query":
        """Limit to the 1-based ``page`` of ``page_size`` rows.

        Returns:
            Query: The current builder instance for method chaining.
        """
        return self.limit(page_size, (page - 1) * page_size)

    def only(self, columns: Sequence[str]) -> "Query":
        """Select just ``columns``, qualified with the table name.

        Returns:
            Query: The current builder instance for method chaining.
        """
        self._check_permitted(Section.COLUMNS, "only")
        self.sections.columns = [f"{self.table}.{column}" for column in columns]
        self._bound_columns = False
        return self

    def except_(self, columns: Sequence[str]) -> "Query":
        """Drop selected column fragments named by any of ``columns``.

        A fragment matches on its qualified column (``users.id``), its bare column
        (``id``) or its alias. The table qualifier alone never matches, and
        ``"id"`` does not remove ``users.user_id``.

        Raises:
            SQLBuilderError: If every selected column would be removed.

        Returns:
            Query: The current builder instance for method chaining.
        """
        self._check_permitted(Section.COLUMNS, "except_")
        excluded = set(columns)
        remaining = [fragment for fragment in self.sections.columns if excluded.isdisjoint(_fragment_names(fragment))]
        if self.sections.columns and not remaining:
            msg = "except_() would remove every selected column"
            raise SQLBuilderError(msg)
        self.sections.columns = remaining
        return self

    def distinct(self) -> "Query":
        """Rewrite the leading ``SELECT`` of the template to ``SELECT DISTINCT``.

        Returns:
            Query: The current builder instance for method chaining.
        """
        if "SELECT DISTINCT" not in self._template:
            self._template = self._template.replace("SELECT", "SELECT DISTINCT", 1)
        return self

    def _check_permitted(self, section: Section, operation: str) -> None:
        if not self._config.strict_sections or self._statement_type is None:
            return
        if section not in permitted_sections(self._statement_type):
            msg = f"{operation}() has no effect on {self._statement_type.value.upper()} statements"
            raise SQLBuilderError(msg)

    # -- finalization --

    def create(self) -> BuildResult:
        """Validate and assemble the statement.

        Validation failures are returned inside the result rather than raised.
        Builder state is left untouched, so repeated calls give equal results.

        Returns:
            BuildResult: The finished statement, or the error that prevented it.
        """
        if self._statement_type is None:
            return BuildResult(
                error=SQLBuilderError("No statement started. Call select(), insert(), update(), delete() or raw().")
            )

        error = self._validate(self._statement_type)
        if error is not None:
            logger.debug("%s statement rejected: %s", self._statement_type.value, error)
            return BuildResult(error=error)

        permitted = permitted_sections(self._statement_type)
        dropped = [
            section.value
            for section in Section
            if section is not Section.VALUES
            and section not in permitted
            and self.sections.has(section)
            and not (section is Section.COLUMNS and self._bound_columns)
        ]
        if dropped:
            logger.debug("Sections not rendered into %s statement: %s", self._statement_type.value, ", ".join(dropped))

        statement = Statement(sql=self._assemble(self._statement_type), parameters=tuple(self.sections.values))
        logger.debug("Created %s statement: %s", self._statement_type.value, statement.sql)
        return BuildResult(statement=statement)

    def build(self) -> Statement:
        """Create the statement, raising instead of returning validation errors.

        Raises:
            SQLBuilderError: If the statement cannot be created.

        Returns:
            Statement: The finished statement.
        """
        return self.create().unwrap()

    def _validate(self, statement_type: StatementType) -> Optional[SectionValidationError]:
        for section in required_sections(statement_type):
            if not self.sections.has(section):
                return MissingSectionError(section.value)
        for section in forbidden_sections(statement_type):
            if self.sections.has(section):
                return ForbiddenSectionError(section.value)
        return None

    def _assemble(self, statement_type: StatementType) -> str:
        sql = self._template
        trailing: list[str] = []
        for section in permitted_sections(statement_type):
            rendered = self._render(section, statement_type)
            if section.token in sql:
                sql = sql.replace(section.token, rendered, 1)
            elif rendered:
                trailing.append(rendered)
        return " ".join((sql, *trailing))

    def _render(self, section: Section, statement_type: StatementType) -> str:
        sections = self.sections
        match section:
            case Section.COLUMNS:
                if statement_type is StatementType.SELECT:
                    return ", ".join(sections.columns) or "*"
                return f"({', '.join(sections.columns)})" if sections.columns else ""
            case Section.ESCAPED:
                return sections.escaped
            case Section.WHERE:
                return f"WHERE {' AND '.join(sections.where)}" if sections.where else ""
            case Section.ORDER_BY:
                return f"ORDER BY {', '.join(sections.order_by)}" if sections.order_by else ""
            case Section.LIMIT:
                return sections.limit or ""
            case _:
                return ""

    def __str__(self) -> str:
        """The statement as assembled so far, without validation."""
        if self._statement_type is None:
            return ""
        return self._assemble(self._statement_type)
