"""Tests for INSERT assembly."""

from decimal import Decimal

from sqlassembly.builder import Query, insert
from sqlassembly.config import StatementConfig
from sqlassembly.exceptions import MissingSectionError
from sqlassembly.schema import TableSchema
from sqlassembly.utils.serializers import from_json


class TestInsert:
    """Test cases for INSERT statements."""

    def test_basic_insert(self, users: TableSchema) -> None:
        """Test columns, placeholders and bound values line up."""
        statement = insert(users).set_values({"name": "Al", "age": 30}).build()

        assert statement.sql == "INSERT INTO users (name, age) VALUES (?, ?)"
        assert statement.parameters == ("Al", 30)
        assert statement.as_driver_args() == ("INSERT INTO users (name, age) VALUES (?, ?)", ["Al", 30])

    def test_structured_values_bound_as_json(self, users: TableSchema) -> None:
        """Test lists and dicts are bound as JSON text."""
        statement = insert(users).set_values({"name": "Al", "tags": ["a", "b"], "meta": {"k": 1}}).build()

        assert statement.sql == "INSERT INTO users (name, tags, meta) VALUES (?, ?, ?)"
        assert statement.parameters == ("Al", '["a","b"]', '{"k":1}')
        assert from_json(statement.parameters[1]) == ["a", "b"]

    def test_value_order_follows_columns(self, users: TableSchema) -> None:
        """Test bound values follow the generated column order."""
        data = {"z": 1, "a": None, "m": Decimal("1.5"), "b": "text"}
        sql, values = insert(users).set_values(data).build().as_driver_args()

        assert sql == "INSERT INTO users (z, a, m, b) VALUES (?, ?, ?, ?)"
        assert values == list(data.values())

    def test_bound_strings_untouched(self, users: TableSchema) -> None:
        """Test bound strings are neither trimmed nor quoted."""
        statement = insert(users).set_values({"name": "  '; DROP TABLE users; -- "}).build()

        assert "DROP TABLE" not in statement.sql
        assert statement.parameters == ("  '; DROP TABLE users; -- ",)

    def test_missing_values(self, users: TableSchema) -> None:
        """Test INSERT without values is rejected."""
        result = insert(users).create()

        assert isinstance(result.error, MissingSectionError)
        assert result.error.section == "values"
        assert str(result.error) == '"values" missing in query.'

    def test_empty_mapping_is_missing_values(self, users: TableSchema) -> None:
        """Test an empty mapping binds nothing."""
        assert isinstance(insert(users).set_values({}).create().error, MissingSectionError)

    def test_custom_placeholder(self, users: TableSchema) -> None:
        """Test the placeholder token comes from the config."""
        config = StatementConfig(placeholder="%s")

        assert insert(users, config).set_values({"a": 1, "b": 2}).build().sql == "INSERT INTO users (a, b) VALUES (%s, %s)"

    def test_limit_not_rendered(self, users: TableSchema) -> None:
        """Test sections outside the INSERT policy never reach the SQL."""
        statement = Query(users).insert().set_values({"a": 1}).limit(5).order_by("a").build()

        assert statement.sql == "INSERT INTO users (a) VALUES (?)"

    def test_create_twice(self, users: TableSchema) -> None:
        """Test repeated ``create`` calls give equal results."""
        query = insert(users).set_values({"name": "Al", "tags": ["a"]})

        assert query.create() == query.create()
