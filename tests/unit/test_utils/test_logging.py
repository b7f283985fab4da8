"""Tests for sqlassembly logging helpers."""

import logging

import pytest

from sqlassembly.builder import Query, delete, update
from sqlassembly.schema import TableSchema
from sqlassembly.utils.logging import StructuredFormatter, configure_logging, get_logger
from sqlassembly.utils.serializers import from_json


def test_get_logger_namespace() -> None:
    assert get_logger().name == "sqlassembly"
    assert get_logger("builder").name == "sqlassembly.builder"
    assert get_logger("sqlassembly.builder").name == "sqlassembly.builder"


def test_structured_formatter() -> None:
    record = logging.LogRecord("sqlassembly.builder", logging.DEBUG, __file__, 10, "built %s", ("x",), None)
    record.extra_fields = {"statement_type": "select"}

    entry = from_json(StructuredFormatter().format(record))

    assert entry["message"] == "built x"
    assert entry["level"] == "DEBUG"
    assert entry["statement_type"] == "select"


def test_configure_logging() -> None:
    handler = logging.NullHandler()
    configure_logging(level="DEBUG", format_style="simple", extra_handlers=[handler])

    root = logging.getLogger("sqlassembly")
    try:
        assert root.level == logging.DEBUG
        assert handler in root.handlers
        assert root.propagate is False
    finally:
        root.handlers.clear()
        root.propagate = True
        root.setLevel(logging.NOTSET)


def test_builder_logs_rejections_and_dropped_sections(caplog: pytest.LogCaptureFixture) -> None:
    users = TableSchema("users", ["id"])

    with caplog.at_level(logging.DEBUG, logger="sqlassembly"):
        delete(users).create()
        Query(users).raw("SELECT 1").limit(1).create()

    assert "delete statement rejected" in caplog.text
    assert "Sections not rendered into raw statement: limit" in caplog.text


def test_update_does_not_report_bound_columns(caplog: pytest.LogCaptureFixture) -> None:
    users = TableSchema("users", ["id"])

    with caplog.at_level(logging.DEBUG, logger="sqlassembly"):
        update(users).set_values({"name": "x"}).where("id", 1).create()
        update(users).set_values({"name": "x"}).limit(1).create()

    assert "columns" not in caplog.text
    assert "Sections not rendered into update statement: limit" in caplog.text
