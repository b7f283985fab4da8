"""Tests for finalization results."""

import pytest

from sqlassembly.builder import BuildResult, Statement
from sqlassembly.exceptions import MissingSectionError


def test_statement_driver_args() -> None:
    assert Statement("SELECT 1").as_driver_args() == "SELECT 1"
    assert not Statement("SELECT 1").is_parameterized
    assert Statement("UPDATE t SET a = ?", (1,)).as_driver_args() == ("UPDATE t SET a = ?", [1])
    assert str(Statement("SELECT 1")) == "SELECT 1"


def test_build_result_unwrap() -> None:
    statement = Statement("SELECT 1")
    assert BuildResult(statement=statement).unwrap() is statement

    error = MissingSectionError("where")
    result = BuildResult(error=error)
    assert not result.ok
    with pytest.raises(MissingSectionError):
        result.unwrap()


def test_build_result_requires_exactly_one() -> None:
    with pytest.raises(ValueError):
        BuildResult()
    with pytest.raises(ValueError):
        BuildResult(statement=Statement("SELECT 1"), error=MissingSectionError("where"))
