from __future__ import annotations

import pytest

from sqlassembly.schema import TableSchema


@pytest.fixture
def users() -> TableSchema:
    return TableSchema("users", {"id": "id", "userName": "user_name", "age": "age"})


@pytest.fixture
def posts() -> TableSchema:
    return TableSchema("posts", ["id", "title", "body"])
