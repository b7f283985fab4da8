import pytest

from sqlassembly.exceptions import SerializationError
from sqlassembly.utils.serializers import from_json, to_json


def test_to_json_compact() -> None:
    assert to_json({"a": [1, "b"]}) == '{"a":[1,"b"]}'
    assert to_json([1], as_bytes=True) == b"[1]"


def test_from_json() -> None:
    assert from_json('{"a":1}') == {"a": 1}
    assert from_json(b"[true]") == [True]


def test_from_json_invalid() -> None:
    with pytest.raises(SerializationError):
        from_json("{nope")
