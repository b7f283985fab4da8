"""JSON encoding backed by msgspec."""

from typing import Any, Literal, Union, overload

import msgspec

from sqlassembly.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode ``data`` as compact JSON.

    Raises:
        SerializationError: If ``data`` holds a type msgspec cannot encode.

    Returns:
        The JSON document as ``str``, or ``bytes`` when ``as_bytes`` is set.
    """
    try:
        encoded = _encoder.encode(data)
    except (TypeError, msgspec.EncodeError) as e:
        msg = f"Unable to encode {type(data).__name__} as JSON"
        raise SerializationError(msg) from e
    return encoded if as_bytes else encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    """Decode a JSON document.

    Raises:
        SerializationError: If ``data`` is not valid JSON.

    Returns:
        The decoded Python object.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = "Unable to decode JSON document"
        raise SerializationError(msg) from e
