"""Literal formatting for inline SQL and bound parameters.

Two paths exist and must not be confused:

* :func:`parse_value` turns a Python value into SQL text that is written
  straight into the statement (``where`` conditions).
* :func:`bind_value` prepares a value for the driver's parameter list
  (``set_values``); the statement only carries a placeholder for it.
"""

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional

from sqlassembly.exceptions import SQLBuilderError
from sqlassembly.utils.serializers import to_json

__all__ = (
    "NULL",
    "bind_value",
    "format_in_list",
    "format_value_list",
    "parse_value",
    "render_literal",
)

NULL = "NULL"


def _is_structured(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def _is_finite(value: "int | float | Decimal") -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, int) or math.isfinite(value)


def _quote(text: str, quote: str) -> str:
    return quote + text.replace(quote, quote * 2) + quote


def parse_value(value: Any) -> Optional[str]:
    """Format ``value`` as an inline SQL literal.

    Args:
        value: The Python value to format.

    Raises:
        SQLBuilderError: If ``value`` is a NaN or infinite number.

    Returns:
        The literal text, or ``None`` when ``value`` is ``None``.
    """
    if value is None:
        return None
    if _is_structured(value):
        return _quote(to_json(value), "'")
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float, Decimal)):
        if not _is_finite(value):
            msg = f"{value!r} has no SQL literal form"
            raise SQLBuilderError(msg)
        return str(value)
    if value == NULL:
        return NULL
    return _quote(str(value).strip(), '"')


def render_literal(value: Any) -> str:
    """Like :func:`parse_value`, but ``None`` renders as ``NULL``."""
    parsed = parse_value(value)
    return NULL if parsed is None else parsed


def format_in_list(values: Iterable[Any]) -> str:
    """Render ``values`` as a parenthesized ``IN`` list of literals."""
    return "(" + ", ".join(render_literal(value) for value in values) + ")"


def format_value_list(value: Any) -> str:
    """Render a scalar or a sequence as single-quoted, comma-separated text.

    Example:
        >>> format_value_list(["a", "b"])
        "'a', 'b'"
        >>> format_value_list(7)
        "'7'"
    """
    items = value if isinstance(value, (list, tuple)) else [value]
    return ", ".join(_quote(str(item), "'") for item in items)


def bind_value(value: Any) -> Any:
    """Prepare ``value`` for the driver's bound-parameter list.

    Dicts, lists and tuples are encoded as JSON text; everything else passes
    through untouched.
    """
    if _is_structured(value):
        return to_json(value)
    return value
