"""Cell values and their textual form.

A value is one of ``int``, ``float``, ``str``, ``bool`` or ``None`` (NULL).
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

Value = Union[int, float, str, bool, None]


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: Value) -> str:
    """Render a value: booleans as true/false, NULL as ``NULL``, floats without exponent."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"unsupported value type: {type(value).__name__}")