"""
Structural serializer: value model -> JavaScript literal text.

The walk is recursive. At each node the kind decides whether the node
is an enclosing type and how its contents are wrapped:

    - Square brackets ("[]") translate to a JavaScript array
    - Curly brackets ("{}") translate to a JavaScript object
    - Scalars print as their JavaScript equivalent

Every composite emits its own trailing comma, so the final literal has
redundant trailing commas. Browsers tolerate them and consumers depend on
the exact text, so the shape must not be "cleaned up".

String scalars are wrapped in double quotes WITHOUT escaping. Callers
must not pass strings containing double quotes, backslashes or line
breaks they cannot tolerate verbatim.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import List

from localize.errors import UnsupportedValueError
from localize.values import (
    Value,
    Scalar,
    Sequence,
    Mapping,
    Record,
    Reference,
)


log = logging.getLogger(__name__)


def _format_float(value: float) -> str:
    """
    Shortest text that reads back as the same float, in %g layout.

    Exponent form is used when the decimal exponent is below -4 or at
    least 6, with a sign and at least two exponent digits (1e+06).
    """
    # repr() already holds the shortest round-trip digits
    d = Decimal(repr(value)).normalize()
    sign, digits, exponent = d.as_tuple()
    x = len(digits) + exponent - 1
    if x < -4 or x >= 6:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(n) for n in digits[1:])
        return f"{'-' if sign else ''}{mantissa}e{'-' if x < 0 else '+'}{abs(x):02d}"
    return format(d, "f")


def _format_scalar(value) -> str:
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    return f'"{value}"'


def _wrapper_for(value: Value) -> tuple[str, str]:
    """Pick the enclosing pair for a Mapping entry that needs one."""
    if isinstance(value, Reference) and not isinstance(value.unwrap(), Mapping):
        return "[", "]"
    return "{", "}"


def reflect_value(value: Value, buf: List[str]) -> None:
    """
    Write the text for a value and all of its children into buf.

    Args:
        value: Root of the subtree to emit
        buf: List of text chunks, appended to in order

    Raises:
        UnsupportedValueError: If a node is outside the closed value set
    """
    if isinstance(value, Reference):
        reflect_value(value.unwrap(), buf)

    elif isinstance(value, Record):
        for name, item in value.fields:
            buf.append(f'"{name}": {{\n')
            reflect_value(item, buf)
            buf.append("},\n")

    elif isinstance(value, Mapping):
        for key, item in value.entries.items():
            if isinstance(item, (Mapping, Reference)):
                open_, close = _wrapper_for(item)
                buf.append(f'"{key}": {open_}\n')
                reflect_value(item, buf)
                buf.append(f"\n{close},\n")
            else:
                buf.append(f'"{key}":')
                reflect_value(item, buf)
                buf.append("\n")

    elif isinstance(value, Sequence):
        buf.append("[")
        for item in value.items:
            reflect_value(item, buf)
        buf.append("],\n")

    elif isinstance(value, Scalar):
        buf.append(_format_scalar(value.value) + ",")

    else:
        raise UnsupportedValueError(f"Unsupported value node: {type(value).__name__}")


def render(value: Value) -> str:
    """Render a single value (no variable assignment around it)."""
    buf: List[str] = []
    reflect_value(value, buf)
    return "".join(buf)


def render_target(target) -> str:
    """
    Render a complete assignment block for a localized map.

    Args:
        target: Object exposing ``var_name`` and ``root()`` (a LocalizeMap)

    Returns:
        ``<var_name> = {\\n<entries>\\n};``
    """
    root = target.root()
    log.debug("rendering %s with %d entries", target.var_name, len(root.entries))
    buf: List[str] = [f"{target.var_name} = {{\n"]
    reflect_value(root, buf)
    buf.append("\n};")
    return "".join(buf)


__all__ = ["reflect_value", "render", "render_target"]
