"""
Value model for localized data.

Everything the serializer can emit is represented as one of a closed set
of node types:

    - Scalar    (int, float, bool, str)
    - Sequence  (ordered list of values)
    - Mapping   (text keys to values, order NOT significant)
    - Record    (named fields in declaration order)
    - Reference (transparent one-level indirection over a concrete value)

Plain Python data enters the model through to_value(). Anything that has
no representation is rejected there, so the serializer never has to
guess what to do with an unknown node.

ARCHITECTURAL RULE:
    Values are structure only. They do not know how they are rendered.
    Rendering belongs in localize.serializer.
"""

from __future__ import annotations

import dataclasses
from abc import ABC
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from localize.errors import UnsupportedValueError


class Value(ABC):
    """
    Base class for all value nodes.

    Intentionally empty: it only marks membership in the closed set.
    """
    pass


@dataclass(frozen=True)
class Scalar(Value):
    """
    Terminal value.

    Properties:
        value: int, float, bool or str
    """

    value: Union[int, float, bool, str]

    def __post_init__(self):
        if not isinstance(self.value, (int, float, str)):
            raise UnsupportedValueError(
                f"Unsupported scalar type: {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class Sequence(Value):
    """Ordered list of values. Order is preserved in the output."""

    items: Tuple[Value, ...] = ()


@dataclass(frozen=True)
class Mapping(Value):
    """
    Text keys to values.

    IMPORTANT:
        Key order is not part of the output contract. Callers and tests
        must accept any permutation of the rendered entries.
    """

    entries: Dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class Record(Value):
    """
    Fixed-shape aggregate.

    Properties:
        fields: (name, value) pairs in declaration order
        type_name: Name of the originating type (informational only)
    """

    fields: Tuple[Tuple[str, Value], ...] = ()
    type_name: str | None = None


@dataclass(frozen=True)
class Reference(Value):
    """
    Transparent indirection over a concrete value.

    A container root holds values of any kind; each of its entries is a
    Reference so the serializer can pick a wrapper by looking through it.
    References never nest.
    """

    target: Value

    def __post_init__(self):
        if isinstance(self.target, Reference):
            raise UnsupportedValueError("A Reference cannot wrap another Reference")
        if not isinstance(self.target, Value):
            raise UnsupportedValueError(
                f"Reference target must be a Value, got {type(self.target).__name__}"
            )

    def unwrap(self) -> Value:
        return self.target


def to_value(obj: Any) -> Value:
    """
    Convert plain Python data into the value model.

    Args:
        obj: bool/int/float/str, list/tuple, str-keyed mapping,
             dataclass instance, or an existing Value

    Returns:
        Equivalent Value tree. Nested values are never wrapped in a
        Reference.

    Raises:
        UnsupportedValueError: If obj (or anything inside it) has no
            representation, e.g. None, a set, or a non-str mapping key
    """
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, (bool, int, float, str)):
        return Scalar(obj)
    if isinstance(obj, abc.Mapping):
        entries = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(
                    f"Mapping keys must be str, got {type(key).__name__}"
                )
            entries[key] = to_value(item)
        return Mapping(entries)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(to_value(item) for item in obj))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return Record(
            fields=tuple(
                (f.name, to_value(getattr(obj, f.name)))
                for f in dataclasses.fields(obj)
            ),
            type_name=type(obj).__name__,
        )
    raise UnsupportedValueError(f"Unsupported value type: {type(obj).__name__}")


def to_reference(obj: Any) -> Reference:
    """Convert obj and wrap it in a Reference (unless it already is one)."""
    if isinstance(obj, Reference):
        return obj
    return Reference(to_value(obj))


def to_plain(value: Value) -> Any:
    """
    Convert a Value tree back into plain JSON/YAML-ready data.

    Records become dicts and Sequences become lists, so a record loaded
    back from the result is a Mapping, not a Record.
    """
    if isinstance(value, Reference):
        return to_plain(value.unwrap())
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, Sequence):
        return [to_plain(item) for item in value.items]
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.entries.items()}
    if isinstance(value, Record):
        return {name: to_plain(item) for name, item in value.fields}
    raise UnsupportedValueError(f"Unsupported value node: {type(value).__name__}")


__all__ = [
    "Value",
    "Scalar",
    "Sequence",
    "Mapping",
    "Record",
    "Reference",
    "to_value",
    "to_reference",
    "to_plain",
]
