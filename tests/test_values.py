"""
Tests for the value model and conversion from plain Python data.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List

import pytest

from localize.errors import UnsupportedValueError
from localize.values import (
    Mapping,
    Record,
    Reference,
    Scalar,
    Sequence,
    to_plain,
    to_reference,
    to_value,
)


@dataclass
class Nonce:
    login: str
    logout: str = "x"


@dataclass
class Page:
    title: str
    nonces: List[Nonce] = field(default_factory=list)


class TestScalar:

    @pytest.mark.parametrize("value", [0, -1, 2 ** 64, 1.25, True, False, "", "text"])
    def test_supported_payloads(self, value):
        assert Scalar(value).value == value

    @pytest.mark.parametrize("value", [None, b"bytes", 1j, object()])
    def test_unsupported_payload_rejected(self, value):
        with pytest.raises(UnsupportedValueError):
            Scalar(value)

    def test_scalars_are_immutable(self):
        s = Scalar(1)
        with pytest.raises(AttributeError):
            s.value = 2


class TestReference:

    def test_unwrap_returns_target(self):
        target = Scalar(1)
        assert Reference(target).unwrap() is target

    def test_reference_cannot_nest(self):
        with pytest.raises(UnsupportedValueError):
            Reference(Reference(Scalar(1)))

    def test_reference_requires_value(self):
        with pytest.raises(UnsupportedValueError):
            Reference(1)


class TestToValue:

    def test_scalars(self):
        assert to_value(1) == Scalar(1)
        assert to_value("a") == Scalar("a")
        assert to_value(True) == Scalar(True)

    def test_list_and_tuple_become_sequences(self):
        assert to_value([1, 2]) == Sequence((Scalar(1), Scalar(2)))
        assert to_value((1, 2)) == Sequence((Scalar(1), Scalar(2)))

    def test_dict_becomes_mapping(self):
        assert to_value({"a": 1}) == Mapping({"a": Scalar(1)})

    def test_any_mapping_type_is_accepted(self):
        assert to_value(OrderedDict(a=1)) == Mapping({"a": Scalar(1)})

    def test_nested_values_are_not_references(self):
        value = to_value({"a": {"b": [1]}})
        inner = value.entries["a"]
        assert isinstance(inner, Mapping)
        assert isinstance(inner.entries["b"], Sequence)

    def test_dataclass_becomes_record(self):
        value = to_value(Nonce(login="abc"))
        assert isinstance(value, Record)
        assert value.type_name == "Nonce"
        assert value.fields == (("login", Scalar("abc")), ("logout", Scalar("x")))

    def test_nested_dataclasses(self):
        value = to_value(Page(title="Home", nonces=[Nonce(login="a")]))
        names = [name for name, _ in value.fields]
        assert names == ["title", "nonces"]
        nonces = value.fields[1][1]
        assert isinstance(nonces, Sequence)
        assert isinstance(nonces.items[0], Record)

    def test_dataclass_type_is_not_a_record(self):
        with pytest.raises(UnsupportedValueError):
            to_value(Nonce)

    def test_existing_value_passes_through(self):
        v = Sequence((Scalar(1),))
        assert to_value(v) is v

    @pytest.mark.parametrize("obj", [None, {1, 2}, object(), b"raw", [1, None]])
    def test_unsupported_values(self, obj):
        with pytest.raises(UnsupportedValueError):
            to_value(obj)

    def test_non_string_keys_rejected(self):
        with pytest.raises(UnsupportedValueError):
            to_value({1: "one"})

    def test_cyclic_input_exhausts_recursion(self):
        data = {}
        data["self"] = data
        with pytest.raises(RecursionError):
            to_value(data)


class TestToReference:

    def test_wraps_converted_value(self):
        assert to_reference([1]) == Reference(Sequence((Scalar(1),)))

    def test_existing_reference_not_rewrapped(self):
        ref = Reference(Scalar(1))
        assert to_reference(ref) is ref


class TestToPlain:

    def test_scalars_and_containers(self):
        value = to_value({"a": [1, 2.5, True], "b": {"c": "d"}})
        assert to_plain(value) == {"a": [1, 2.5, True], "b": {"c": "d"}}

    def test_reference_is_unwrapped(self):
        assert to_plain(Reference(Sequence((Scalar(1),)))) == [1]

    def test_record_becomes_dict_in_field_order(self):
        plain = to_plain(to_value(Page(title="Home", nonces=[Nonce(login="a")])))
        assert plain == {"title": "Home", "nonces": [{"login": "a", "logout": "x"}]}
        assert list(plain) == ["title", "nonces"]

    def test_tuple_becomes_list(self):
        assert to_plain(to_value((1, 2))) == [1, 2]
