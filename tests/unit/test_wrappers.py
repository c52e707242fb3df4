"""Tests for the string-encoded wrapper types."""

from __future__ import annotations

import json
from datetime import timedelta

import pytest

from stringtypes.core.exceptions import ParseError
from stringtypes.core.protocols import IStringDecoder
from stringtypes.models.arrays import StringArray
from stringtypes.models.scalars import StringBool, StringDuration, StringFloat64, StringInt
from stringtypes.models.sizes import StringBinaryByteSize, StringDecimalSize
from stringtypes.parsing.scalars import parse_duration

ALL_WRAPPERS = [
    StringDuration,
    StringInt,
    StringFloat64,
    StringBinaryByteSize,
    StringDecimalSize,
    StringBool,
    StringArray,
]


@pytest.mark.parametrize(
    ("cls", "zero"),
    [
        (StringDuration, timedelta(0)),
        (StringInt, 0),
        (StringFloat64, 0.0),
        (StringBinaryByteSize, 0.0),
        (StringDecimalSize, 0.0),
        (StringBool, False),
        (StringArray, []),
    ],
)
def test_accessor_returns_zero_before_decode(cls, zero):
    assert cls().value() == zero


@pytest.mark.parametrize("cls", ALL_WRAPPERS)
def test_wrappers_satisfy_decoder_protocol(cls):
    assert isinstance(cls(), IStringDecoder)


@pytest.mark.parametrize("cls", ALL_WRAPPERS)
def test_non_string_token_is_parse_error(cls):
    wrapper = cls()
    with pytest.raises(ParseError, match="expected a string, got int"):
        wrapper.decode(42)
    assert wrapper.value() == cls.zero()


@pytest.mark.parametrize("token", ["1h30m", "-2.5s", "300ms", "0", "1h1us"])
def test_duration_matches_direct_parse(token):
    assert StringDuration.from_string(token).value() == parse_duration(token)


class TestDecode:
    def test_int(self):
        assert StringInt.from_string("42").value() == 42

    def test_float(self):
        assert StringFloat64.from_string("3.14159").value() == 3.14159

    @pytest.mark.parametrize("token", ["true", "1", "T"])
    def test_bool_truthy(self, token):
        assert StringBool.from_string(token).value() is True

    def test_bool_rejects_yes(self):
        with pytest.raises(ParseError):
            StringBool.from_string("yes")

    def test_binary_size(self):
        assert StringBinaryByteSize.from_string("1.5G").value() == 1610612736.0

    def test_decimal_size(self):
        assert StringDecimalSize.from_string("1.5G").value() == 1500000000.0

    @pytest.mark.parametrize("cls", [StringBinaryByteSize, StringDecimalSize])
    def test_size_bare_fallback(self, cls):
        assert cls.from_string("1024").value() == 1024.0

    def test_failed_decode_keeps_zero_value(self):
        wrapper = StringInt()
        with pytest.raises(ParseError):
            wrapper.decode("abc")
        assert wrapper.value() == 0

    def test_parse_error_propagates_unchanged(self):
        with pytest.raises(ParseError) as exc_info:
            StringInt.from_string("9223372036854775808")
        assert exc_info.value.func == "parse_int"
        assert exc_info.value.reason == "value out of range"

    def test_accessor_is_idempotent(self):
        wrapper = StringDuration.from_string("1h30m")
        assert wrapper.value() == wrapper.value() == timedelta(hours=1, minutes=30)


class TestStringArray:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("[host1,host2,host3]", ["host1", "host2", "host3"]),
            ("a, b ,c", ["a", "b", "c"]),
            ('["item1", "item2", "item3"]', ["item1", "item2", "item3"]),
            ("single", ["single"]),
            ("a,,b", ["a", "", "b"]),
            ("[[a]]", ["a"]),
            ("]a[", ["a"]),
            ("[]", [""]),
            ("", [""]),
            ("[ a b , c ]", ["a b", "c"]),
        ],
    )
    def test_parse(self, token, expected):
        assert StringArray.from_string(token).value() == expected

    def test_accessor_returns_a_copy(self):
        wrapper = StringArray.from_string("a,b")
        items = wrapper.value()
        items.append("c")
        assert wrapper.value() == ["a", "b"]


class TestUnmarshalJson:
    def test_bytes_fragment(self):
        wrapper = StringDuration()
        wrapper.unmarshal_json(b'"5m30s"')
        assert wrapper.value() == timedelta(minutes=5, seconds=30)

    def test_str_fragment(self):
        wrapper = StringArray()
        wrapper.unmarshal_json(json.dumps('["a", "b"]'))
        assert wrapper.value() == ["a", "b"]

    def test_json_number_is_not_a_string(self):
        wrapper = StringInt()
        with pytest.raises(ParseError, match="expected a string"):
            wrapper.unmarshal_json(b"42")

    def test_malformed_json(self):
        wrapper = StringBool()
        with pytest.raises(ParseError, match="malformed JSON") as exc_info:
            wrapper.unmarshal_json(b'"true')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert wrapper.value() is False


class TestValueSemantics:
    def test_equal_when_values_equal(self):
        assert StringInt(5) == StringInt.from_string("5")
        assert StringInt(5) != StringInt(6)

    def test_different_wrappers_are_not_equal(self):
        assert StringBinaryByteSize(1024.0) != StringDecimalSize(1024.0)

    def test_repr(self):
        assert repr(StringInt(5)) == "StringInt(5)"
        assert repr(StringArray(["a"])) == "StringArray(['a'])"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(StringInt(5))


class TestStringArrayWhitespace:
    def test_unit_separators_are_kept(self):
        unit_separator = chr(0x1F)
        token = "a" + unit_separator + ",b"
        assert StringArray.from_string(token).value() == ["a" + unit_separator, "b"]

    def test_unicode_spaces_are_trimmed(self):
        space = chr(0x3000) + chr(0xA0) + chr(0x2009)
        assert StringArray.from_string("[" + space + "a" + space + ", b]").value() == ["a", "b"]


def test_array_constructor_copies_input():
    items = ["a", "b"]
    wrapper = StringArray(items)
    items.append("c")
    assert wrapper.value() == ["a", "b"]
