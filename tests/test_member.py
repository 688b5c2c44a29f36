import pytest

from rosmsgdef.errors import (
    InvalidDefaultError,
    ParseDefaultValueError,
    ParseMemberError,
    RclMsgError,
)
from rosmsgdef.idltypes import Array, BasicType, GenericString, NamedType, Sequence
from rosmsgdef.member import member_def


def test_parse_member_def():
    result = member_def("int32 aaa")
    assert result.name == "aaa"
    assert result.type == BasicType.I32
    assert result.default is None


def test_parse_member_def_with_default():
    result = member_def("int32 aaa 30")
    assert result.name == "aaa"
    assert result.type == BasicType.I32
    assert result.default == ["30"]


@pytest.mark.parametrize("line", ["uint8 aaa -1", "uint8 aaa 256"])
def test_parse_member_def_with_invalid_default(line):
    with pytest.raises(ParseDefaultValueError):
        member_def(line)


def test_trailing_whitespace_is_ignored():
    assert member_def("int32 aaa 30  \t").default == ["30"]


def test_hex_default_is_normalised():
    assert member_def("int32 a 0x10").default == ["16"]


def test_bool_default():
    assert member_def("bool b 1").default == ["true"]


def test_float_default():
    assert member_def("float64 f 1.5").default == ["1.5"]


def test_array_default():
    result = member_def("int32[3] values [1, 2, 3]")
    assert result.type == Array(value_type=BasicType.I32, size=3)
    assert result.default == ["1", "2", "3"]


def test_array_default_with_wrong_size():
    with pytest.raises(ParseDefaultValueError):
        member_def("int32[3] values [1, 2]")


def test_bounded_sequence_default_too_long():
    with pytest.raises(ParseDefaultValueError):
        member_def("int32[<=2] values [1, 2, 3]")


def test_string_sequence_default():
    result = member_def("string[] names [a, 'b']")
    assert result.type == Sequence(value_type=GenericString())
    assert result.default == ["a", "b"]


def test_string_default():
    assert member_def('string s "hello"').default == ["hello"]


def test_bounded_string_default_too_long():
    with pytest.raises(ParseDefaultValueError):
        member_def('string<=3 s "abcd"')


def test_named_type_cannot_have_default():
    with pytest.raises(InvalidDefaultError):
        member_def("Foo bar 1")


def test_named_type_without_default():
    assert member_def("Foo bar").type == NamedType("Foo")


@pytest.mark.parametrize("line", ["int32", "int32 aaa-b", "int32 Aaa", "int32aaa"])
def test_malformed_lines(line):
    with pytest.raises(ParseMemberError):
        member_def(line)


def test_errors_share_base_class():
    with pytest.raises(RclMsgError):
        member_def("int32 _bad")