import pytest

from rosmsgdef.errors import (
    InvalidActionSpecification,
    InvalidDefaultError,
    InvalidServiceSpecification,
    ParseConstantError,
    ParseConstantValueError,
    ParseDefaultValueError,
    ParseError,
    ParseMemberError,
    RclMsgError,
)


def test_parse_member_error_message():
    err = ParseMemberError(input="int32 aaa bbb", reason="bad")
    assert str(err) == "Fail to parse member definition: bad\ninput: int32 aaa bbb"
    assert err.input == "int32 aaa bbb"
    assert err.reason == "bad"


def test_invalid_default_error_message():
    err = InvalidDefaultError("std_msgs/msg/Bool")
    assert str(err) == "std_msgs/msg/Bool can not have default value"


def test_parse_default_value_error_message():
    err = ParseDefaultValueError("256")
    assert str(err) == "Fail to parse default value: 256"
    assert err.value == "256"


def test_parse_constant_error_message():
    err = ParseConstantError(input="int32 a=1", reason="lowercase")
    assert str(err) == "Fail to parse constant definition: lowercase\ninput: int32 a=1"


def test_parse_constant_value_error_message():
    assert str(ParseConstantValueError("x")) == "Fail to parse constant value: x"


def test_specification_messages():
    detail = "Number of '---' separators nonconformant with service definition"
    assert str(InvalidServiceSpecification(detail)) == f"Invalid service specification: {detail}"
    detail = "Number of '---' separators nonconformant with action definition"
    assert str(InvalidActionSpecification(detail)) == f"Invalid action specification: {detail}"


@pytest.mark.parametrize(
    ("err", "fragment"),
    [
        (ParseError("abc"), "abc"),
        (ParseMemberError("a", "b"), "Fail to parse member definition: b"),
        (InvalidDefaultError("T"), "T can not have default value"),
        (ParseDefaultValueError("v"), "Fail to parse default value: v"),
        (ParseConstantError("a", "b"), "Fail to parse constant definition: b"),
        (ParseConstantValueError("v"), "Fail to parse constant value: v"),
        (InvalidServiceSpecification("d"), "Invalid service specification: d"),
        (InvalidActionSpecification("d"), "Invalid action specification: d"),
    ],
)
def test_all_errors_share_base(err, fragment):
    with pytest.raises(RclMsgError) as excinfo:
        raise err
    assert excinfo.value is err
    assert fragment in str(excinfo.value)


def test_parse_error_keeps_input():
    err = ParseError("_bad", "no identifier")
    assert err.input == "_bad"
    assert err.reason == "no identifier"
    assert "_bad" in str(err)