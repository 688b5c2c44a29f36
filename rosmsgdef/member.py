"""Parser for member definition lines such as ``int32[3] values [1, 2, 3]``."""

from __future__ import annotations

from functools import partial
from typing import Optional

from .definitions import Member
from .errors import InvalidDefaultError, ParseDefaultValueError, ParseError, ParseMemberError
from .ident import member_name
from .idltypes import (
    Array,
    BasicType,
    BoundedSequence,
    GenericString,
    MemberType,
    NestableType,
    Sequence,
)
from .literal import (
    Parser,
    basic_type_sequence,
    get_basic_type_literal_parser,
    get_string_literal_parser,
    string_literal_sequence,
)
from .typeparse import parse_member_type

_SPACES = " \t"


def _parse_whole(parser: Parser, text: str):
    try:
        rest, value = parser(text)
    except ParseError as e:
        raise ParseDefaultValueError(text) from e
    if rest:
        raise ParseDefaultValueError(text)
    return value


def _nestable_type_default(nestable_type: NestableType, text: str) -> list[str]:
    if isinstance(nestable_type, BasicType):
        parser = get_basic_type_literal_parser(nestable_type)
    elif isinstance(nestable_type, GenericString):
        parser = get_string_literal_parser(nestable_type)
    else:
        raise InvalidDefaultError(str(nestable_type))
    return [_parse_whole(parser, text)]


def _array_type_default(value_type: NestableType, text: str) -> list[str]:
    if isinstance(value_type, BasicType):
        parser = partial(basic_type_sequence, value_type)
    elif isinstance(value_type, GenericString):
        parser = string_literal_sequence
    else:
        raise InvalidDefaultError(str(value_type))
    return _parse_whole(parser, text)


def _validate_default(member_type: MemberType, text: str) -> list[str]:
    if isinstance(member_type, Array):
        values = _array_type_default(member_type.value_type, text)
        if len(values) != member_type.size:
            raise ParseDefaultValueError(text)
        return values
    if isinstance(member_type, Sequence):
        return _array_type_default(member_type.value_type, text)
    if isinstance(member_type, BoundedSequence):
        values = _array_type_default(member_type.value_type, text)
        if len(values) > member_type.max_size:
            raise ParseDefaultValueError(text)
        return values
    return _nestable_type_default(member_type, text)


def member_def(line: str) -> Member:
    """Parse one member definition line into a :class:`Member`."""
    try:
        rest, member_type = parse_member_type(line)
        if not rest or rest[0] not in _SPACES:
            raise ParseError(rest, "expected whitespace after the type")
        rest, name = member_name(rest.lstrip(_SPACES))
        if rest and rest[0] not in _SPACES:
            raise ParseError(rest, "expected whitespace or end of input after the name")
    except ParseError as e:
        raise ParseMemberError(line, e.reason) from e

    default_text = rest.strip(_SPACES)
    default: Optional[list[str]] = None
    if default_text:
        default = _validate_default(member_type, default_text)
    return Member(name=name, type=member_type, default=default)