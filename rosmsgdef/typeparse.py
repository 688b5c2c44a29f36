"""Parsers for member and constant type expressions.

Each parser takes the input text and returns ``(rest, type)`` where
``rest`` is the unconsumed part, or raises :class:`ParseError`.
"""

from __future__ import annotations

from typing import Callable, Optional

from .errors import ParseError
from .ident import message_name, package_name
from .idltypes import (
    Array,
    BasicType,
    BoundedSequence,
    ConstantType,
    GenericString,
    GenericUnboundedString,
    MemberType,
    NamedType,
    NamespacedType,
    NestableType,
    PrimitiveArray,
    PrimitiveType,
    Sequence,
)
from .literal import usize_literal

_BASIC_TAGS = (
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "int8",
    "int16",
    "int32",
    "int64",
    "float32",
    "float64",
    "bool",
    "char",
    "byte",
)


def _basic_type(s: str) -> tuple[str, BasicType]:
    for tag in _BASIC_TAGS:
        if s.startswith(tag):
            return s[len(tag):], BasicType(tag)
    raise ParseError(s, "expected a basic type")


def _string_tag(s: str) -> tuple[str, bool]:
    for tag, wide in (("string", False), ("wstring", True)):
        if s.startswith(tag):
            return s[len(tag):], wide
    raise ParseError(s, "expected a string type")


def _generic_string(s: str) -> tuple[str, GenericString]:
    rest, wide = _string_tag(s)
    max_size = None
    if rest.startswith("<="):
        try:
            rest, max_size = usize_literal(rest[2:])
        except ParseError:
            max_size = None
    return rest, GenericString(wide=wide, max_size=max_size)


def _generic_unbounded_string(s: str) -> tuple[str, GenericUnboundedString]:
    rest, wide = _string_tag(s)
    kind = GenericUnboundedString.WSTRING if wide else GenericUnboundedString.STRING
    return rest, kind


def _namespaced_type(s: str) -> tuple[str, NamespacedType]:
    rest, package = package_name(s)
    if not rest.startswith("/"):
        raise ParseError(s, "expected '/'")
    rest, name = message_name(rest[1:])
    return rest, NamespacedType(package=package, namespace="msg", name=name)


def _named_type(s: str) -> tuple[str, NamedType]:
    rest, name = message_name(s)
    return rest, NamedType(name)


def _first_of(parsers: tuple[Callable[[str], tuple], ...], s: str, what: str) -> tuple:
    for parser in parsers:
        try:
            return parser(s)
        except ParseError:
            pass
    raise ParseError(s, f"expected {what}")


def _nestable_type(s: str) -> tuple[str, NestableType]:
    return _first_of(
        (_basic_type, _generic_string, _namespaced_type, _named_type), s, "a type"
    )


def _primitive_type(s: str) -> tuple[str, PrimitiveType]:
    return _first_of((_basic_type, _generic_unbounded_string), s, "a primitive type")


def _expect_space_or_end(rest: str, s: str) -> None:
    if rest and rest[0] not in " \t":
        raise ParseError(s, "expected whitespace or end of input after type")


def _optional_usize(s: str) -> tuple[str, Optional[int]]:
    try:
        return usize_literal(s)
    except ParseError:
        return s, None


def _sequence_suffix(s: str) -> Optional[tuple[str, bool, Optional[int]]]:
    if not s.startswith("["):
        return None
    inner = s[1:]
    bounded = inner.startswith("<=")
    if bounded:
        inner = inner[2:]
    inner, size = _optional_usize(inner)
    if not inner.startswith("]"):
        return None
    return inner[1:], bounded, size


def parse_member_type(s: str) -> tuple[str, MemberType]:
    """Parse the type of a member, including array and sequence suffixes."""
    rest, value_type = _nestable_type(s)
    suffix = _sequence_suffix(rest)
    if suffix is not None:
        rest = suffix[0]
    _expect_space_or_end(rest, s)
    if suffix is None:
        return rest, value_type
    _, bounded, size = suffix
    if bounded:
        if size is None:
            raise ParseError(s, "max_size should be specified")
        return rest, BoundedSequence(value_type=value_type, max_size=size)
    if size is None:
        return rest, Sequence(value_type=value_type)
    return rest, Array(value_type=value_type, size=size)


def parse_constant_type(s: str) -> tuple[str, ConstantType]:
    """Parse the type of a constant: a primitive type or a fixed array of one."""
    rest, value_type = _primitive_type(s)
    size = None
    if rest.startswith("["):
        inner, parsed = _optional_usize(rest[1:])
        if parsed is not None and inner.startswith("]"):
            rest, size = inner[1:], parsed
    _expect_space_or_end(rest, s)
    if size is None:
        return rest, value_type
    return rest, PrimitiveArray(value_type=value_type, size=size)