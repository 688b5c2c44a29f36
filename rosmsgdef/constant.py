"""Parser for constant definition lines such as ``int32 MAX=10``."""

from __future__ import annotations

from .definitions import Constant
from .errors import ParseConstantError, ParseConstantValueError, ParseDefaultValueError, ParseError
from .ident import constant_name
from .idltypes import BasicType, ConstantType, GenericString, PrimitiveArray
from .literal import (
    basic_type_sequence,
    get_basic_type_literal_parser,
    get_string_literal_parser,
    string_literal_sequence,
)
from .typeparse import parse_constant_type

_SPACES = " \t"


def _validate_value(constant_type: ConstantType, value: str) -> list[str]:
    if isinstance(constant_type, BasicType):
        try:
            rest, parsed = get_basic_type_literal_parser(constant_type)(value)
        except ParseError as e:
            raise ParseConstantValueError(value) from e
        if rest:
            raise ParseConstantValueError(value)
        return [parsed]
    if isinstance(constant_type, PrimitiveArray):
        element = constant_type.value_type
        if isinstance(element, BasicType):
            try:
                rest, values = basic_type_sequence(element, value)
            except ParseError as e:
                raise ParseDefaultValueError(value) from e
            if rest or len(values) != constant_type.size:
                raise ParseConstantValueError(value)
            return values
        try:
            rest, values = string_literal_sequence(value)
        except ParseError as e:
            raise ParseDefaultValueError(value) from e
        if rest:
            raise ParseConstantValueError(value)
        return values
    parser = get_string_literal_parser(GenericString.from_unbounded(constant_type))
    try:
        rest, parsed = parser(value)
    except ParseError as e:
        raise ParseDefaultValueError(value) from e
    if rest:
        raise ParseConstantValueError(value)
    return [parsed]


def constant_def(line: str) -> Constant:
    """Parse one constant definition line into a :class:`Constant`."""
    try:
        rest, constant_type = parse_constant_type(line)
        if not rest or rest[0] not in _SPACES:
            raise ParseError(rest, "expected whitespace after the type")
        rest, name = constant_name(rest.lstrip(_SPACES))
        rest = rest.lstrip(_SPACES)
        if not rest.startswith("="):
            raise ParseError(rest, "expected '='")
        value = rest[1:].strip(_SPACES)
        if not value:
            raise ParseError(rest, "expected a constant value")
    except ParseError as e:
        raise ParseConstantError(line, e.reason) from e

    return Constant(name=name, type=constant_type, value=_validate_value(constant_type, value))