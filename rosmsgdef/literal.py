"""Parsers for literal values used as defaults and constant values.

Each parser takes the input text and returns ``(rest, value)`` where
``rest`` is the unconsumed part, or raises :class:`ParseError`.
"""

from __future__ import annotations

import re
from functools import partial
from typing import Callable

from .errors import ParseError
from .idltypes import BasicType, GenericString

Parser = Callable[[str], tuple]

_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1
_USIZE_MAX = (1 << 64) - 1

_DEC = re.compile(r"[+-]?[0-9]+(?:_[0-9]+)*")
_RADIX_PATTERNS = (
    (re.compile(r"([+-]?)0[bB]([01]*(?:_[01]*)*)"), 2),
    (re.compile(r"([+-]?)0[oO]([0-7]+(?:_[0-7]+)*)"), 8),
    (re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+(?:_[0-9a-fA-F]+)*)"), 16),
)
_FLOAT_MANTISSA = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_EXPONENT_DIGITS = re.compile(r"[+-]?[0-9]+")
_QUOTED_RUNS = {'"': re.compile(r'[^\\"]+'), "'": re.compile(r"[^\\']+")}
_BARE_ITEM = re.compile(r"[^\"',][^,]*")

_INTEGER_RANGES = {
    BasicType.U8: (0, (1 << 8) - 1),
    BasicType.CHAR: (0, (1 << 8) - 1),
    BasicType.BYTE: (0, (1 << 8) - 1),
    BasicType.U16: (0, (1 << 16) - 1),
    BasicType.U32: (0, (1 << 32) - 1),
    BasicType.U64: (0, (1 << 64) - 1),
    BasicType.I8: (-(1 << 7), (1 << 7) - 1),
    BasicType.I16: (-(1 << 15), (1 << 15) - 1),
    BasicType.I32: (-(1 << 31), (1 << 31) - 1),
    BasicType.I64: (-(1 << 63), (1 << 63) - 1),
}


def _space0(s: str) -> str:
    return s.lstrip(" \t")


def dec_literal(s: str) -> tuple[str, int]:
    """Parse a signed decimal integer with optional ``_`` separators."""
    m = _DEC.match(s)
    if m is None:
        raise ParseError(s, "expected a decimal literal")
    value = int(m.group().replace("_", ""))
    if not _I128_MIN <= value <= _I128_MAX:
        raise ParseError(s, "integer literal out of range")
    return s[m.end():], value


def usize_literal(s: str) -> tuple[str, int]:
    """Parse a non-negative decimal integer."""
    rest, value = dec_literal(s)
    if not 0 <= value <= _USIZE_MAX:
        raise ParseError(s, "expected a non-negative integer")
    return rest, value


def integer_literal(s: str) -> tuple[str, int]:
    """Parse a binary, octal, hexadecimal or decimal integer literal."""
    for pattern, radix in _RADIX_PATTERNS:
        m = pattern.match(s)
        if m is None:
            continue
        digits = m.group(2).replace("_", "")
        if not digits:
            continue
        value = int(m.group(1) + digits, radix)
        if _I128_MIN <= value <= _I128_MAX:
            return s[m.end():], value
    return dec_literal(s)


def bool_literal(s: str) -> tuple[str, bool]:
    """Parse ``true``/``1`` or ``false``/``0``."""
    for text, value in (("true", True), ("1", True), ("false", False), ("0", False)):
        if s.startswith(text):
            return s[len(text):], value
    raise ParseError(s, "expected a boolean literal")


def _validate_integer(low: int, high: int, s: str) -> tuple[str, str]:
    rest, value = integer_literal(s)
    if not low <= value <= high:
        raise ParseError(s, f"integer {value} out of range")
    return rest, str(value)


def _validate_float(s: str) -> tuple[str, str]:
    m = _FLOAT_MANTISSA.match(s)
    if m is None:
        raise ParseError(s, "expected a floating point literal")
    end = m.end()
    if s[end:end + 1] in ("e", "E") and end < len(s):
        exponent = _EXPONENT_DIGITS.match(s, end + 1)
        if exponent is None:
            raise ParseError(s, "expected exponent digits")
        end = exponent.end()
    return s[end:], s[:end]


def _validate_bool(s: str) -> tuple[str, str]:
    rest, value = bool_literal(s)
    return rest, "true" if value else "false"


def get_basic_type_literal_parser(basic_type: BasicType) -> Parser:
    """Return a parser that checks a literal against ``basic_type``.

    The parser yields the literal normalised to a string.
    """
    if basic_type in (BasicType.F32, BasicType.F64):
        return _validate_float
    if basic_type is BasicType.BOOL:
        return _validate_bool
    low, high = _INTEGER_RANGES[basic_type]
    return partial(_validate_integer, low, high)


def basic_type_sequence(basic_type: BasicType, s: str) -> tuple[str, list[str]]:
    """Parse a bracketed, comma separated list of basic literals."""
    parser = get_basic_type_literal_parser(basic_type)

    def element(t: str) -> tuple[str, str]:
        t, value = parser(_space0(t))
        return _space0(t), value

    if not s.startswith("["):
        raise ParseError(s, "expected '['")
    rest, first = element(_space0(s[1:]))
    values = [first]
    while rest.startswith(","):
        try:
            after, value = element(rest[1:])
        except ParseError:
            break
        values.append(value)
        rest = after
    rest = _space0(rest)
    if not rest.startswith("]"):
        raise ParseError(s, "expected ']'")
    return rest[1:], values


def _quoted(s: str, quote: str) -> tuple[str, str]:
    if not s.startswith(quote):
        raise ParseError(s, f"expected {quote}")
    escape = "\\" + quote
    run = _QUOTED_RUNS[quote]
    parts = []
    pos = 1
    while True:
        if s.startswith(escape, pos):
            parts.append(quote)
            pos += 2
        elif s.startswith("\\", pos):
            parts.append("\\")
            pos += 1
        else:
            m = run.match(s, pos)
            if m is None:
                break
            parts.append(m.group())
            pos = m.end()
    if not s.startswith(quote, pos):
        raise ParseError(s, "unterminated string literal")
    return s[pos + 1:], "".join(parts).strip()


def string_literal(s: str) -> tuple[str, str]:
    """Parse a quoted or bare string literal."""
    for quote in ('"', "'"):
        try:
            return _quoted(s, quote)
        except ParseError:
            pass
    if s[:1] in ('"', "'") and s:
        return s[1:], ""
    value = s.strip()
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        raise ParseError(s, "malformed string literal")
    return "", value


def get_string_literal_parser(string_type: GenericString) -> Parser:
    """Return a string literal parser honouring the bound of ``string_type``."""
    max_size = string_type.max_size
    if max_size is None:
        return string_literal

    def bounded(s: str) -> tuple[str, str]:
        rest, value = string_literal(s)
        if len(value.encode("utf-8")) > max_size:
            raise ParseError(s, f"string longer than {max_size}")
        return rest, value

    return bounded


def _sequence_item(t: str) -> tuple[str, str]:
    t = _space0(t)
    for quote in ('"', "'"):
        try:
            rest, value = _quoted(t, quote)
            return _space0(rest), value
        except ParseError:
            pass
    m = _BARE_ITEM.match(t)
    if m is None:
        raise ParseError(t, "expected a string")
    return _space0(t[m.end():]), m.group().strip()


def string_literal_sequence(s: str) -> tuple[str, list[str]]:
    """Parse a bracketed, comma separated list of string literals."""
    if not (s.startswith("[") and s.endswith("]")):
        raise ParseError(s, "expected a bracketed list")
    inner = s[1:-1]
    rest, first = _sequence_item(_space0(inner))
    values = [first]
    while rest.startswith(","):
        try:
            after, value = _sequence_item(rest[1:])
        except ParseError:
            break
        values.append(value)
        rest = after
    if rest.startswith(","):
        rest = rest[1:]
    if _space0(rest):
        raise ParseError(s, "unexpected trailing input")
    return "", values