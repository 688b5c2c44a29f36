"""Parsers for identifiers: package, member, message and constant names.

Each parser takes the input text and returns ``(rest, name)`` where
``rest`` is the unconsumed part, or raises :class:`ParseError`.
"""

from __future__ import annotations

import re

from .errors import ParseError

_PACKAGE_NAME = re.compile(r"[a-z]_?[a-z0-9]+(?:_[a-z0-9]+)*")
_MEMBER_NAME = re.compile(r"[a-z]_?(?:[a-z0-9]+(?:_[a-z0-9]+)*)?")
_MESSAGE_NAME = re.compile(r"[A-Z][A-Za-z0-9]*")
_CONSTANT_NAME = re.compile(r"[A-Z0-9]+(?:_[A-Z0-9]+)*")


def _match(pattern: re.Pattern, s: str, what: str) -> tuple[str, str]:
    m = pattern.match(s)
    if m is None:
        raise ParseError(s, f"expected {what}")
    return s[m.end():], m.group()


def package_name(s: str) -> tuple[str, str]:
    """Parse a package name such as ``std_msgs``."""
    return _match(_PACKAGE_NAME, s, "a package name")


def member_name(s: str) -> tuple[str, str]:
    """Parse a member name such as ``bool_value``."""
    return _match(_MEMBER_NAME, s, "a member name")


def message_name(s: str) -> tuple[str, str]:
    """Parse a message name such as ``Bool``."""
    return _match(_MESSAGE_NAME, s, "a message name")


def constant_name(s: str) -> tuple[str, str]:
    """Parse a constant name such as ``MAX_SIZE``."""
    return _match(_CONSTANT_NAME, s, "a constant name")