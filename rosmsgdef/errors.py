"""Exceptions raised while parsing interface definitions."""

from __future__ import annotations


class RclMsgError(Exception):
    """Base class of every error raised by this package."""


class ParseError(RclMsgError):
    """A low-level parser did not match its input."""

    def __init__(self, input: str, reason: str = "no match") -> None:
        self.input = input
        self.reason = reason
        super().__init__(f"Parse error: {reason}\ninput: {input}")


class ParseMemberError(RclMsgError):
    """A member definition line could not be parsed."""

    def __init__(self, input: str, reason: str) -> None:
        self.input = input
        self.reason = reason
        super().__init__(f"Fail to parse member definition: {reason}\ninput: {input}")


class InvalidDefaultError(RclMsgError):
    """A default value was given for a type that cannot have one."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name} can not have default value")


class ParseDefaultValueError(RclMsgError):
    """A default value does not fit its member type."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Fail to parse default value: {value}")


class ParseConstantError(RclMsgError):
    """A constant definition line could not be parsed."""

    def __init__(self, input: str, reason: str) -> None:
        self.input = input
        self.reason = reason
        super().__init__(f"Fail to parse constant definition: {reason}\ninput: {input}")


class ParseConstantValueError(RclMsgError):
    """A constant value does not fit its constant type."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Fail to parse constant value: {value}")


class InvalidServiceSpecification(RclMsgError):
    """A service definition is not made of a request and a response."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid service specification: {detail}")


class InvalidActionSpecification(RclMsgError):
    """An action definition is not made of a goal, a result and a feedback."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid action specification: {detail}")