"""Types that may appear in message, service and action definitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class BasicType(enum.Enum):
    """A basic type according to the IDL specification."""

    I8 = "int8"
    I16 = "int16"
    I32 = "int32"
    I64 = "int64"
    U8 = "uint8"
    U16 = "uint16"
    U32 = "uint32"
    U64 = "uint64"
    F32 = "float32"
    F64 = "float64"
    BOOL = "bool"
    CHAR = "char"
    BYTE = "byte"

    @classmethod
    def parse(cls, s: str) -> Optional["BasicType"]:
        """Return the basic type named ``s``, or None if there is none."""
        try:
            return cls(s)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NamedType:
    """A type identified by its name inside the current package."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NamespacedType:
    """A type identified by a name in a package and namespace."""

    package: str
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.package}/{self.namespace}/{self.name}"


class GenericUnboundedString(enum.Enum):
    """An unbounded string type, usable for constants."""

    STRING = "string"
    WSTRING = "wstring"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenericString:
    """A narrow or wide string, optionally bounded in length."""

    wide: bool = False
    max_size: Optional[int] = None

    @classmethod
    def from_unbounded(cls, t: GenericUnboundedString) -> "GenericString":
        """Return the unbounded string type matching ``t``."""
        return cls(wide=t is GenericUnboundedString.WSTRING)

    def is_wide(self) -> bool:
        return self.wide

    def __str__(self) -> str:
        base = "wstring" if self.wide else "string"
        return base if self.max_size is None else f"{base}<={self.max_size}"


NestableType = Union[BasicType, NamedType, NamespacedType, GenericString]
PrimitiveType = Union[BasicType, GenericUnboundedString]


@dataclass(frozen=True)
class Array:
    """An array type with a static size."""

    value_type: NestableType
    size: int


@dataclass(frozen=True)
class Sequence:
    """A sequence type with an unlimited number of elements."""

    value_type: NestableType


@dataclass(frozen=True)
class BoundedSequence:
    """A sequence type with a maximum number of elements."""

    value_type: NestableType
    max_size: int


@dataclass(frozen=True)
class PrimitiveArray:
    """An array of a primitive type, usable for constants."""

    value_type: PrimitiveType
    size: int


MemberType = Union[NestableType, Array, Sequence, BoundedSequence]
ConstantType = Union[PrimitiveType, PrimitiveArray]