"""Type tags, type ids and small float formats (f16, bf16)."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from qorcore.ids import Tag

_INTEGRAL_NAMES = (
    "u8", "i8", "u16", "i16", "u32", "i32", "u64", "i64", "u128", "i128",
)
_FLOATING_NAMES = ("f16", "bf16", "f32", "f64")

_TYPE_TAGS: dict[str, Tag] = {
    "bool": Tag.from_text(b"@bool___"),
    "u8": Tag.from_text(b"@u8_____"),
    "i8": Tag.from_text(b"@i8_____"),
    "u16": Tag.from_text(b"@u16____"),
    "i16": Tag.from_text(b"@i16____"),
    "u32": Tag.from_text(b"@u32____"),
    "i32": Tag.from_text(b"@i32____"),
    "u64": Tag.from_text(b"@u64____"),
    "i64": Tag.from_text(b"@i64____"),
    "u128": Tag.from_text(b"@u128___"),
    "i128": Tag.from_text(b"@i128___"),
    "usize": Tag.from_text(b"@usize__"),
    "isize": Tag.from_text(b"@isize__"),
    "f16": Tag.from_text(b"@f16____"),
    "bf16": Tag.from_text(b"@bf16___"),
    "f32": Tag.from_text(b"@f32____"),
    "f64": Tag.from_text(b"@f64____"),
    "char": Tag.from_text(b"@char___"),
    "str": Tag.from_text(b"@str____"),
    "String": Tag.from_str("std::string::String"),
    "StrConst": Tag.from_text(b"@Str____"),
    "Id": Tag.from_text(b"@Id_____"),
    "Tag": Tag.from_text(b"@Tag____"),
    "TypeId": Tag.from_text(b"@TypeId_"),
}

_ARRAY_TAG = Tag.from_text(b"@[]_____")


def type_tag(type_name: str) -> Tag:
    """The type tag of a built-in type, given by name."""
    try:
        return _TYPE_TAGS[type_name]
    except KeyError:
        raise ValueError(f"unknown type {type_name!r}") from None


def array_type_tag(element: str | Tag, length: int) -> Tag:
    """The type tag of a fixed-length array of ``element``."""
    element_tag = element if isinstance(element, Tag) else type_tag(element)
    return _ARRAY_TAG.with_added_tag(element_tag).with_added_tag(Tag.from_raw(length))


class TypeId:
    """A compiler-independent type id wrapping a type tag."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @classmethod
    def of(cls, type_name: str) -> TypeId:
        return cls(type_tag(type_name))

    @classmethod
    def invalid(cls) -> TypeId:
        return cls(Tag.invalid())

    def is_valid(self) -> bool:
        return self.tag.is_valid()

    def __str__(self) -> str:
        return f"${self.tag}"

    def __repr__(self) -> str:
        return f"TypeId({self.tag!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeId):
            return NotImplemented
        return self.tag.value() == other.tag.value()

    def __hash__(self) -> int:
        return hash(self.tag)


def is_equal(left: str, right: str) -> bool:
    """Whether two type names denote the same type tag."""
    return type_tag(left).value() == type_tag(right).value()


def is_integral(type_name: str) -> bool:
    return any(is_equal(type_name, name) for name in _INTEGRAL_NAMES)


def is_floating(type_name: str) -> bool:
    return any(is_equal(type_name, name) for name in _FLOATING_NAMES)


def _f32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _f32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _format_f32(value: float) -> str:
    """Shortest decimal text that reads back to the same f32, without exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    bits = _f32_bits(value)
    for digits in range(1, 10):
        text = f"{value:.{digits}g}"
        if _f32_bits(float(text)) == bits:
            return format(Decimal(text), "f")
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class F16:
    """IEEE 754 half-precision float, stored as its 16 raw bits."""

    raw: int

    INFINITY: ClassVar[F16]
    NAN: ClassVar[F16]

    def __post_init__(self) -> None:
        if not 0 <= self.raw <= 0xFFFF:
            raise ValueError(f"f16 raw value {self.raw} does not fit in 16 bits")

    @classmethod
    def from_f32(cls, value: float) -> F16:
        """Convert by truncating the fraction.

        Zero, infinities and NaN are kept; finite values outside the normal
        f16 range raise ``OverflowError``.
        """
        bits = _f32_bits(value)
        sign = (bits >> 31) & 0x1
        exponent = (bits >> 23) & 0xFF
        fraction = bits & 0x7FFFFF
        if exponent == 0 and fraction == 0:
            return cls(sign << 15)
        if exponent == 0xFF:
            if fraction == 0:
                return cls(sign << 15 | 0x7C00)
            return cls(sign << 15 | 0x7C00 | max(fraction >> 13, 0x200))
        half_exponent = exponent - 112
        if not 0 < half_exponent < 31:
            raise OverflowError(f"{value} is outside the normal f16 range")
        return cls(sign << 15 | half_exponent << 10 | fraction >> 13)

    def to_f32(self) -> float:
        sign = (self.raw >> 15) & 0x1
        exponent = (self.raw >> 10) & 0x1F
        fraction = self.raw & 0x3FF
        if exponent == 0:
            magnitude = math.ldexp(fraction, -24)
            return -magnitude if sign else magnitude
        if exponent == 0x1F:
            return _f32_from_bits(sign << 31 | 0xFF << 23 | fraction << 13)
        return _f32_from_bits(sign << 31 | (exponent + 112) << 23 | fraction << 13)

    def __str__(self) -> str:
        return _format_f32(self.to_f32())


F16.INFINITY = F16(0x7C00)
F16.NAN = F16(0x7E00)


@dataclass(frozen=True)
class BF16:
    """Brain float 16: the upper 16 bits of an IEEE 754 single."""

    raw: int

    INFINITY: ClassVar[BF16]
    NAN: ClassVar[BF16]

    def __post_init__(self) -> None:
        if not 0 <= self.raw <= 0xFFFF:
            raise ValueError(f"bf16 raw value {self.raw} does not fit in 16 bits")

    @classmethod
    def from_f32(cls, value: float) -> BF16:
        """Convert by truncating the fraction; NaN stays NaN."""
        bits = _f32_bits(value)
        raw = bits >> 16
        if math.isnan(value) and raw & 0x7F == 0:
            raw |= 0x40
        return cls(raw)

    def to_f32(self) -> float:
        return _f32_from_bits(self.raw << 16)

    def __str__(self) -> str:
        return _format_f32(self.to_f32())


BF16.INFINITY = BF16(0x7F80)
BF16.NAN = BF16(0x7FC0)


_ZERO_INTEGRALS = _INTEGRAL_NAMES + ("usize", "isize")


def zero(type_name: str) -> int | float | F16 | BF16:
    """The neutral element of addition for a numeric type."""
    type_tag(type_name)
    if type_name in _ZERO_INTEGRALS:
        return 0
    if type_name in ("f32", "f64"):
        return 0.0
    if type_name == "f16":
        return F16.from_f32(0.0)
    if type_name == "bf16":
        return BF16.from_f32(0.0)
    raise TypeError(f"type {type_name!r} has no zero")


def one(type_name: str) -> int | float:
    """The neutral element of multiplication for a numeric type."""
    type_tag(type_name)
    if type_name in _ZERO_INTEGRALS:
        return 1
    if type_name in ("f32", "f64"):
        return 1.0
    raise TypeError(f"type {type_name!r} has no one")


def inf(type_name: str) -> float | F16 | BF16:
    """The infinity element of a floating type."""
    type_tag(type_name)
    if type_name in ("f32", "f64"):
        return math.inf
    if type_name == "f16":
        return F16.INFINITY
    if type_name == "bf16":
        return BF16.INFINITY
    raise TypeError(f"type {type_name!r} has no infinity")