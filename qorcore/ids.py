"""Identifiers: index-like ``Id`` values and 64 bit name ``Tag`` values."""

from __future__ import annotations

from qorcore.errors import INVALID_ID, QorError
from qorcore.hashing import FNV64_OFFSET, Fnv1a64ConstHasher

_U64 = 0xFFFF_FFFF_FFFF_FFFF


class Id:
    """An index that also knows an invalid value."""

    INVALID = _U64

    __slots__ = ("_index",)

    def __init__(self, index: int) -> None:
        if not 0 <= index <= _U64:
            raise ValueError(f"id index {index} out of range")
        self._index = index

    @classmethod
    def invalid(cls) -> Id:
        """Create an invalid id."""
        return cls(cls.INVALID)

    def index(self) -> int:
        """The id as an index; raises for an invalid id."""
        if not self.is_valid():
            raise QorError(INVALID_ID, "invalid index")
        return self._index

    def is_valid(self) -> bool:
        return self._index != self.INVALID

    def invalidate(self) -> None:
        self._index = self.INVALID

    def __str__(self) -> str:
        if self.is_valid():
            return f"#{self._index:03}"
        return "#invalid"

    def __repr__(self) -> str:
        if self.is_valid():
            return f"Id({self._index})"
        return "Id.invalid()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Id):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)


def _printable(raw: bytes) -> bool:
    return all(32 <= byte <= 127 for byte in raw)


class Tag:
    """A 64 bit identifier: either eight characters of text or a hash value.

    Text tags have the top bit cleared, hashed tags have it set.
    """

    INVALID = _U64
    HASH_BIT = 1 << 63
    HASH_MASK = HASH_BIT - 1

    __slots__ = ("_tag",)

    def __init__(self, raw: int) -> None:
        if not 0 <= raw <= _U64:
            raise ValueError(f"tag value {raw} does not fit in 64 bits")
        self._tag = raw

    @classmethod
    def from_text(cls, text: bytes | str) -> Tag:
        """Create a tag from exactly eight bytes of text, clearing the hash bit."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        if len(data) != 8:
            raise ValueError(f"tag text must be exactly 8 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little") & cls.HASH_MASK)

    @classmethod
    def from_raw(cls, raw: int) -> Tag:
        """Create a tag from a raw value, unaltered."""
        return cls(raw)

    @classmethod
    def from_const(cls, value: int) -> Tag:
        """Create a tag from a non-text value, setting the hash bit."""
        return cls(value | cls.HASH_BIT)

    @classmethod
    def from_str(cls, text: str) -> Tag:
        """Create a tag by hashing a string."""
        return cls.from_const(Fnv1a64ConstHasher.from_str(text).finish())

    @classmethod
    def invalid(cls) -> Tag:
        return cls(cls.INVALID)

    def with_added_tag(self, tag: Tag) -> Tag:
        """A new hashed tag made by extending this tag with another one."""
        hasher = Fnv1a64ConstHasher(self._tag).extended(
            tag.value().to_bytes(8, "little")
        )
        return Tag.from_const(hasher.finish())

    def with_added_str(self, text: str) -> Tag:
        """A new hashed tag made by extending this tag with a string."""
        hasher = Fnv1a64ConstHasher(self._tag).extended(text.encode("utf-8"))
        return Tag.from_const(hasher.finish())

    def is_valid(self) -> bool:
        return self._tag != self.INVALID

    def value(self) -> int:
        return self._tag

    def invalidate(self) -> None:
        self._tag = self.INVALID

    def __int__(self) -> int:
        return self._tag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self._tag == other._tag

    def __hash__(self) -> int:
        return hash(self._tag)

    def __repr__(self) -> str:
        if not self.is_valid():
            return "#invalid"
        raw = self._tag.to_bytes(8, "little")
        if _printable(raw):
            return f"#{raw.decode('ascii')} {self._tag:016x}"
        return f"#{self._tag:016x}"

    def __str__(self) -> str:
        if not self.is_valid():
            return "#invalid"
        raw = self._tag.to_bytes(8, "little")
        if _printable(raw):
            return f"#{raw.decode('ascii')}"
        return f"#{self._tag:016x}"


# Seed of every string hash; a tag with this raw value extends like a fresh hash.
FNV_SEED_TAG_VALUE = FNV64_OFFSET