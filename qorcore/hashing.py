"""Fast non-cryptographic hashers: Fx and FNV-1a in 32 and 64 bit."""

from __future__ import annotations

import struct

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFF_FFFF
_U64 = 0xFFFF_FFFF_FFFF_FFFF

FNV64_OFFSET = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
FNV32_OFFSET = 0x811C9DC5
FNV32_PRIME = 0x01000193

# Marker byte written after string contents, so that ("ab", "c") and
# ("a", "bc") hash differently.
_STR_TERMINATOR = 0xFF


def _checked(value: int, mask: int) -> int:
    if not 0 <= value <= mask:
        raise ValueError(f"value {value} does not fit in {mask.bit_length()} bits")
    return value


def _le_bytes(value: int, mask: int) -> bytes:
    return _checked(value, mask).to_bytes(mask.bit_length() // 8, "little")


def _fnv(state: int, data: bytes, prime: int, mask: int) -> int:
    for byte in bytes(data):
        state = ((state ^ byte) * prime) & mask
    return state


class FxHasher:
    """The Fx hash (64 bit word size): rotate, xor, multiply."""

    PRIME = 0x517CC1B727220A95
    DEFAULT = 0

    def __init__(self) -> None:
        self._hash = self.DEFAULT

    def _add(self, word: int) -> None:
        h = self._hash
        rotated = ((h << 5) | (h >> 59)) & _U64
        self._hash = ((rotated ^ word) * self.PRIME) & _U64

    def write(self, data: bytes) -> None:
        data = bytes(data)
        whole = len(data) // 8 * 8
        for (word,) in struct.iter_unpack("<Q", data[:whole]):
            self._add(word)
        rest = data[whole:]
        if len(rest) >= 4:
            self._add(int.from_bytes(rest[:4], "little"))
            rest = rest[4:]
        if len(rest) >= 2:
            self._add(int.from_bytes(rest[:2], "little"))
            rest = rest[2:]
        if rest:
            self._add(rest[0])

    def write_u8(self, value: int) -> None:
        self._add(_checked(value, _U8))

    def write_u16(self, value: int) -> None:
        self._add(_checked(value, _U16))

    def write_u32(self, value: int) -> None:
        self._add(_checked(value, _U32))

    def write_u64(self, value: int) -> None:
        self._add(_checked(value, _U64))

    def write_usize(self, value: int) -> None:
        self._add(_checked(value, _U64))

    def write_str(self, text: str) -> None:
        """Hash a string the way string keys are hashed: bytes then a marker."""
        self.write(text.encode("utf-8"))
        self._add(_STR_TERMINATOR)

    def finish(self) -> int:
        return self._hash


class Fnv1a64Hasher:
    """FNV-1a with a 64 bit state, suited to short strings."""

    DEFAULT = FNV64_OFFSET
    PRIME = FNV64_PRIME

    def __init__(self) -> None:
        self._hash = self.DEFAULT

    def write(self, data: bytes) -> None:
        self._hash = _fnv(self._hash, data, self.PRIME, _U64)

    def write_u8(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U8), self.PRIME, _U64)

    def write_u16(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U16), self.PRIME, _U64)

    def write_u32(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U32), self.PRIME, _U64)

    def write_u64(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U64), self.PRIME, _U64)

    def write_usize(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U64), self.PRIME, _U64)

    def write_str(self, text: str) -> None:
        """Hash a string the way string keys are hashed: bytes then a marker."""
        data = text.encode("utf-8") + bytes((_STR_TERMINATOR,))
        self._hash = _fnv(self._hash, data, self.PRIME, _U64)

    def finish(self) -> int:
        return self._hash


class Fnv1a32Hasher:
    """FNV-1a with a 32 bit state, suited to short strings."""

    DEFAULT = FNV32_OFFSET
    PRIME = FNV32_PRIME

    def __init__(self) -> None:
        self._hash = self.DEFAULT

    def write(self, data: bytes) -> None:
        self._hash = _fnv(self._hash, data, self.PRIME, _U32)

    def write_u8(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U8), self.PRIME, _U32)

    def write_u16(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U16), self.PRIME, _U32)

    def write_u32(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U32), self.PRIME, _U32)

    def write_u64(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U64), self.PRIME, _U32)

    def write_usize(self, value: int) -> None:
        self._hash = _fnv(self._hash, _le_bytes(value, _U64), self.PRIME, _U32)

    def write_str(self, text: str) -> None:
        """Hash a string the way string keys are hashed: bytes then a marker."""
        data = text.encode("utf-8") + bytes((_STR_TERMINATOR,))
        self._hash = _fnv(self._hash, data, self.PRIME, _U32)

    def finish(self) -> int:
        return self._hash


class Fnv1a64ConstHasher:
    """Immutable FNV-1a 64 bit hash value that can be extended by new bytes."""

    __slots__ = ("_hash",)

    def __init__(self, seed: int = FNV64_OFFSET) -> None:
        self._hash = _checked(seed, _U64)

    @classmethod
    def from_bytes(cls, data: bytes) -> Fnv1a64ConstHasher:
        return cls().extended(data)

    @classmethod
    def from_str(cls, text: str) -> Fnv1a64ConstHasher:
        return cls().extended(text.encode("utf-8"))

    def extended(self, data: bytes) -> Fnv1a64ConstHasher:
        """Return a new hasher with ``data`` appended to this hash."""
        return Fnv1a64ConstHasher(_fnv(self._hash, data, FNV64_PRIME, _U64))

    def finish(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fnv1a64ConstHasher):
            return NotImplemented
        return self._hash == other._hash

    def __hash__(self) -> int:
        return hash(self._hash)

    def __repr__(self) -> str:
        return f"Fnv1a64ConstHasher(0x{self._hash:016x})"