"""Packed semantic version number."""

from __future__ import annotations

import functools


@functools.total_ordering
class Version:
    """A semantic version packed into 64 bits: major, minor, patch and build."""

    MAJOR_MAX = 1023
    MINOR_MAX = 1023
    PATCH_MAX = 1023
    BUILD_MAX = 0xFFFF_FFFF

    _INVALID = 0xFFFF_FFFF_FFFF_FFFF

    __slots__ = ("_value",)

    def __init__(self, major: int, minor: int, patch: int, build: int) -> None:
        for name, part, limit in (
            ("major", major, self.MAJOR_MAX),
            ("minor", minor, self.MINOR_MAX),
            ("patch", patch, self.PATCH_MAX),
            ("build", build, self.BUILD_MAX),
        ):
            if not 0 <= part <= limit:
                raise ValueError(f"{name} {part} out of range 0..={limit}")
        self._value = major << 54 | minor << 44 | patch << 34 | build

    @classmethod
    def invalid(cls) -> Version:
        version = cls.__new__(cls)
        version._value = cls._INVALID
        return version

    def is_valid(self) -> bool:
        return self._value != self._INVALID

    def major(self) -> int:
        return (self._value >> 54) & self.MAJOR_MAX

    def minor(self) -> int:
        return (self._value >> 44) & self.MINOR_MAX

    def patch(self) -> int:
        return (self._value >> 34) & self.PATCH_MAX

    def build(self) -> int:
        return self._value & self.BUILD_MAX

    def __str__(self) -> str:
        return f"{self.major()}.{self.minor()}.{self.patch()} {self.build()}"

    def __repr__(self) -> str:
        if not self.is_valid():
            return "Version.invalid()"
        return (
            f"Version({self.major()}, {self.minor()}, {self.patch()}, {self.build()})"
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._value < other._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)