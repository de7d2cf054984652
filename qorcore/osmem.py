"""Operating system abstraction: process memory with an allocation history."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass

from qorcore.errors import ALLOCATION_FAILURE, QorError


class MemActionKind(enum.Enum):
    ALLOC = "alloc"
    DEALLOC = "dealloc"


@dataclass(frozen=True)
class MemAction:
    """One recorded allocation or deallocation."""

    kind: MemActionKind
    size: int
    align: int
    address: int

    def __str__(self) -> str:
        address = f"0x{self.address:#018x}"
        if self.kind is MemActionKind.ALLOC:
            return f"alloc: 0x{self.size:016x} %0x{self.align:016x} -> {address}"
        return f"dealloc: {address} 0x{self.size:016x} %0x{self.align:016x}"


class ProcessMem:
    """Allocator for process memory that records every action it performs."""

    def __init__(self) -> None:
        self._history: list[MemAction] = []
        self._live: dict[int, bytearray] = {}

    def allocate(self, size: int, align: int) -> bytearray:
        """Allocate a zeroed block of ``size`` bytes.

        Raises ``QorError`` with ``ALLOCATION_FAILURE`` if memory runs out.
        """
        if size < 0:
            raise ValueError(f"negative allocation size {size}")
        if align <= 0 or align & (align - 1):
            raise ValueError(f"alignment {align} is not a power of two")
        try:
            block = bytearray(size)
        except MemoryError:
            block = None
        address = id(block) if block is not None else 0
        self._history.append(MemAction(MemActionKind.ALLOC, size, align, address))
        if block is None:
            raise QorError(ALLOCATION_FAILURE, "OS memory allocation fault")
        self._live[address] = block
        return block

    def deallocate(self, block: bytearray | None, size: int, align: int) -> None:
        """Release a block previously returned by ``allocate``."""
        address = id(block) if block is not None else 0
        if not any(
            action.kind is MemActionKind.ALLOC and action.address == address
            for action in self._history
        ):
            raise ValueError("block was not allocated by this process memory")
        self._history.append(MemAction(MemActionKind.DEALLOC, size, align, address))
        self._live.pop(address, None)

    def history(self) -> tuple[MemAction, ...]:
        """All recorded actions, oldest first."""
        return tuple(self._history)

    def dump(self) -> None:
        """Print the history, one action per line, after an empty line."""
        print()
        for action in self._history:
            print(action)


class Os:
    """Static access to operating system services."""

    _memory: ProcessMem | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        raise TypeError("Os cannot be instantiated")

    @staticmethod
    def name() -> str:
        return "unknown"

    @staticmethod
    def memory() -> ProcessMem:
        """The process-wide memory allocator, created on first use."""
        with Os._lock:
            if Os._memory is None:
                Os._memory = ProcessMem()
            return Os._memory