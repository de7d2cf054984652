"""A traced activity of a task chain with init, step and terminate phases."""

from __future__ import annotations

import time

_WORK_ITERATIONS = 1000
_YIELD_EVERY = 100


class Activity:
    """An activity that logs the microseconds elapsed since its last phase."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.last = time.monotonic_ns()

    def _trace(self, phase: str) -> None:
        now = time.monotonic_ns()
        elapsed_us = (now - self.last) // 1000
        print(f"{elapsed_us:09}: {self.name}: {phase}")
        self.last = now

    def init(self) -> None:
        """Initialize the activity."""
        self._trace("init")

    def step(self) -> None:
        """Run one step, doing a short piece of busy work."""
        self._trace("step")
        for i in range(_WORK_ITERATIONS):
            if i % _YIELD_EVERY == 0:
                time.sleep(0)

    def terminate(self) -> None:
        """Terminate the activity."""
        self._trace("terminate")

    def __repr__(self) -> str:
        return f"Activity({self.name!r})"