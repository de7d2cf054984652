"""Components: elements with a simple life cycle."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from qorcore.config import Config
from qorcore.errors import CORE

COMPONENT_INVALID_STATE = CORE + 100


class State(enum.Enum):
    """Life-cycle state of a component."""

    CREATED = "Created"
    INITIALIZED = "Initialized"
    READY = "Ready"
    STARTING = "Starting"
    RUNNING = "Running"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"

    def __str__(self) -> str:
        return self.value


class Component(ABC):
    """An element with a life cycle: init, setup, start up, run, shut down.

    Each step returns the state reached and raises ``QorError`` on failure.
    """

    @abstractmethod
    def init(self) -> State:
        """Initialize; afterwards the component is ready for setup."""

    @abstractmethod
    def setup(self, config: Config) -> State:
        """Continue initialization from a configuration."""

    @abstractmethod
    def start_up(self) -> State:
        """Begin starting the component."""

    @abstractmethod
    def run(self) -> State:
        """Run the component."""

    @abstractmethod
    def shut_down(self) -> State:
        """Shut the component down."""

    @classmethod
    @abstractmethod
    def class_name(cls) -> str:
        """Name of the component class."""

    @abstractmethod
    def instance_name(self) -> str:
        """Name of this component instance."""

    @abstractmethod
    def state(self) -> State:
        """Current life-cycle state."""