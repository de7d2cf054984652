import pytest

from qorcore.component import COMPONENT_INVALID_STATE, Component, State
from qorcore.config import Config
from qorcore.errors import QorError


class Worker(Component):
    def __init__(self, name):
        self._name = name
        self._state = State.CREATED
        self.workers = 0

    def _expect(self, *allowed):
        if self._state not in allowed:
            raise QorError(COMPONENT_INVALID_STATE, f"invalid state {self._state}")

    def init(self):
        self._expect(State.CREATED)
        self._state = State.INITIALIZED
        return self._state

    def setup(self, config):
        self._expect(State.INITIALIZED)
        self.workers = config["workers"]
        self._state = State.READY
        return self._state

    def start_up(self):
        self._expect(State.READY)
        self._state = State.STARTING
        return self._state

    def run(self):
        self._expect(State.STARTING)
        self._state = State.RUNNING
        return self._state

    def shut_down(self):
        self._expect(State.RUNNING)
        self._state = State.TERMINATED
        return self._state

    @classmethod
    def class_name(cls):
        return "Worker"

    def instance_name(self):
        return self._name

    def state(self):
        return self._state


def test_state_display():
    worker = Worker("w0")
    states = [
        worker.init(),
        worker.setup(Config({"workers": 1})),
        worker.start_up(),
        worker.run(),
        worker.shut_down(),
    ]
    assert [str(s) for s in states] == [
        "Initialized",
        "Ready",
        "Starting",
        "Running",
        "Terminated",
    ]
    assert [str(s) for s in State] == [
        "Created",
        "Initialized",
        "Ready",
        "Starting",
        "Running",
        "Terminating",
        "Terminated",
    ]


def test_abstract_component_cannot_be_created():
    with pytest.raises(TypeError):
        Component()


def test_life_cycle():
    worker = Worker("w1")
    assert worker.state() is State.CREATED
    assert worker.init() is State.INITIALIZED
    assert worker.setup(Config({"workers": 4})) is State.READY
    assert worker.workers == 4
    assert worker.start_up() is State.STARTING
    assert worker.run() is State.RUNNING
    assert worker.shut_down() is State.TERMINATED
    assert worker.instance_name() == "w1"
    assert Worker.class_name() == "Worker"


def test_invalid_transition_reports_error():
    worker = Worker("w2")
    with pytest.raises(QorError) as info:
        worker.setup(Config({"workers": 2}))
    assert info.value.code == COMPONENT_INVALID_STATE
    assert worker.workers == 0
    assert str(worker.state()) == "Created"