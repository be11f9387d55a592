"""Registry state machine: empty until the first artifact is appended."""

from __future__ import annotations

from enum import Enum, auto


class RegistryState(Enum):
    EMPTY = auto()
    NON_EMPTY = auto()


class RegistryEvent(Enum):
    APPEND = auto()


_TRANSITIONS = {
    RegistryState.EMPTY: {
        RegistryEvent.APPEND: RegistryState.NON_EMPTY,
    },
    RegistryState.NON_EMPTY: {
        RegistryEvent.APPEND: RegistryState.NON_EMPTY,
    },
}


class RegistryStateMachine:
    def __init__(self):
        self.state = RegistryState.EMPTY

    def transition(self, event: RegistryEvent) -> RegistryState:
        self.state = _TRANSITIONS[self.state][event]
        return self.state
