"""Ordered registry of generated artifacts (VCL file paths)."""

from __future__ import annotations

import logging
import threading
from typing import Iterator

from .state_machine import RegistryEvent, RegistryState, RegistryStateMachine

logger = logging.getLogger(__name__)


class ArtifactRegistry:
    """Append-only list of artifact identifiers.

    Insertion order is kept and duplicates are allowed. ``latest()`` is the
    most recently appended identifier, or None before the first append.
    """

    def __init__(self):
        self._items: list[str] = []
        self._lock = threading.Lock()
        self._state = RegistryStateMachine()

    @property
    def state(self) -> RegistryState:
        return self._state.state

    def append(self, identifier: str) -> None:
        with self._lock:
            self._items.append(identifier)
            self._state.transition(RegistryEvent.APPEND)
            count = len(self._items)
        logger.debug("Registered artifact %s (%d total)", identifier, count)

    def latest(self) -> str | None:
        with self._lock:
            return self._items[-1] if self._items else None

    def history(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.history())
