"""In-memory director set.

A director is a named group of backends that Varnish balances requests
across. The agent keeps the current set here and renders it into VCL.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


class DirectorError(Exception):
    """Base error for director operations."""


class DirectorExistsError(DirectorError):
    def __init__(self, name: str):
        super().__init__(f"The director {name!r} already exists")
        self.name = name


class DirectorNotFoundError(DirectorError):
    def __init__(self, name: str):
        super().__init__(f"The director {name!r} is not found")
        self.name = name


@dataclass(frozen=True)
class Director:
    """A named backend group.

    Attributes:
        name: Unique director name
        prefix: URL path prefix routed to this director
        host: Host header routed to this director
        type: Balancing strategy (e.g. "round_robin", "random", "hash")
        backends: Backend addresses as "host:port", stored as a tuple
    """

    name: str
    prefix: str = ""
    host: str = ""
    type: str = "round_robin"
    backends: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "backends", tuple(self.backends))


class DirectorSet:
    def __init__(self, directors: list[Director] | None = None):
        self._directors: dict[str, Director] = {}
        self._lock = threading.Lock()
        for director in directors or []:
            self.add(director)

    def _index(self, name: str) -> Director:
        director = self._directors.get(name)
        if director is None:
            raise DirectorNotFoundError(name)
        return director

    def add(self, director: Director) -> None:
        if not director.name:
            raise DirectorError("The director's name can't be empty")
        with self._lock:
            if director.name in self._directors:
                raise DirectorExistsError(director.name)
            self._directors[director.name] = director
        logger.debug("Added director %s", director.name)

    def get(self, name: str) -> Director:
        with self._lock:
            return self._index(name)

    def update(self, name: str, director: Director) -> None:
        """Replace the named director; the stored copy keeps ``name``."""
        with self._lock:
            self._index(name)
            self._directors[name] = replace(director, name=name)
        logger.debug("Updated director %s", name)

    def remove(self, name: str) -> None:
        with self._lock:
            removed = self._directors.pop(name, None)
        if removed is not None:
            logger.debug("Removed director %s", name)

    def list(self) -> list[Director]:
        with self._lock:
            return sorted(self._directors.values(), key=lambda d: d.name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._directors)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._directors
