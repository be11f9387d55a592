"""Core ports (interfaces) for the Varnish agent.

Consumers of the settings layer depend on these small protocols rather
than on the concrete Settings or ArtifactRegistry classes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingsReader(Protocol):
    """Read-only settings lookup."""

    def get(self, key_path: str):
        """Return the value at a dotted key path, or None."""


@runtime_checkable
class ArtifactLog(Protocol):
    """Ordered record of generated artifacts."""

    def append(self, identifier: str) -> None:
        """Record a newly generated artifact."""

    def latest(self) -> str | None:
        """Return the most recently recorded artifact, or None."""
