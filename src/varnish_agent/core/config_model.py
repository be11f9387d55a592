"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass, fields

# Names used by older callers that addressed settings in camelCase
_KEY_ALIASES = {
    "serviceTag": "service_tag",
}


@dataclass(frozen=True)
class BasicAuth:
    account: str
    password: str | None = None

    @classmethod
    def parse(cls, value: str) -> BasicAuth | None:
        """Parse an ``account[:password]`` string; empty means no auth."""
        if not value:
            return None
        account, sep, password = value.partition(":")
        return cls(account=account, password=password if sep else None)

    def validate(self, account: str, password: str) -> bool:
        if account != self.account:
            return False
        if self.password is not None and password != self.password:
            return False
        return True


@dataclass(frozen=True)
class AppConfig:
    consul: str
    service_tag: str
    auth: BasicAuth | None = None
    debug: bool = False

    def get(self, key_path: str):
        """Look up a dotted key path, e.g. ``"consul"`` or ``"auth.account"``.

        Returns None when any segment is missing.
        """
        if not key_path:
            return None
        value = self
        for segment in key_path.split("."):
            name = _KEY_ALIASES.get(segment, segment)
            if value is None or name not in _field_names(value):
                return None
            value = getattr(value, name)
        return value


def _field_names(obj) -> set[str]:
    try:
        return {f.name for f in fields(obj)}
    except TypeError:
        return set()
