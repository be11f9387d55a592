"""Process-wide settings owner.

Built once at startup and handed to consumers, instead of module-level
globals for the configuration and the generated VCL file list.
"""

from __future__ import annotations

from .config_model import AppConfig
from .directors import DirectorSet
from .ports import ArtifactLog
from .registry import ArtifactRegistry


class Settings:
    """Owns the configuration, the VCL file registry and the director set."""

    def __init__(
        self,
        config: AppConfig,
        vcl_files: ArtifactLog | None = None,
        directors: DirectorSet | None = None,
    ):
        self.config = config
        self.vcl_files = vcl_files if vcl_files is not None else ArtifactRegistry()
        self.directors = directors if directors is not None else DirectorSet()

    def get(self, key_path: str):
        return self.config.get(key_path)

    def add_vcl_file(self, path: str) -> None:
        self.vcl_files.append(path)

    def latest_vcl_file(self) -> str | None:
        return self.vcl_files.latest()
