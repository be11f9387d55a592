"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import Config
from ..config import config as default_config
from ..core.config_model import AppConfig, BasicAuth
from ..core.settings import Settings


def load_app_config(source: Config | None = None) -> AppConfig:
    source = source or default_config
    return AppConfig(
        consul=source.CONSUL,
        service_tag=source.SERVICE_TAG,
        auth=BasicAuth.parse(source.AUTH),
        debug=source.DEBUG,
    )


def create_settings(source: Config | None = None) -> Settings:
    """Build the Settings object used for the lifetime of the process."""
    return Settings(load_app_config(source))
