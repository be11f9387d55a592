"""Configuration for the Varnish agent"""
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONSUL = "http://localhost:8500"
DEFAULT_SERVICE_TAG = "http-backend"


def _env(name: str, default: str = "") -> str:
    # Empty values fall back to the default, same as an unset variable
    return os.getenv(name) or default


class Config:
    """Environment-backed settings"""

    def __init__(self):
        # Service discovery
        self.CONSUL = _env("CONSUL", DEFAULT_CONSUL)
        self.SERVICE_TAG = _env("SERVICE_TAG", DEFAULT_SERVICE_TAG)

        # Admin credentials: "account" or "account:password"
        self.AUTH = _env("AUTH")

        self.DEBUG = _env("DEBUG", "false").lower() == "true"


config = Config()
