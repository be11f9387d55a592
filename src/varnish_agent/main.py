#!/usr/bin/env python3
"""Print the effective Varnish agent settings"""

import logging

from .adapters.config_env import create_settings


def describe(settings) -> list[str]:
    """Human-readable lines for the effective settings."""
    auth = settings.get("auth")
    latest = settings.latest_vcl_file()
    return [
        f"Consul: {settings.get('consul')}",
        f"Service tag: {settings.get('serviceTag')}",
        f"Auth: {'enabled for ' + auth.account if auth else 'disabled'}",
        f"Debug: {settings.get('debug')}",
        f"Latest VCL: {latest or '-'}",
    ]


def main():
    settings = create_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.get("debug") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).debug("Settings loaded")

    print("=" * 50)
    print("Varnish agent settings")
    print("=" * 50)
    for line in describe(settings):
        print(line)


if __name__ == "__main__":
    main()
