"""varnish-agent - settings, generated VCL registry and directors for a Varnish agent"""

__version__ = "1.0.0"
__description__ = "Settings, generated VCL registry and directors for a Varnish agent"

__all__ = ["ArtifactRegistry", "Settings", "create_settings", "__version__"]


def __getattr__(name: str):
    """Lazy import so that ``varnish_agent.core`` can be used without loading
    the environment-backed config module (and its .env file)."""
    if name == "create_settings":
        from .adapters.config_env import create_settings

        return create_settings
    if name == "Settings":
        from .core.settings import Settings

        return Settings
    if name == "ArtifactRegistry":
        from .core.registry import ArtifactRegistry

        return ArtifactRegistry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
