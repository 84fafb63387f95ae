"""Console configuration."""

from conlog.lib.config.settings import ConlogConfig, load_config, resolve_root

__all__ = ["ConlogConfig", "load_config", "resolve_root"]
