from __future__ import annotations

from .loader import CONFIG_FILENAME, load_config, resolve_config
from .model import AppConfig, BreakpointsConfig, OutputConfig
from .types import ConfigSource

__all__ = [
    "AppConfig",
    "BreakpointsConfig",
    "CONFIG_FILENAME",
    "ConfigSource",
    "OutputConfig",
    "load_config",
    "resolve_config",
]
