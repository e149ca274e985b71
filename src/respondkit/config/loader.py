from __future__ import annotations

from pathlib import Path

from respondkit.config.apply_tables import _apply_toml_config
from respondkit.config.env_loader import apply_env_overrides
from respondkit.config.model import AppConfig
from respondkit.config.toml_parser import _parse_toml
from respondkit.config.types import ConfigSource
from respondkit.errors.base import RespondError

CONFIG_FILENAME = "respondkit.toml"


def load_config(root: Path | None = None, path: Path | None = None) -> AppConfig:
    config, _ = resolve_config(root=root, path=path)
    return config


def resolve_config(
    root: Path | None = None,
    path: Path | None = None,
) -> tuple[AppConfig, list[ConfigSource]]:
    config = AppConfig()
    sources: list[ConfigSource] = []
    toml_path = _resolve_config_path(root, path)
    if toml_path is not None:
        data = _parse_toml(toml_path.read_text(encoding="utf-8"), toml_path)
        _apply_toml_config(config, data)
        sources.append(ConfigSource(kind="toml", path=toml_path.as_posix()))
    if apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def _resolve_config_path(root: Path | None, path: Path | None) -> Path | None:
    if path is not None:
        explicit = Path(path).resolve()
        if not explicit.exists():
            raise RespondError(f"Config file not found: {explicit.as_posix()}")
        return explicit
    if root is not None:
        candidate = Path(root).resolve() / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


__all__ = ["CONFIG_FILENAME", "ConfigSource", "load_config", "resolve_config"]
