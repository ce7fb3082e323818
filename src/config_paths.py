"""Helpers to resolve the configuration file and the data paths it references."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping

REPO_ROOT = Path(__file__).resolve().parents[1]

CONFIG_ENV_VAR = "ENERGY_BREAKDOWN_CONFIG_PATH"
CONFIG_ROOT_KEY = "_config_root"


def get_config_path() -> Path:
    """Return the configuration path, honouring ENERGY_BREAKDOWN_CONFIG_PATH when set."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return (REPO_ROOT / "config.yaml").resolve()


def set_config_root(config: MutableMapping[str, object], root: Path) -> None:
    """Annotate a config mapping with its filesystem root for relative paths."""

    if not isinstance(config, MutableMapping):
        return
    config[CONFIG_ROOT_KEY] = str(root.resolve())


def get_config_root(config: Mapping[str, object]) -> Path:
    """Return the base directory that relative paths should resolve against."""

    if isinstance(config, Mapping):
        value = config.get(CONFIG_ROOT_KEY)
        if isinstance(value, str):
            try:
                return Path(value).expanduser().resolve()
            except OSError:
                pass
    return REPO_ROOT.resolve()


def resolve_relative(path: Path | str, config: Mapping[str, object] | None = None) -> Path:
    """Resolve ``path`` against the config root unless it is already absolute."""

    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    root = get_config_root(config or {})
    return (root / candidate).resolve()
