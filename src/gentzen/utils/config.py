"""Layered YAML settings.

The packaged ``gentzen/configs/default.yaml`` is always read first. A user
file, when one is found, is merged over it key by key, so it only has to
mention the settings it changes. The user file is, in order of preference:

1. the path in the ``GENTZEN_CONFIG`` environment variable
2. ``gentzen.yaml`` in the working directory
3. ``~/.gentzen/config.yaml``

A value written as ``${VAR}`` or ``${VAR:default}`` is replaced by that
environment variable and read back as YAML, so numbers stay numbers. A
setting that resolves to nothing keeps the value from the layer below.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


PACKAGED_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
CONFIG_ENV = "GENTZEN_CONFIG"

_VARIABLE = re.compile(r"\$\{(?P<name>[^}:]+)(?::(?P<default>[^}]*))?\}\Z")


def find_user_config() -> Optional[Path]:
    """The user settings file, or None when there is none."""
    if os.environ.get(CONFIG_ENV):
        return Path(os.environ[CONFIG_ENV])
    for path in (Path.cwd() / "gentzen.yaml", Path.home() / ".gentzen" / "config.yaml"):
        if path.is_file():
            return path
    return None


def expand_variables(value: Any) -> Any:
    if isinstance(value, str):
        match = _VARIABLE.match(value)
        if match is None:
            return value
        return yaml.safe_load(os.environ.get(match["name"], match["default"] or ""))
    if isinstance(value, dict):
        return {k: expand_variables(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_variables(v) for v in value]
    return value


def merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``overrides`` into ``base`` in place, recursing into sections."""
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge(base[key], value)
        else:
            base[key] = value
    return base


def _read(path: Path) -> Dict[str, Any]:
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(data).__name__}")
    return expand_variables(data)


class Config:
    """Settings looked up by dotted key, e.g. ``config.get("parser.max_depth")``.

    Args:
        config_path: User file to merge over the packaged defaults. When
            omitted, find_user_config() picks one.
    """

    def __init__(self, config_path: Optional[str] = None):
        user_path = Path(config_path) if config_path else find_user_config()
        if user_path is not None and not user_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {user_path}")

        self.sources: List[Path] = [PACKAGED_CONFIG]
        if user_path is not None:
            self.sources.append(user_path)

        self.config: Dict[str, Any] = {}
        for source in self.sources:
            merge(self.config, _read(source))

    @property
    def config_path(self) -> Path:
        """The file with the final say."""
        return self.sources[-1]

    def get(self, key: str, default: Any = None) -> Any:
        value = self.config
        for part in key.split('.'):
            if not isinstance(value, dict) or value.get(part) is None:
                return default
            value = value[part]
        return value

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        merge(self.config, updates)


_config = None


def get_config() -> Config:
    """The process-wide settings, loaded on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config(config: Optional[Config] = None):
    """Replace the process-wide settings, or drop them so the next call reloads."""
    global _config
    _config = config
