"""
Configuration for qmlkit.

Settings come from, in increasing priority:

1. Defaults (this file)
2. ``qmlkit.toml`` in the working directory, or an explicit path
3. Environment variables (``QMLKIT_SEARCH_PATH``, ``QMLKIT_LOG_LEVEL``)

Example ``qmlkit.toml``::

    [resources]
    search_paths = ["ui", "modules"]
    encoding = "utf-8"

    [logging]
    level = "INFO"

    [components.Button]
    tag = "Button"
    rename = { text = "button-text" }
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .normalizer import COMPONENT_RULES, ChildRename, ComponentRule
from .resources import ResourceManager

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "qmlkit.toml"
SEARCH_PATH_ENV_VAR = "QMLKIT_SEARCH_PATH"
LOG_LEVEL_ENV_VAR = "QMLKIT_LOG_LEVEL"


@dataclass
class ResourcesConfig:
    """Where QML files are looked up and how they are decoded."""

    search_paths: list[str] = field(default_factory=list)
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class QmlkitConfig:
    """Root config with all settings."""

    resources: ResourcesConfig = field(default_factory=ResourcesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    components: dict[str, ComponentRule] = field(default_factory=dict)
    path: Path | None = None  # file the settings were read from

    def component_rules(self) -> dict[str, ComponentRule]:
        """Built-in rewrite table with configured components layered on top."""
        rules = dict(COMPONENT_RULES)
        rules.update(self.components)
        return rules

    def resource_manager(self) -> ResourceManager:
        search_paths = self.resources.search_paths
        if self.path is not None:
            # Relative search paths are relative to the config file
            search_paths = [str(self.path.parent / p) for p in search_paths]
        return ResourceManager(search_paths, encoding=self.resources.encoding)


def load_config(path: Path | None = None) -> QmlkitConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file. When omitted, ``qmlkit.toml`` in the
            current directory is used if present.

    Raises:
        ConfigError: If the file is missing (explicit path only) or malformed
    """
    config = QmlkitConfig()

    if path is None:
        default = Path.cwd() / CONFIG_FILE_NAME
        if default.is_file():
            path = default
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is not None:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
        config = _apply_toml(config, data)
        config.path = path
        logger.debug("Loaded config from %s", path)

    return _apply_env(config)


def _table(data: dict, key: str) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a table")
    return value


def _apply_toml(config: QmlkitConfig, data: dict) -> QmlkitConfig:
    """Apply toml data to config."""
    resources = _table(data, "resources")
    if "search_paths" in resources:
        search_paths = resources["search_paths"]
        if not isinstance(search_paths, list):
            raise ConfigError("'resources.search_paths' must be a list of paths")
        config.resources.search_paths = [str(p) for p in search_paths]
    if "encoding" in resources:
        config.resources.encoding = str(resources["encoding"])

    log = _table(data, "logging")
    if "level" in log:
        config.logging.level = str(log["level"]).upper()

    for name, entry in _table(data, "components").items():
        config.components[name] = _parse_component_rule(name, entry)

    return config


def _parse_component_rule(name: str, entry: object) -> ComponentRule:
    if not isinstance(entry, dict) or "tag" not in entry:
        raise ConfigError(f"Component '{name}' needs a 'tag' entry")

    rename = entry.get("rename", {})
    if not isinstance(rename, dict):
        raise ConfigError(f"Component '{name}': 'rename' must be a table")

    renames = tuple(ChildRename(str(src), str(dst)) for src, dst in rename.items())
    return ComponentRule(str(entry["tag"]), renames)


def _apply_env(config: QmlkitConfig) -> QmlkitConfig:
    """Apply environment variable overrides."""
    search_path = os.environ.get(SEARCH_PATH_ENV_VAR)
    if search_path:
        # Environment paths are taken as-is, not relative to the config file
        config.resources.search_paths = [
            str(Path(p).resolve()) for p in search_path.split(os.pathsep) if p
        ]

    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        config.logging.level = level.strip().upper()

    return config
