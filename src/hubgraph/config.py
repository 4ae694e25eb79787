"""Configuration management for hubgraph using YAML files."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml

from hubgraph.executor import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".hubgraph"
TOKEN_ENV_VAR = "GITHUB_TOKEN"

TOKEN_KEY = "github.token"
BASE_URL_KEY = "github.base_url"
TIMEOUT_KEY = "github.timeout"
KNOWN_KEYS = (TOKEN_KEY, BASE_URL_KEY, TIMEOUT_KEY)


class Config:
    """Configuration manager using YAML file storage.

    Local config lives in .hubgraph/config.yaml in the current directory,
    global config in ~/.hubgraph/config.yaml. Reads check local first and
    fall back to global.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to store config file (overrides use_global)
        """
        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = Path.home() / CONFIG_DIR_NAME
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = self._load()

        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = Path.home() / CONFIG_DIR_NAME / "config.yaml"
            if global_config_file.exists() and global_config_file != self.config_file:
                try:
                    with open(global_config_file, "r") as f:
                        self._global_config = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    def _load(self) -> dict[str, Any]:
        if not self.config_file.exists():
            logger.debug("Config file does not exist, initializing empty config")
            return {}

        try:
            with open(self.config_file, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", error=str(e))
            raise ValueError(f"Failed to load config from {self.config_file}: {e}") from e
        if not isinstance(config, dict):
            raise ValueError(f"Config file {self.config_file} must contain a mapping")
        logger.debug("Config loaded successfully", keys=sorted(config))
        return config

    def _save(self) -> None:
        # The directory is created on first write only.
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e
        logger.debug("Config saved successfully")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value, local first, then global.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        if key in self._config:
            logger.debug("Getting config value from local", key=key)
            return self._config[key]

        if not self.is_global and key in self._global_config:
            logger.debug("Getting config value from global", key=key)
            return self._global_config[key]

        logger.debug("Config value not found", key=key)
        return default

    def set(self, key: str, value: str) -> None:
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, Any]:
        """List all settings; local config is merged over global unless global-only."""
        if self.is_global:
            return self._config.copy()
        merged = self._global_config.copy()
        merged.update(self._config)
        return merged


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance.

    Args:
        use_global: If True, return global config. If False, return local config with global fallback.

    Returns:
        Config instance
    """
    return Config(use_global=use_global)


def parse_timeout(raw_timeout: Any) -> float:
    """Parse a timeout in seconds, which must be a positive number."""
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid {TIMEOUT_KEY}: {raw_timeout!r}") from e
    if timeout <= 0:
        raise ValueError(f"Invalid {TIMEOUT_KEY}: must be positive, got {raw_timeout!r}")
    return timeout


def validate_setting(key: str, value: str) -> None:
    """Check a setting before it is written.

    Raises:
        ValueError: If the key is unknown or the value cannot be used.
    """
    if key not in KNOWN_KEYS:
        raise ValueError(f"Unknown configuration key: '{key}'. Use one of {', '.join(KNOWN_KEYS)}")
    if key == TIMEOUT_KEY:
        parse_timeout(value)
    elif key == BASE_URL_KEY and not value.startswith(("https://", "http://")):
        raise ValueError(f"Invalid {BASE_URL_KEY}: expected an http(s) URL, got {value!r}")
    elif key == TOKEN_KEY and not value.strip():
        raise ValueError(f"Invalid {TOKEN_KEY}: the token cannot be empty")


@dataclass(frozen=True)
class Settings:
    """Resolved connection settings, loaded once per process."""

    token: str | None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return f"Settings(token={token!r}, base_url={self.base_url!r}, timeout={self.timeout!r})"


def load_settings(config: Config | None = None) -> Settings:
    """Resolve settings from config files with the GITHUB_TOKEN fallback.

    Raises:
        ValueError: If the configured timeout is not a positive number.
    """
    config = config or get_config()

    token = config.get(TOKEN_KEY) or os.environ.get(TOKEN_ENV_VAR)
    base_url = config.get(BASE_URL_KEY) or DEFAULT_BASE_URL

    timeout = parse_timeout(config.get(TIMEOUT_KEY, DEFAULT_TIMEOUT))

    logger.debug("Settings loaded", base_url=base_url, timeout=timeout, has_token=bool(token))
    return Settings(token=token, base_url=str(base_url), timeout=timeout)
