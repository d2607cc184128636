"""
Configuration Loader

Loads catfold configuration from catfold.json in the project root.
Environment variables always take precedence over config file values.

Config file location (in order of precedence):
1. CATFOLD_PROJECT_ROOT/catfold.json (if CATFOLD_PROJECT_ROOT is set)
2. CWD/catfold.json

Supported settings in catfold.json:
{
    "index_origin": 0,          // -> CATFOLD_INDEX_ORIGIN (0 or 1)
    "log_level": "WARNING",     // -> CATFOLD_LOG_LEVEL
    "debug_log": false,         // -> CATFOLD_DEBUG_LOG
    "log_dir": ".catfold"       // -> CATFOLD_LOG_DIR
}
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "catfold.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CatfoldSettings(BaseModel):
    """Validated catfold settings."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    index_origin: int = Field(0, description="Default origin for zip_with_index")
    log_level: str = "WARNING"
    debug_log: bool = False
    log_dir: Optional[Path] = None

    @field_validator("index_origin")
    @classmethod
    def _check_origin(cls, value: int) -> int:
        if value not in (0, 1):
            raise ValueError("index_origin must be 0 or 1")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigLoader:
    """
    Loads configuration from catfold.json file.

    ::: This is-in-layer Service-Layer.
    ::: This is a loader.
    ::: This is stateless.

    Priority: Environment variables > catfold.json > defaults
    """

    # Mapping from catfold.json keys to environment variable names
    CONFIG_KEY_TO_ENV = {
        "index_origin": "CATFOLD_INDEX_ORIGIN",
        "log_level": "CATFOLD_LOG_LEVEL",
        "debug_log": "CATFOLD_DEBUG_LOG",
        "log_dir": "CATFOLD_LOG_DIR",
    }

    def __init__(self):
        self._config: Dict[str, Any] = {}
        self._config_path: Optional[Path] = None
        self._project_root: Optional[Path] = None
        self._settings: Optional[CatfoldSettings] = None
        self._loaded = False

    def load(self, project_root: Optional[Path] = None) -> bool:
        """
        Load configuration from catfold.json.

        Args:
            project_root: Project root directory. If None, uses CATFOLD_PROJECT_ROOT or CWD.

        Returns:
            True if config file was found and loaded, False otherwise.
        """
        if self._loaded:
            return self._config_path is not None

        if project_root is None:
            env_root = os.getenv("CATFOLD_PROJECT_ROOT")
            project_root = Path(env_root) if env_root else Path.cwd()
        self._project_root = Path(project_root)

        config_path = self._project_root / CONFIG_FILENAME
        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    self._config = data
                    self._config_path = config_path
                    logger.debug("Loaded config from: %s", config_path)
                else:
                    logger.warning("Ignoring %s: top level must be a JSON object", config_path)
            except json.JSONDecodeError as e:
                logger.warning("Invalid JSON in %s: %s", config_path, e)
            except OSError as e:
                logger.warning("Error loading %s: %s", config_path, e)

        self._loaded = True
        return self._config_path is not None

    def _merged_values(self) -> Dict[str, Any]:
        """Config file values overridden by any set environment variables."""
        values: Dict[str, Any] = {}
        for key, env_var in self.CONFIG_KEY_TO_ENV.items():
            env_value = os.getenv(env_var)
            if env_value is not None and env_value != "":
                values[key] = env_value
            elif key in self._config:
                values[key] = self._config[key]
        return values

    def settings(self) -> CatfoldSettings:
        """
        Get validated settings, loading the config file on first use.

        Raises:
            ConfigError: If a value from the file or environment is invalid.
        """
        if self._settings is None:
            self.load()
            try:
                self._settings = CatfoldSettings(**self._merged_values())
            except ValidationError as e:
                raise ConfigError(f"Invalid catfold configuration: {e}") from e
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw config file value."""
        return self._config.get(key, default)

    def log_directory(self) -> Path:
        """Resolved log directory: log_dir setting or <project root>/.catfold."""
        configured = self.settings().log_dir
        if configured is not None:
            return configured
        return (self._project_root or Path.cwd()) / ".catfold"

    @property
    def config_path(self) -> Optional[Path]:
        """Path to the loaded config file, or None if not loaded."""
        return self._config_path

    @property
    def config(self) -> Dict[str, Any]:
        """The loaded configuration dictionary."""
        return self._config.copy()


# Global singleton instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get the global config loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reset_config_loader() -> None:
    """
    Drop the global loader so the next access re-reads file and environment.

    Loggers that are already configured keep their handlers and level;
    call logging_config.configure_logging(force=True) to apply a changed
    log_level, debug_log or log_dir.
    """
    global _config_loader
    _config_loader = None


def load_config(project_root: Optional[Path] = None) -> bool:
    """
    Load configuration from catfold.json.

    Args:
        project_root: Project root directory. If None, auto-detects.

    Returns:
        True if config was loaded, False otherwise.
    """
    return get_config_loader().load(project_root)


def get_settings() -> CatfoldSettings:
    """Process-wide validated settings."""
    return get_config_loader().settings()
