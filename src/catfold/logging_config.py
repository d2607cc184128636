"""
Logging Configuration for catfold.

Provides centralized logger setup. All catfold loggers hang off the
"catfold" logger, which writes to stderr at the configured level and,
when debug_log is enabled, to <log_dir>/catfold_trace.log at DEBUG.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config_loader import CatfoldSettings, get_config_loader
from .exceptions import ConfigError

ROOT_LOGGER_NAME = "catfold"
TRACE_LOG_FILENAME = "catfold_trace.log"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FlushingStreamHandler(logging.StreamHandler):
    """StreamHandler that flushes after every emit.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a handler.
    ::: This is stateless.
    """
    def emit(self, record):
        super().emit(record)
        self.flush()


def _create_file_handler(log_dir: Path) -> Optional[logging.FileHandler]:
    """
    Create a DEBUG file handler writing to log_dir/catfold_trace.log.

    Returns:
        Configured FileHandler, or None if the directory cannot be created
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / TRACE_LOG_FILENAME, mode="a", encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def _create_stderr_handler(level: str) -> logging.StreamHandler:
    """Create a stderr handler for console output with auto-flush."""
    handler = FlushingStreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def configure_logging(force: bool = False) -> logging.Logger:
    """
    Configure the "catfold" logger from the current settings.

    Only configures once unless force is set, in which case existing
    handlers are closed and replaced (e.g. after the environment changed).
    Invalid settings never stop logging from being set up: the defaults
    are used and a warning names the bad value. The ConfigError still
    surfaces from get_settings() when a setting is actually needed.

    Returns:
        The configured "catfold" logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers and not force:
        return root

    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)

    loader = get_config_loader()
    config_error: Optional[ConfigError] = None
    try:
        settings = loader.settings()
    except ConfigError as e:
        config_error = e
        settings = CatfoldSettings()

    root.propagate = False
    root.setLevel(settings.log_level)
    root.addHandler(_create_stderr_handler(settings.log_level))

    if settings.debug_log:
        file_handler = _create_file_handler(loader.log_directory())
        if file_handler:
            root.addHandler(file_handler)
            root.setLevel(logging.DEBUG)

    if config_error is not None:
        root.warning("Ignoring invalid configuration, logging with defaults: %s", config_error)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the "catfold" hierarchy.

    Args:
        name: Module name (e.g. __name__); names outside the catfold
            namespace are nested under it

    Returns:
        Logger whose records reach the configured catfold handlers
    """
    configure_logging()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
