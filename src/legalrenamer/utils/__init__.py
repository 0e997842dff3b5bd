"""Utility modules for LegalRenamer.

This package contains shared helpers used by the extraction, processing and CLI
layers:

- config.py: Environment variable management for the Gemini API key and settings
- __init__.py: Centralized logging setup (setup_logging, get_logger)

Integration Points:
    - The config module provides the API key and RenamerConfig defaults
    - The logger utility ensures consistent log formatting across all modules;
      the naming package deliberately does not log, so it stays free of I/O

Python Learning Notes:
    - This __init__.py file serves as a package initializer and public API
    - The __all__ list at the bottom controls what gets imported with "from utils import *"
    - logging.config.dictConfig() applies a whole logging setup from a dict
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from .config import RenamerConfig, get_gemini_api_key

DEFAULT_LOGGING_CONFIG = Path(__file__).resolve().parent.parent / "logging_config.yaml"

# Global flag to track if logging has been configured
_logging_configured = False


def setup_logging(config_path: Optional[Path] = None, verbose: bool = False) -> None:
    """Set up logging configuration from a YAML file.

    This function configures the logging system using a YAML dictConfig file. The
    CLI calls it once at startup; library code reaches it lazily through
    get_logger(). Repeated calls are ignored unless ``verbose`` is requested,
    in which case the package logger is raised to DEBUG.

    The default configuration (``legalrenamer/logging_config.yaml``) includes:
    - One stderr console handler with a timestamped format
    - INFO level for the ``legalrenamer`` logger
    - WARNING level for chatty client libraries (google, grpc, urllib3)

    Python Learning Notes:
        - yaml.safe_load() parses YAML without executing arbitrary tags
        - The module-level flag makes setup idempotent across imports

    Args:
        config_path (Optional[Path]): Path to a logging configuration YAML file.
            If None, the configuration bundled with the package is used.
        verbose (bool): If True, the ``legalrenamer`` logger and its handlers
            emit DEBUG records.

    Raises:
        FileNotFoundError: If the logging configuration file is not found.
        yaml.YAMLError: If the YAML configuration file is malformed.

    Example Usage:
        ```python
        from legalrenamer.utils import setup_logging

        setup_logging(verbose=True)
        ```
    """
    global _logging_configured

    if not _logging_configured:
        if config_path is None:
            config_path = DEFAULT_LOGGING_CONFIG

        if not config_path.exists():
            raise FileNotFoundError(f"Logging config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        logging.config.dictConfig(config)
        _logging_configured = True

    if verbose:
        package_logger = logging.getLogger("legalrenamer")
        package_logger.setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers + package_logger.handlers:
            handler.setLevel(logging.DEBUG)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance using the centralized logging configuration.

    If setup_logging() hasn't been called yet, it is called with defaults.

    Args:
        name (Optional[str]): Logger name to use. Pass __name__ from the calling
            module so records carry the dotted module path.

    Returns:
        logging.Logger: A configured logger instance.

    Example Usage:
        ```python
        from legalrenamer.utils import get_logger

        logger = get_logger(__name__)
        logger.info("Renamed %s", path.name)
        ```
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name or __name__)


__all__ = [
    "get_gemini_api_key",
    "RenamerConfig",
    "setup_logging",
    "get_logger",
]
