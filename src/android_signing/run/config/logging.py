#!/usr/bin/env python3
"""
Centralized logging configuration.

This module provides a bootstrap_logging function that can be imported from any entry point
to configure logging consistently using Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then falls back to
    the copy shipped with the package.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    packaged_config = Path(__file__).parent / 'logging.ini'
    if packaged_config.exists():
        return packaged_config

    return None


def _get_env_log_level() -> Optional[str]:
    """Return the validated LOG_LEVEL override, if one is set."""
    log_level = os.environ.get('LOG_LEVEL', '').strip().upper()
    if not log_level:
        return None
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', ignoring", file=sys.stderr)
        return None
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration using Python's native INI format.

    Loads logging.ini with logging.config.fileConfig(), then applies the
    LOG_LEVEL environment variable on top of it.

    Args:
        name: Optional name for the logger (defaults to root logger)
    """
    config_path = _find_logging_config()
    env_level = _get_env_log_level()

    if config_path is None:
        print("Warning: No logging.ini file found, using basic logging configuration", file=sys.stderr)
        logging.basicConfig(
            level=getattr(logging, env_level or 'INFO'),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        logging.basicConfig(
            level=getattr(logging, env_level or 'INFO'),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    if env_level:
        level = getattr(logging, env_level)
        logging.getLogger().setLevel(level)
        logging.getLogger('android_signing').setLevel(level)

    if name:
        logging.getLogger(name).debug(f"Logging configured for {name} from {config_path}")
    else:
        logging.debug(f"Logging configured for root logger from {config_path}")
