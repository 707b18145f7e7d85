"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/logger.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Centralized logging for SuratLog. Supports console/file
                output and component-specific levels (store, duplicates,
                query, export).
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

# Root logger for the entire application
APP_LOGGER_NAME = "suratlog"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Sets up the global logging configuration.

    Args:
        level: The default logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a file where logs should be saved.
        component_levels: Dict mapping component names (e.g. 'store') to levels.
    """
    root = logging.getLogger(APP_LOGGER_NAME)

    # Re-setup must not stack handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if component_levels:
        for component, cmp_level in component_levels.items():
            set_component_level(component, cmp_level)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger instance for a specific component.
    Namespaced under 'suratlog.<name>'.
    """
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: str) -> None:
    """
    Dynamically changes the log level for a specific component.
    Unknown level names are ignored.
    """
    logger = get_logger(component)
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logger.setLevel(numeric_level)
        logger.propagate = True
