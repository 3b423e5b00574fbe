"""
Logger setup: attach console and rotating file (JSON) handlers from config.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from storefront.core.logger.config import LoggerConfig
from storefront.core.logger.formatters import JsonFormatter, PlainConsoleFormatter


def configure(config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Configure the storefront root logger with the given config.
    If config is None, uses LoggerConfig.from_env().
    Call once at application startup; calling again replaces the handlers.
    """
    if config is None:
        config = LoggerConfig.from_env()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root = logging.getLogger(config.root_name or "storefront")
    root.setLevel(level)

    # Avoid duplicate handlers when reconfigured (e.g. in tests)
    root.handlers.clear()

    if config.console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(PlainConsoleFormatter())
        root.addHandler(console)

    if config.file_rotating and config.log_dir and config.log_dir.strip():
        try:
            os.makedirs(config.log_dir, exist_ok=True)
        except OSError:
            root.warning("Could not create log dir %s, skipping file handler", config.log_dir)
        else:
            path = os.path.join(config.log_dir, f"{config.log_file_basename}.log")
            file_handler = RotatingFileHandler(
                path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)

    root.propagate = False
    return root
