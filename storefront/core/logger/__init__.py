"""
Storefront logger: console + optional rotating JSON file.

Usage:
    from storefront.core.logger import configure, LoggerConfig

    # Configure once at startup (from env if no config is given):
    # LOG_LEVEL, LOG_DIR, LOG_FILE_BASENAME, LOG_MAX_BYTES, LOG_BACKUP_COUNT, ...
    configure()

    logger = logging.getLogger(__name__)
    logger.info("Order loaded", extra={"order_id": "A12"})
"""
from storefront.core.logger.config import LoggerConfig
from storefront.core.logger.formatters import JsonFormatter, PlainConsoleFormatter
from storefront.core.logger.setup import configure

__all__ = [
    "LoggerConfig",
    "JsonFormatter",
    "PlainConsoleFormatter",
    "configure",
]
