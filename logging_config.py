"""
Centralized logging configuration for Shop Bridge.

Requests are served concurrently, and an upstream failure is only logged,
never returned to the caller. To pair such a log line with the request that
caused it, every record carries the handling thread and the inbound request
line (``GET /api/stock``), or ``-`` outside a request.

The Admin API access token must never reach a log file, so any configured
secret is masked in the rendered message before a handler sees it.

Log Format:
    2025-12-03 10:15:30 [INFO    ] [MainThread] [-] shop_bridge.app - Starting Shop Bridge
    2025-12-03 10:15:31 [ERROR   ] [Thread-4] [POST /api/create-order] shop_bridge.core.graphql_client - Upstream HTTP error 401

Usage:
    # In create_app()
    setup_logging(log_level=logging.INFO, redact=[app.config["SHOPIFY_ADMIN_TOKEN"]])

    # In modules
    logger = get_logger(__name__)
"""

import logging
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional

from flask import has_request_context, request


APP_LOGGER_NAME = "shop_bridge"

LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(thread_name)s] [%(request_line)s] "
    "%(name)s - %(message)s"
)
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5
REDACTED = "***"


class RequestContextFilter(logging.Filter):
    """
    Adds ``thread_name`` and ``request_line`` to each record and masks secrets.

    Never drops a record.
    """

    def __init__(self, secrets: Iterable[Optional[str]] = ()):
        super().__init__()
        self._secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        record.thread_name = threading.current_thread().name

        if has_request_context():
            record.request_line = f"{request.method} {request.path}"
        else:
            record.request_line = "-"

        if self._secrets:
            message = record.getMessage()
            for secret in self._secrets:
                message = message.replace(secret, REDACTED)
            record.msg = message
            record.args = None

        return True


def _rotating_handler(path: Path, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8"
    )
    handler.setLevel(level)
    return handler


def setup_logging(
    log_level: int = logging.INFO,
    enable_file_logging: bool = False,
    log_dir: Optional[Path] = None,
    redact: Iterable[Optional[str]] = (),
    app_name: str = APP_LOGGER_NAME,
) -> logging.Logger:
    """
    Configure the application logger tree.

    Console output always; in production also ``<app_name>.log`` and an
    ERROR-only ``<app_name>_error.log`` under ``log_dir`` (default ./logs).

    Args:
        log_level: Minimum log level
        enable_file_logging: Whether to add the rotating file handlers
        log_dir: Directory for log files
        redact: Secret values to mask in every message (None entries ignored)
        app_name: Name of the root application logger

    Returns:
        Configured application logger
    """
    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)
    logger.propagate = False

    # Re-configuration (one call per create_app) replaces earlier handlers
    for old_handler in list(logger.handlers):
        old_handler.close()
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    handlers[0].setLevel(log_level)

    if enable_file_logging:
        log_dir = log_dir or Path(__file__).parent / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_rotating_handler(log_dir / f"{app_name}.log", log_level))
        handlers.append(_rotating_handler(log_dir / f"{app_name}_error.log", logging.ERROR))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    context_filter = RequestContextFilter(redact)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        logger.addHandler(handler)

    if enable_file_logging:
        logger.info(f"File logging enabled in {log_dir}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger under the application namespace.

    ``services.order_service`` becomes ``shop_bridge.services.order_service``.
    """
    if not name.startswith(APP_LOGGER_NAME):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
