# -*- coding: utf-8 -*-
"""
Logging configuration.

The service logs one JSON object per line; the command-line script can ask
for plain text instead. Both carry the request ID of the current request.
"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from .config import settings
from .middleware import get_request_id

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(request_id)s] %(message)s"


class RequestIDFilter(logging.Filter):
    """Stamp records with the current request ID ("-" outside a request)."""

    def filter(self, record):
        record.request_id = get_request_id() or "-"
        return True


class ClipJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["request_id"] = getattr(record, "request_id", "-")


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(TEXT_FORMAT)
    return ClipJsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(request_id)s %(message)s",
        rename_fields={"asctime": "@timestamp"},
    )


def setup_logging(level: str | None = None, log_format: str | None = None):
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)
        log_format: "json" or "text" (defaults to settings.LOG_FORMAT)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.LOG_LEVEL))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format or settings.LOG_FORMAT))
    handler.addFilter(RequestIDFilter())
    root_logger.addHandler(handler)

    # Access lines come from RequestIDMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
