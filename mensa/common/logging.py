"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from typing import Any

from mensa.common.config_loader import ClientConfig
from mensa.common.constants import JSON_LOG_FIELDS
from mensa.common.time_utils import utc_timestamp_iso

LOGGER_NAME = "mensa"

# Silent until the caller attaches a handler.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp_iso(),
            "event": getattr(record, "event", None),
            "status": getattr(record, "status", None),
            "url": getattr(record, "url", None),
            "canteen_id": getattr(record, "canteen_id", None),
            "date": getattr(record, "date", None),
            "duration_ms": getattr(record, "duration_ms", None),
            "rows_out": getattr(record, "rows_out", None),
            "error_code": getattr(record, "error_code", None),
            "message": record.getMessage(),
        }
        for field in JSON_LOG_FIELDS:
            payload.setdefault(field, None)
        return json.dumps(payload, ensure_ascii=False)


def build_logger(level: str = "INFO", name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    return logger


def build_logger_from_config(config: ClientConfig, name: str = LOGGER_NAME) -> logging.Logger:
    """Configure the library logger at the level set under ``logging.level``."""
    return build_logger(config.log_level, name=name)


def log_event(logger: logging.Logger, message: str, level: int = logging.INFO, **event_fields: Any) -> None:
    logger.log(level, message, extra=event_fields)
