"""Structured JSON logging for calculator runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from calc_hub.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure root logging: JSON lines on stderr, or plain text"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # stderr keeps stdout free for calculator output
    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(calculator: str, duration_ms: float, **fields: Any) -> None:
    """Log structured calculation outcome"""
    logging.getLogger("calc_hub").info(
        "Calculation completed",
        extra={
            "calculator": calculator,
            "step": "calculation_complete",
            "duration_ms": duration_ms,
            **fields,
        },
    )
