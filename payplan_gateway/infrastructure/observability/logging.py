"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from payplan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule_generated(
    request_id: str,
    frequency: str,
    total_installments: int,
    total_course_value_cents: int,
    expected_commission_cents: int,
    duration_ms: float,
) -> None:
    """Log structured preview outcome for analysis"""
    logging.info(
        "Payment plan preview generated",
        extra={
            "request_id": request_id,
            "step": "preview_complete",
            "payment_frequency": frequency,
            "total_installments": total_installments,
            "total_course_value_cents": total_course_value_cents,
            "expected_commission_cents": expected_commission_cents,
            "duration_ms": duration_ms,
        },
    )
