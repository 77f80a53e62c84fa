"""Structured JSON logging."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, TextIO

from pythonjsonlogger.json import JsonFormatter


# Run ID for correlation across log entries of one process
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(
    verbose: bool = False, stream: TextIO | None = None
) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at DEBUG instead of INFO.
        stream: Stream for log records, defaults to stdout.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(stream or sys.stdout)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_lookup(
    ip: str,
    status: str,
    threat_score: int | None,
    visitor_types: list[str],
    duration_ms: int,
) -> None:
    """Log structured per-IP lookup result.

    Args:
        ip: IPv4 address checked.
        status: Lookup status (LISTED, NOT_LISTED or INVALID).
        threat_score: Threat score, None when the lookup failed.
        visitor_types: Visitor type names from the answer.
        duration_ms: Lookup time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "IP lookup completed",
        extra={
            "ip": ip,
            "status": status,
            "threat_score": threat_score,
            "visitor_types": visitor_types,
            "duration_ms": duration_ms,
        },
    )


def log_run_summary(
    total_ips: int,
    listed: int,
    not_listed: int,
    invalid: int,
    threats: int,
    duration_sec: float,
) -> None:
    """Log run completion summary.

    Args:
        total_ips: Total number of IPs checked.
        listed: Number of IPs with an HTTP:BL record.
        not_listed: Number of IPs without a record.
        invalid: Number of failed lookups.
        threats: Number of IPs at or above the threat threshold.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run completed",
        extra={
            "total_ips": total_ips,
            "listed": listed,
            "not_listed": not_listed,
            "invalid": invalid,
            "threats": threats,
            "duration_sec": duration_sec,
        },
    )
