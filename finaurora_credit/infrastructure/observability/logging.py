"""Structured JSON logging for assessment outcomes"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from finaurora_credit.config import settings

PACKAGE_LOGGER = "finaurora_credit"


class AssessmentJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping each record with UTC time, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout JSON handler to the package logger.

    Only the package logger is touched; records still propagate to
    whatever the host application configured on the root logger.
    Calling it again replaces the handler rather than stacking another.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler.formatter, AssessmentJsonFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(AssessmentJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger


def log_assessment(
    request_id: str,
    applicant_name: str,
    profile_tier: str,
    approved: bool,
    reason: str,
    installment: float,
    duration_ms: float,
) -> None:
    """Log structured assessment outcome for analysis"""
    logging.getLogger(PACKAGE_LOGGER).info(
        "Assessment completed",
        extra={
            "request_id": request_id,
            "applicant_name": applicant_name,
            "step": "assessment_complete",
            "profile_tier": profile_tier,
            "approval_outcome": "approved" if approved else "declined",
            "reason": reason,
            "installment": installment,
            "duration_ms": duration_ms,
        },
    )
