"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from bondfi_compliance.config import settings
from bondfi_compliance.domain.compliance import ApprovalChecks
from bondfi_compliance.domain.models import ApprovalResult, VerificationResult


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


def mask_identifier(identifier: str) -> str:
    """Keep tax ids out of logs: first two characters plus length"""
    return f"{identifier[:2]}***({len(identifier)})"


def log_verification(
    request_id: str,
    identifier: str,
    result: VerificationResult,
    duration_ms: float,
) -> None:
    """Log structured verification outcome for analysis"""
    logging.info(
        "Verification completed",
        extra={
            "request_id": request_id,
            "issuer": mask_identifier(identifier),
            "step": "verification_complete",
            "score": result.score,
            "recommended": result.recommended,
            "duration_ms": duration_ms,
        },
    )


def log_approval(
    request_id: str,
    bond_id: str,
    result: ApprovalResult,
    checks: ApprovalChecks,
    duration_ms: float,
) -> None:
    """Log structured approval outcome for analysis"""
    logging.info(
        "Approval completed",
        extra={
            "request_id": request_id,
            "bond_id": bond_id,
            "step": "approval_complete",
            "approval_outcome": "approved" if result.approved else "rejected",
            "failed_checks": checks.failed_reasons,
            "oracle_score": result.oracle_score,
            "duration_ms": duration_ms,
        },
    )
