"""Prometheus metrics for monitoring verification tiers, approval rates, and rejection causes"""

from prometheus_client import Counter, Histogram

from bondfi_compliance.domain.compliance import ApprovalChecks
from bondfi_compliance.domain.models import ApprovalResult, VerificationResult
from bondfi_compliance.domain.scoring import score_tier

# Verification metrics
verification_counter = Counter(
    "bondfi_verification_total",
    "Issuer verifications performed",
    ["tier"],  # high | medium | low
)

# Approval metrics
approval_counter = Counter(
    "bondfi_approval_total",
    "Bond approval decisions made",
    ["outcome"],  # approved | rejected
)

rejection_reason_counter = Counter(
    "bondfi_rejection_reason_total",
    "Failed approval checks",
    ["reason"],  # yield | face_value | score
)

# Wire failures
serialization_failure_counter = Counter(
    "bondfi_serialization_failures_total",
    "Results that could not be rendered to their wire form",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_verification(result: VerificationResult) -> None:
    verification_counter.labels(tier=score_tier(result.score)).inc()


def record_approval(result: ApprovalResult, checks: ApprovalChecks) -> None:
    """Record approval outcome and each failed check"""
    outcome = "approved" if result.approved else "rejected"
    approval_counter.labels(outcome=outcome).inc()

    for reason in checks.failed_reasons:
        rejection_reason_counter.labels(reason=reason).inc()
