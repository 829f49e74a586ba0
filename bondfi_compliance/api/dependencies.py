"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from bondfi_compliance.config import settings
from bondfi_compliance.domain.engine import ComplianceEngine
from bondfi_compliance.domain.interfaces import ClockOrLedger, IdentityScorer
from bondfi_compliance.infrastructure.clients.identity import MockIdentityScorer
from bondfi_compliance.infrastructure.clients.ledger import PlaceholderLedger


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def build_engine(
    approval_threshold: int | None = None,
    scorer: IdentityScorer | None = None,
    ledger: ClockOrLedger | None = None,
) -> ComplianceEngine:
    """
    Wire the compliance engine from settings and the local stand-ins.

    Raises:
        InvalidConfigurationError: threshold outside 0-255
    """
    if approval_threshold is None:
        approval_threshold = settings.approval_threshold
    return ComplianceEngine(
        scorer=scorer or MockIdentityScorer(),
        ledger=ledger or PlaceholderLedger(),
        approval_threshold=approval_threshold,
    )


def get_engine(request: Request) -> ComplianceEngine:
    """Provide the engine built at application startup"""
    return request.app.state.engine
