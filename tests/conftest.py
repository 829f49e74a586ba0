"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from bondfi_compliance.api.main import create_app
from bondfi_compliance.api.dependencies import build_engine
from bondfi_compliance.domain.engine import ComplianceEngine
from bondfi_compliance.domain.models import BondApprovalRequest
from bondfi_compliance.infrastructure.clients.ledger import PlaceholderLedger

FIXED_TIMESTAMP = 1705420800


@pytest.fixture
def engine() -> ComplianceEngine:
    """Engine with default threshold and a pinned ledger clock"""
    return build_engine(
        approval_threshold=97,
        ledger=PlaceholderLedger(tx_prefix="weil-tx", clock=lambda: FIXED_TIMESTAMP),
    )


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def good_bond() -> BondApprovalRequest:
    """Bond that passes every check"""
    return BondApprovalRequest(
        bond_id="B1",
        identifier="AA1234567",
        yield_percent=10.0,
        face_value=50_000,
    )
