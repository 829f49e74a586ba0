"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from bondfi_compliance.config import settings
from bondfi_compliance.api.main import create_app
from bondfi_compliance.api.dependencies import build_engine, get_engine
from bondfi_compliance.domain.engine import ComplianceEngine
from bondfi_compliance.domain.exceptions import InvalidConfigurationError
from bondfi_compliance.domain.models import BondApprovalRequest


class EmptyLedger:
    def submit(self, request: BondApprovalRequest) -> str:
        return ""


class BrokenScorer:
    def score(self, identifier: str) -> int:
        return 250


def client_with_engine(engine: ComplianceEngine) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_engine] = lambda: engine
    return TestClient(app)


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_verify_endpoint(client: TestClient):
    """Test POST /v1/issuers/verify with a top-tier issuer"""
    response = client.post("/v1/issuers/verify", json={"pan": "AA1234567"})

    assert response.status_code == 200
    assert response.json() == {
        "score": 98,
        "deviation": 0.02,
        "gstValid": True,
        "turnover": 500_000_000,
        "recommended": True,
    }


def test_verify_endpoint_empty_identifier(client: TestClient):
    """Empty identifiers are scored, not rejected"""
    response = client.post("/v1/issuers/verify", json={"pan": ""})

    assert response.status_code == 200
    assert response.json()["score"] == 45
    assert response.json()["gstValid"] is False


def test_compliance_endpoint(client: TestClient):
    response = client.post("/v1/issuers/compliance", json={"pan": "BB1234567"})

    assert response.status_code == 200
    data = response.json()
    assert data["recommendation"] == "manual_review"
    assert data["gstStatus"] == "valid"
    assert data["oracleScore"] == 75


def test_approve_endpoint_approval(client: TestClient):
    """Test POST /v1/bonds/approve with approval"""
    response = client.post(
        "/v1/bonds/approve",
        json={"bondId": "B1", "pan": "AA1234567", "yieldPercent": 10.0, "faceValue": 50000},
    )

    assert response.status_code == 200
    assert response.json() == {
        "approved": True,
        "txId": "weil-tx-B1-1705420800",
        "oracleScore": 98,
    }


@pytest.mark.parametrize(
    "body",
    [
        {"bondId": "B2", "pan": "AA1234567", "yieldPercent": 20.0, "faceValue": 50000},
        {"bondId": "B3", "pan": "ZZ12", "yieldPercent": 10.0, "faceValue": 50000},
        {"bondId": "B4", "pan": "AA1234567", "yieldPercent": -2.0, "faceValue": 0},
    ],
)
def test_approve_endpoint_rejection(client: TestClient, body):
    """Failed checks return 200 with approved=false"""
    response = client.post("/v1/bonds/approve", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["approved"] is False
    assert data["txId"] == ""


def test_approve_endpoint_negative_face_value(client: TestClient):
    """Face value is unsigned on the wire"""
    response = client.post(
        "/v1/bonds/approve",
        json={"bondId": "B5", "pan": "AA1234567", "yieldPercent": 10.0, "faceValue": -1},
    )
    assert response.status_code == 422


def test_approve_endpoint_missing_field(client: TestClient):
    response = client.post("/v1/bonds/approve", json={"bondId": "B6", "pan": "AA1234567"})
    assert response.status_code == 422


def test_approve_endpoint_custom_threshold():
    """Test engine dependency override with a lenient threshold"""
    client = client_with_engine(build_engine(approval_threshold=70))

    response = client.post(
        "/v1/bonds/approve",
        json={"bondId": "B7", "pan": "BB1234567", "yieldPercent": 10.0, "faceValue": 50000},
    )

    assert response.json()["approved"] is True
    assert response.json()["txId"] == "weil-tx-B7-1705420800"


def test_approve_endpoint_ledger_failure():
    client = client_with_engine(build_engine(ledger=EmptyLedger()))

    response = client.post(
        "/v1/bonds/approve",
        json={"bondId": "B8", "pan": "AA1234567", "yieldPercent": 10.0, "faceValue": 50000},
    )
    assert response.status_code == 503


def test_verify_endpoint_provider_failure():
    client = client_with_engine(build_engine(scorer=BrokenScorer()))

    response = client.post("/v1/issuers/verify", json={"pan": "AA1234567"})
    assert response.status_code == 503


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/v1/bonds/approve",
        json={"bondId": "B9", "pan": "ZZ12", "yieldPercent": 10.0, "faceValue": 50000},
    )
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "bondfi_approval_total" in response.text
    assert "bondfi_rejection_reason_total" in response.text


def endpoint_labels() -> set:
    """Endpoint label values recorded by the request latency histogram"""
    return {
        sample.labels["endpoint"]
        for metric in REGISTRY.collect()
        if metric.name == "http_request_duration_seconds"
        for sample in metric.samples
        if "endpoint" in sample.labels
    }


def test_request_id_header_is_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "caller-trace-1"})
    assert response.headers["X-Request-ID"] == "caller-trace-1"


def test_unknown_paths_share_one_latency_series(client: TestClient):
    """Unmatched URLs must not create a new metric series each"""
    for i in range(50):
        assert client.get(f"/no-such-route-{i}").status_code == 404

    labels = endpoint_labels()
    assert "unmatched" in labels
    assert not any(label.startswith("/no-such-route-") for label in labels)


def test_latency_labelled_by_route_template(client: TestClient):
    client.post("/v1/issuers/verify", json={"pan": "AA1234567"})
    assert "/v1/issuers/verify" in endpoint_labels()


def test_invalid_threshold_fails_at_startup(monkeypatch):
    """A bad configured threshold stops app creation instead of failing every request"""
    monkeypatch.setattr(settings, "approval_threshold", 300)
    with pytest.raises(InvalidConfigurationError):
        create_app()
