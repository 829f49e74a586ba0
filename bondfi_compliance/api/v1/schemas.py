"""Pydantic schemas for API request/response validation and wire serialization"""

import logging
from dataclasses import asdict
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bondfi_compliance.domain.compliance import ComplianceCheck
from bondfi_compliance.domain.exceptions import SerializationError
from bondfi_compliance.domain.models import ApprovalResult, BondApprovalRequest, VerificationResult
from bondfi_compliance.infrastructure.observability.metrics import serialization_failure_counter

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Wire names are camelCase aliases; snake_case names are accepted on input too"""

    model_config = ConfigDict(populate_by_name=True)


class IssuerRequest(WireModel):
    """Request body for POST /v1/issuers/verify and /v1/issuers/compliance"""

    identifier: str = Field(..., alias="pan", description="Issuer tax identifier")


class BondApprovalRequestSchema(WireModel):
    """Request body for POST /v1/bonds/approve"""

    bond_id: str = Field(..., alias="bondId", description="Caller-supplied bond identifier")
    identifier: str = Field(..., alias="pan", description="Issuer tax identifier")
    yield_percent: float = Field(..., alias="yieldPercent")
    face_value: int = Field(..., alias="faceValue", ge=0, description="Face value in whole currency units")

    def to_domain(self) -> BondApprovalRequest:
        return BondApprovalRequest(
            bond_id=self.bond_id,
            identifier=self.identifier,
            yield_percent=self.yield_percent,
            face_value=self.face_value,
        )


class VerificationResponse(WireModel):
    """Response for POST /v1/issuers/verify"""

    score: int = Field(..., ge=0, le=100)
    deviation: float
    gst_valid: bool = Field(..., alias="gstValid")
    turnover: int = Field(..., ge=0)
    recommended: bool


class ApprovalResponse(WireModel):
    """Response for POST /v1/bonds/approve"""

    approved: bool
    tx_id: str = Field(..., alias="txId")
    oracle_score: int = Field(..., alias="oracleScore", ge=0, le=100)


class ComplianceResponse(WireModel):
    """Response for POST /v1/issuers/compliance"""

    is_compliant: bool = Field(..., alias="isCompliant")
    oracle_score: int = Field(..., alias="oracleScore", ge=0, le=100)
    deviation: float
    gst_status: Literal["valid", "invalid"] = Field(..., alias="gstStatus")
    turnover: int = Field(..., ge=0)
    recommendation: Literal["approve", "reject", "manual_review"]


_WIRE_SCHEMAS = {
    VerificationResult: VerificationResponse,
    ApprovalResult: ApprovalResponse,
    ComplianceCheck: ComplianceResponse,
}


def to_wire_strict(result: Any) -> Dict[str, Any]:
    """
    Render a domain result with its wire field names.

    Raises:
        SerializationError: unknown result type or a value the wire format rejects
    """
    schema = _WIRE_SCHEMAS.get(type(result))
    if schema is None:
        raise SerializationError(f"No wire format for {type(result).__name__}")
    try:
        return schema.model_validate(asdict(result)).model_dump(by_alias=True)
    except ValidationError as e:
        raise SerializationError(f"Cannot serialize {type(result).__name__}: {e}") from e


def to_wire(result: Any) -> Optional[Dict[str, Any]]:
    """
    Render a domain result with its wire field names, or None on failure.

    None marks a serialization fault only; it never stands for a rejection.
    """
    try:
        return to_wire_strict(result)
    except SerializationError as e:
        serialization_failure_counter.inc()
        logger.error(f"Serialization failed: {e}")
        return None
