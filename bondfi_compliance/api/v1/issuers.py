"""POST /v1/issuers/* - issuer verification endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from bondfi_compliance.api.v1.schemas import IssuerRequest, VerificationResponse, ComplianceResponse, to_wire
from bondfi_compliance.api.dependencies import get_engine, get_request_id
from bondfi_compliance.domain.engine import ComplianceEngine
from bondfi_compliance.domain.exceptions import IdentityProviderError
from bondfi_compliance.infrastructure.observability.metrics import record_verification
from bondfi_compliance.infrastructure.observability.logging import log_verification

router = APIRouter()


@router.post("/issuers/verify", response_model=VerificationResponse)
def verify_issuer(
    request_body: IssuerRequest,
    request: Request,
    engine: ComplianceEngine = Depends(get_engine),
):
    """
    Score an issuer from its tax identifier.

    Any identifier is accepted; short or unregistered ones simply score low.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = engine.verify_issuer(request_body.identifier)
    except IdentityProviderError as e:
        logging.error(f"Identity provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Identity provider unavailable")

    payload = to_wire(result)
    if payload is None:
        raise HTTPException(status_code=500, detail="Could not serialize verification result")

    duration_ms = (time.time() - start_time) * 1000
    record_verification(result)
    log_verification(request_id, request_body.identifier, result, duration_ms)

    return payload


@router.post("/issuers/compliance", response_model=ComplianceResponse)
def check_compliance(
    request_body: IssuerRequest,
    request: Request,
    engine: ComplianceEngine = Depends(get_engine),
):
    """Verify an issuer and return an approve/reject/manual_review recommendation"""
    request_id = get_request_id(request)

    try:
        check = engine.check_compliance(request_body.identifier)
    except IdentityProviderError as e:
        logging.error(f"Identity provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Identity provider unavailable")

    payload = to_wire(check)
    if payload is None:
        raise HTTPException(status_code=500, detail="Could not serialize compliance check")

    return payload
