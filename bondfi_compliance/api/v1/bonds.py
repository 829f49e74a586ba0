"""POST /v1/bonds/approve - bond approval endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from bondfi_compliance.api.v1.schemas import BondApprovalRequestSchema, ApprovalResponse, to_wire
from bondfi_compliance.api.dependencies import get_engine, get_request_id
from bondfi_compliance.domain.engine import ComplianceEngine
from bondfi_compliance.domain.exceptions import IdentityProviderError, LedgerSubmissionError
from bondfi_compliance.infrastructure.observability.metrics import record_approval
from bondfi_compliance.infrastructure.observability.logging import log_approval

router = APIRouter()


@router.post("/bonds/approve", response_model=ApprovalResponse)
def approve_bond(
    request_body: BondApprovalRequestSchema,
    request: Request,
    engine: ComplianceEngine = Depends(get_engine),
):
    """
    Approve or reject a proposed bond.

    Flow:
    1. Score the issuer
    2. Check yield, face value and score against the rules
    3. Obtain a transaction reference if every check passes
    4. Return the decision

    A failed check is a 200 with approved=false, never an error status.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result, checks = engine.approve_with_checks(request_body.to_domain())
    except IdentityProviderError as e:
        logging.error(f"Identity provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Identity provider unavailable")
    except LedgerSubmissionError as e:
        logging.error(f"Ledger error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger unavailable")

    payload = to_wire(result)
    if payload is None:
        raise HTTPException(status_code=500, detail="Could not serialize approval result")

    duration_ms = (time.time() - start_time) * 1000
    record_approval(result, checks)
    log_approval(request_id, request_body.bond_id, result, checks, duration_ms)

    return payload
