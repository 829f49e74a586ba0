"""Compliance engine - issuer verification and bond approval"""

import logging
from typing import Tuple

from bondfi_compliance.domain.compliance import (
    ApprovalChecks,
    ComplianceCheck,
    assess_verification,
    evaluate_checks,
)
from bondfi_compliance.domain.exceptions import (
    IdentityProviderError,
    InvalidConfigurationError,
    LedgerSubmissionError,
)
from bondfi_compliance.domain.interfaces import ClockOrLedger, IdentityScorer
from bondfi_compliance.domain.models import ApprovalResult, BondApprovalRequest, VerificationResult
from bondfi_compliance.domain.scoring import build_verification

logger = logging.getLogger(__name__)

DEFAULT_APPROVAL_THRESHOLD = 97
MAX_THRESHOLD = 255


class ComplianceEngine:
    """
    Rule-based compliance scorer for bond issuance.

    Holds one setting, the approval threshold, fixed at construction. The
    identity scorer and ledger are injected; with deterministic collaborators
    every operation is a pure function of its arguments and the threshold.
    """

    def __init__(
        self,
        scorer: IdentityScorer,
        ledger: ClockOrLedger,
        approval_threshold: int = DEFAULT_APPROVAL_THRESHOLD,
    ):
        if not 0 <= approval_threshold <= MAX_THRESHOLD:
            raise InvalidConfigurationError(
                f"approval_threshold must be between 0 and {MAX_THRESHOLD}, got {approval_threshold}"
            )
        self._approval_threshold = approval_threshold
        self._scorer = scorer
        self._ledger = ledger

    @property
    def approval_threshold(self) -> int:
        return self._approval_threshold

    def _score(self, identifier: str) -> int:
        """Shared by every operation so verification and approval never disagree"""
        score = self._scorer.score(identifier)
        if not 0 <= score <= 100:
            raise IdentityProviderError(f"Identity provider returned out-of-range score {score}")
        return score

    def verify_issuer(self, identifier: str) -> VerificationResult:
        """
        Verify an issuer from its tax identifier.

        Accepts any string, including empty; there is no validation failure.
        """
        score = self._score(identifier)
        result = build_verification(identifier, score, self._approval_threshold)
        logger.debug("Issuer verified", extra={"score": score, "recommended": result.recommended})
        return result

    def check_compliance(self, identifier: str) -> ComplianceCheck:
        """Verify an issuer and map the outcome to approve/reject/manual_review"""
        return assess_verification(self.verify_issuer(identifier), self._approval_threshold)

    def approve_with_checks(self, request: BondApprovalRequest) -> Tuple[ApprovalResult, ApprovalChecks]:
        """
        Evaluate a bond and return the result with the individual rule outcomes.

        A transaction reference is requested from the ledger only when every
        check passes; otherwise tx_id is "".

        Raises:
            LedgerSubmissionError: ledger returned an empty reference for an approved bond
        """
        score = self._score(request.identifier)
        checks = evaluate_checks(request.yield_percent, request.face_value, score, self._approval_threshold)

        tx_id = ""
        if checks.approved:
            tx_id = self._ledger.submit(request)
            if not tx_id:
                raise LedgerSubmissionError(f"Ledger returned no transaction reference for bond {request.bond_id}")

        logger.debug(
            "Bond evaluated",
            extra={"bond_id": request.bond_id, "approved": checks.approved, "failed": checks.failed_reasons},
        )
        return ApprovalResult(approved=checks.approved, tx_id=tx_id, oracle_score=score), checks

    def approve(self, request: BondApprovalRequest) -> ApprovalResult:
        result, _ = self.approve_with_checks(request)
        return result

    def approve_bond(
        self,
        bond_id: str,
        identifier: str,
        yield_percent: float,
        face_value: int,
    ) -> ApprovalResult:
        """Approve a bond given its terms; see approve_with_checks for the rules"""
        return self.approve(
            BondApprovalRequest(
                bond_id=bond_id,
                identifier=identifier,
                yield_percent=yield_percent,
                face_value=face_value,
            )
        )
