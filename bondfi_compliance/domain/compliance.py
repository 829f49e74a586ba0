"""Approval checks and issuer compliance assessment"""

from dataclasses import dataclass
from typing import List

from bondfi_compliance.domain.models import VerificationResult
from bondfi_compliance.domain.scoring import is_yield_valid, is_face_value_valid

REJECT_BELOW_SCORE = 50


@dataclass(frozen=True)
class ApprovalChecks:
    """Outcome of each business rule applied to a bond"""

    yield_valid: bool
    face_value_valid: bool
    score_valid: bool

    @property
    def approved(self) -> bool:
        return self.yield_valid and self.face_value_valid and self.score_valid

    @property
    def failed_reasons(self) -> List[str]:
        reasons = []
        if not self.yield_valid:
            reasons.append("yield")
        if not self.face_value_valid:
            reasons.append("face_value")
        if not self.score_valid:
            reasons.append("score")
        return reasons


@dataclass(frozen=True)
class ComplianceCheck:
    """Issuer verification mapped to a reviewer-facing recommendation"""

    is_compliant: bool
    oracle_score: int
    deviation: float
    gst_status: str  # "valid" or "invalid"
    turnover: int
    recommendation: str  # "approve" | "reject" | "manual_review"


def evaluate_checks(
    yield_percent: float,
    face_value: int,
    score: int,
    approval_threshold: int,
) -> ApprovalChecks:
    """
    Apply the bond approval rules.

    - yield: 5.0 <= yield_percent <= 15.0
    - face value: 10,000 <= face_value <= 100,000,000
    - score: score >= approval_threshold

    Out-of-range inputs simply fail their check.
    """
    return ApprovalChecks(
        yield_valid=is_yield_valid(yield_percent),
        face_value_valid=is_face_value_valid(face_value),
        score_valid=score >= approval_threshold,
    )


def recommend(verification: VerificationResult, approval_threshold: int) -> str:
    """
    Recommendation bands:
    - approve: recommended and at or above the threshold
    - reject: score below 50
    - manual_review: everything in between
    """
    if verification.recommended and verification.score >= approval_threshold:
        return "approve"
    elif verification.score < REJECT_BELOW_SCORE:
        return "reject"
    else:
        return "manual_review"


def assess_verification(verification: VerificationResult, approval_threshold: int) -> ComplianceCheck:
    return ComplianceCheck(
        is_compliant=verification.recommended,
        oracle_score=verification.score,
        deviation=verification.deviation,
        gst_status="valid" if verification.gst_valid else "invalid",
        turnover=verification.turnover,
        recommendation=recommend(verification, approval_threshold),
    )
