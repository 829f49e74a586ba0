"""Issuer scoring rules - core business logic for compliance decisions"""

from bondfi_compliance.domain.models import VerificationResult

# Score tiers
HIGH_SCORE = 98
MEDIUM_SCORE = 75
LOW_SCORE = 45

MIN_REGISTERED_LENGTH = 8  # identifiers must be strictly longer
PREFERRED_PREFIX = "AA"

# Turnover tiers, whole currency units
HIGH_TURNOVER = 500_000_000  # 500 Cr
BASE_TURNOVER = 100_000_000  # 100 Cr
HIGH_TURNOVER_MIN_SCORE = 90  # score must be strictly above

# Bond terms
MIN_YIELD_PERCENT = 5.0
MAX_YIELD_PERCENT = 15.0
MIN_FACE_VALUE = 10_000
MAX_FACE_VALUE = 100_000_000


def is_registered(identifier: str) -> bool:
    """Tax registration proxy: identifier longer than 8 characters"""
    return len(identifier) > MIN_REGISTERED_LENGTH


def score_identifier(identifier: str) -> int:
    """
    Score an issuer from its tax identifier.

    Three tiers, determined by length and prefix only:
    - registered and starts with "AA": 98
    - registered: 75
    - anything else (including empty): 45

    Total over all strings; never raises.
    """
    if is_registered(identifier) and identifier.startswith(PREFERRED_PREFIX):
        return HIGH_SCORE
    elif is_registered(identifier):
        return MEDIUM_SCORE
    else:
        return LOW_SCORE


def score_tier(score: int) -> str:
    """Label a score for metrics and logs"""
    if score > HIGH_TURNOVER_MIN_SCORE:
        return "high"
    elif score >= MEDIUM_SCORE:
        return "medium"
    return "low"


def deviation_for_score(score: int) -> float:
    return (100.0 - score) / 100.0


def turnover_for_score(score: int) -> int:
    """Two fixed tiers, no interpolation"""
    return HIGH_TURNOVER if score > HIGH_TURNOVER_MIN_SCORE else BASE_TURNOVER


def is_yield_valid(yield_percent: float) -> bool:
    return MIN_YIELD_PERCENT <= yield_percent <= MAX_YIELD_PERCENT


def is_face_value_valid(face_value: int) -> bool:
    return MIN_FACE_VALUE <= face_value <= MAX_FACE_VALUE


def build_verification(identifier: str, score: int, approval_threshold: int) -> VerificationResult:
    """Derive the full verification result from an already computed score"""
    return VerificationResult(
        score=score,
        deviation=deviation_for_score(score),
        gst_valid=is_registered(identifier),
        turnover=turnover_for_score(score),
        recommended=score >= approval_threshold,
    )
