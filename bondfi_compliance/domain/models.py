"""Domain models - immutable dataclasses representing compliance results"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationResult:
    """Issuer verification outcome"""

    score: int  # 0-100 compliance score
    deviation: float  # fraction short of a perfect score
    gst_valid: bool
    turnover: int  # whole currency units
    recommended: bool


@dataclass(frozen=True)
class BondApprovalRequest:
    """Proposed bond submitted for approval"""

    bond_id: str
    identifier: str  # issuer tax id
    yield_percent: float
    face_value: int


@dataclass(frozen=True)
class ApprovalResult:
    """Output of bond approval"""

    approved: bool
    tx_id: str  # empty string when no transaction was made
    oracle_score: int

    @property
    def has_transaction(self) -> bool:
        return self.tx_id != ""
