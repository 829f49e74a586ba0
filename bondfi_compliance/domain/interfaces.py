"""
Interfaces (protocols) for the engine's external collaborators.
Using Python's Protocol for structural subtyping.
"""

from typing import Protocol
from abc import abstractmethod

from bondfi_compliance.domain.models import BondApprovalRequest


class IdentityScorer(Protocol):
    """Interface for identity/tax verification providers"""

    @abstractmethod
    def score(self, identifier: str) -> int:
        """Return a 0-100 compliance score for the identifier"""
        ...


class ClockOrLedger(Protocol):
    """Interface for transaction reference issuers"""

    @abstractmethod
    def submit(self, request: BondApprovalRequest) -> str:
        """Record an approved bond and return its transaction reference"""
        ...
