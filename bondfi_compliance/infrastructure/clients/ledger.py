"""Ledger stand-in issuing transaction references for approved bonds"""

from typing import Callable, Optional

from bondfi_compliance.config import settings
from bondfi_compliance.domain.models import BondApprovalRequest


class PlaceholderLedger:
    """
    Local replacement for ledger submission.

    References look like "weil-tx-{bond_id}-{timestamp}". The timestamp comes
    from `clock`, which defaults to the fixed placeholder value from settings
    so references are reproducible.
    """

    def __init__(
        self,
        tx_prefix: str | None = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.tx_prefix = settings.ledger_tx_prefix if tx_prefix is None else tx_prefix
        self.clock = clock or self._placeholder_clock

    @staticmethod
    def _placeholder_clock() -> int:
        return settings.ledger_placeholder_timestamp

    def submit(self, request: BondApprovalRequest) -> str:
        return f"{self.tx_prefix}-{request.bond_id}-{self.clock()}"
