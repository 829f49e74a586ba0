"""Identity/tax verification provider stand-in"""

from bondfi_compliance.domain.scoring import score_identifier


class MockIdentityScorer:
    """
    Deterministic local replacement for the tax verification API.

    Scores come straight from the tiered identifier rule, so the same
    identifier always yields the same score. A real provider client should
    raise IdentityProviderError on timeouts or malformed responses.
    """

    def score(self, identifier: str) -> int:
        return score_identifier(identifier)
