"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidConfigurationError(DomainException):
    """Engine configuration is outside its allowed range"""

    pass


class IdentityProviderError(DomainException):
    """Identity/tax verification provider failed or returned an unusable score"""

    pass


class LedgerSubmissionError(DomainException):
    """Ledger did not return a usable transaction reference"""

    pass


class SerializationError(DomainException):
    """Result could not be rendered to its wire form"""

    pass
