from .enums import TokenType, VerificationFailureReason

__all__ = [
    "TokenType",
    "VerificationFailureReason",
]
