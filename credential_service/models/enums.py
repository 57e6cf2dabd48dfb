from enum import Enum

class TokenType(str, Enum):
    """Enum for the purpose a signed token was issued for"""
    ACCESS = "access"
    REFRESH = "refresh"

class VerificationFailureReason(str, Enum):
    """Enum for the reasons a presented token is rejected."""
    EXPIRED = "expired"
    INVALID_CLAIMS = "invalid_claims"
    INVALID_TOKEN = "invalid_token"
    WRONG_TOKEN_TYPE = "wrong_token_type"
