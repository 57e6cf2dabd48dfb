from .token import (
    JwtPayload,
    VerificationFailure,
    UserTokens,
    AccessToken,
    RefreshCredentials,
)
from .user import (
    SignupRequest,
    UserIdentity,
)

__all__ = [
    "JwtPayload",
    "VerificationFailure",
    "UserTokens",
    "AccessToken",
    "RefreshCredentials",
    "SignupRequest",
    "UserIdentity",
]
