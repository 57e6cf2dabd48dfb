from typing import Any
from pydantic import ConfigDict
from credential_service.models.enums import TokenType, VerificationFailureReason
from .base import BaseSchema

class JwtPayload(BaseSchema):
    """Claims carried by both access and refresh tokens, tagged by type"""
    model_config = ConfigDict(frozen=True)

    email_address: str
    name: str
    type: TokenType

    def claims(self) -> dict[str, Any]:
        """Wire form of the payload, ready for signing."""
        return self.model_dump(by_alias=True, mode="json")

class VerificationFailure(BaseSchema):
    """Why a presented token could not be verified.

    Returned by the signing provider instead of raising, so callers decide
    what (if anything) to expose.
    """
    model_config = ConfigDict(frozen=True)

    reason: VerificationFailureReason
    detail: str

class UserTokens(BaseSchema):
    access_token: str
    refresh_token: str

class AccessToken(BaseSchema):
    access_token: str

class RefreshCredentials(BaseSchema):
    refresh_token: str
