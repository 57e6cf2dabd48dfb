from datetime import timedelta
from typing import Protocol

from credential_service.core.exceptions import AuthenticationError, InvalidRefreshTokenError
from credential_service.core.logging import auth_logger
from credential_service.core.security import JwtService
from credential_service.models.enums import TokenType, VerificationFailureReason
from credential_service.schemas.token import (
    AccessToken,
    JwtPayload,
    RefreshCredentials,
    UserTokens,
    VerificationFailure,
)
from credential_service.schemas.user import SignupRequest, UserIdentity

# Refresh tokens always live a year; not configurable from the environment
REFRESH_TOKEN_EXPIRES_IN = timedelta(days=365)

class UserStore(Protocol):
    """Anything that can register a user and return its identity."""

    async def signup(self, signup_request: SignupRequest) -> UserIdentity:
        ...

class AuthService:
    """Issues access/refresh token pairs and trades refresh tokens for access tokens"""

    def __init__(
        self,
        jwt_service: JwtService,
        user_store: UserStore,
        refresh_expires_in: timedelta = REFRESH_TOKEN_EXPIRES_IN,
    ) -> None:
        self.jwt_service = jwt_service
        self.user_store = user_store
        self.refresh_expires_in = refresh_expires_in

    async def signup(self, signup_request: SignupRequest) -> UserTokens:
        """Register a user and return a fresh token pair.

        Errors from the user store are not caught.
        """
        user = await self.user_store.signup(signup_request)

        access_token_payload = JwtPayload(
            email_address=user.email_address,
            name=user.name,
            type=TokenType.ACCESS,
        )
        refresh_token_payload = access_token_payload.model_copy(update={"type": TokenType.REFRESH})

        access_token = await self.jwt_service.sign(access_token_payload)
        refresh_token = await self.jwt_service.sign(
            refresh_token_payload,
            expires_in=self.refresh_expires_in,
        )
        return UserTokens(access_token=access_token, refresh_token=refresh_token)

    async def refresh_credentials(self, refresh_credentials: RefreshCredentials) -> AccessToken:
        """Exchange a refresh token for a new access token.

        Identity fields are copied from the refresh token, not looked up again,
        so they stay as they were when the refresh token was issued.
        """
        result = await self.jwt_service.verify(refresh_credentials.refresh_token)

        if isinstance(result, VerificationFailure):
            auth_logger.info(
                f"Attempt to use invalid JWT for refresh - {result.detail}",
                extra={"reason": result.reason.value},
            )
            raise InvalidRefreshTokenError()

        if result.type != TokenType.REFRESH:
            auth_logger.info(
                "Attempt to use access token as refresh token.",
                extra={"reason": VerificationFailureReason.WRONG_TOKEN_TYPE.value, "token_type": result.type.value},
            )
            raise InvalidRefreshTokenError()

        access_token_payload = JwtPayload(
            email_address=result.email_address,
            name=result.name,
            type=TokenType.ACCESS,
        )
        access_token = await self.jwt_service.sign(access_token_payload)
        return AccessToken(access_token=access_token)

    async def authenticate(self, access_token: str) -> JwtPayload:
        """Return the claims of a valid access token; refresh tokens are rejected"""
        result = await self.jwt_service.verify(access_token)

        if isinstance(result, VerificationFailure):
            auth_logger.info(
                f"Attempt to authenticate with invalid JWT - {result.detail}",
                extra={"reason": result.reason.value},
            )
            raise AuthenticationError()

        if result.type != TokenType.ACCESS:
            auth_logger.info(
                "Attempt to use refresh token as access token.",
                extra={"reason": VerificationFailureReason.WRONG_TOKEN_TYPE.value, "token_type": result.type.value},
            )
            raise AuthenticationError()

        return result
