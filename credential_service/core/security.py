from datetime import datetime, timedelta, UTC
from functools import lru_cache
from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWTClaimsError
from pydantic import ValidationError

from credential_service.core.config import settings
from credential_service.core.logging import jwt_logger
from credential_service.models.enums import VerificationFailureReason
from credential_service.schemas.token import JwtPayload, VerificationFailure

class JwtService:
    """Signs token payloads and verifies presented tokens.

    Holds the signing key, the algorithm and the default expiry applied when
    a caller does not pass one. Instances keep no per-request state, so one
    can be shared across concurrent requests.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(minutes=30),
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in

    async def sign(self, payload: JwtPayload, expires_in: timedelta | None = None) -> str:
        """Sign a payload, stamping iat and exp"""
        issued_at = datetime.now(UTC)
        to_encode = payload.claims()
        to_encode.update({
            "iat": issued_at,
            "exp": issued_at + (self.expires_in if expires_in is None else expires_in),
        })
        token = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        jwt_logger.debug("Token signed", extra={"token_type": payload.type.value})
        return token

    async def verify(self, token: str) -> JwtPayload | VerificationFailure:
        """Verify signature and expiry, then decode the claims.

        Never raises for a bad token; the outcome is returned as a
        VerificationFailure carrying the reason.
        """
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            return VerificationFailure(reason=VerificationFailureReason.EXPIRED, detail=str(e))
        except JWTClaimsError as e:
            return VerificationFailure(reason=VerificationFailureReason.INVALID_CLAIMS, detail=str(e))
        except JWTError as e:
            return VerificationFailure(reason=VerificationFailureReason.INVALID_TOKEN, detail=str(e))

        try:
            return JwtPayload.model_validate(claims)
        except ValidationError as e:
            return VerificationFailure(
                reason=VerificationFailureReason.INVALID_CLAIMS,
                detail=f"Unexpected token payload: {e.error_count()} invalid field(s)",
            )

@lru_cache
def get_jwt_service() -> JwtService:
    """JwtService configured from the process-wide settings"""
    return JwtService(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
