from fastapi import HTTPException, status

INVALID_REFRESH_TOKEN_MESSAGE = "Invalid refresh token provided."

class AuthenticationError(HTTPException):
    """Exception raised when authentication fails."""
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class InvalidRefreshTokenError(AuthenticationError):
    """Raised for any rejected refresh token.

    The detail is the same whatever check failed; the cause is only logged.
    """
    def __init__(self):
        super().__init__(detail=INVALID_REFRESH_TOKEN_MESSAGE)
