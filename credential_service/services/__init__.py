from .auth import AuthService, UserStore

__all__ = [
    "AuthService",
    "UserStore",
]
