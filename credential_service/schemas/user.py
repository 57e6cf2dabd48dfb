from pydantic import EmailStr, Field
from .base import BaseSchema

class SignupRequest(BaseSchema):
    """Schema for user registration"""
    email_address: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=8)

class UserIdentity(BaseSchema):
    """Schema for the identity a user store hands back after signup"""
    email_address: str
    name: str
