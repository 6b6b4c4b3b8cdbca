# wordbank/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and the
identity attached to authenticated requests.
"""
from typing import Literal

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """
    Request model for user registration.
    Role defaults to a regular user.
    """
    username: str = Field(min_length=1, max_length=256)  # Must be unique
    password: str = Field(min_length=1)  # Plain text, hashed server-side
    role: Literal["admin", "user"] = "user"


class RegisterResponse(BaseModel):
    message: str
    id: str  # New user's identifier


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Bearer token returned after a successful login."""
    token: str


class CurrentUser(BaseModel):
    """
    Identity decoded from a verified bearer token.
    Attached to the request by the authentication dependency.
    """
    userId: str
    username: str
    role: Literal["admin", "user"]
