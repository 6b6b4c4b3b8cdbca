# wordbank/core/security.py
"""
Security module for authentication.
Handles password hashing and the lifecycle of signed bearer tokens
(issue on login, verify on every authenticated request).
"""
import os
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext
from dotenv import load_dotenv
from pathlib import Path

from wordbank.schemas.auth import CurrentUser

# Load environment variables from project root
ENV_PATH = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# Password hashing context
# Argon2 is salted and adaptive; its cost parameters live inside the stored hash
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# JWT configuration
JWT_SECRET = os.getenv("JWT_SECRET", "your-secret-key")  # Use a strong secret in production
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))  # 24 hours
JWT_ALG = "HS256"  # HMAC SHA-256


class InvalidToken(Exception):
    """Raised when a bearer token fails signature, expiry or claim checks."""


def hash_password(plain: str) -> str:
    """
    Hash a plain text password.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (salt and cost included), safe to store
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored hash.

    Returns False (instead of raising) when the stored value is not a hash
    the context recognises.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: str, username: str, role: str) -> str:
    """
    Create a signed access token for an authenticated user.

    The identity claims (userId, username, role) travel inside the token so
    that request gates can authorize without touching the database.

    Args:
        user_id: Unique user identifier (UUID string)
        username: Login name
        role: "user" or "admin"

    Returns:
        Encoded JWT string

    Token payload:
        - userId, username, role: identity
        - iat: Issued at timestamp
        - exp: iat + ACCESS_TOKEN_EXPIRE_MINUTES
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "userId": user_id,
        "username": username,
        "role": role,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a JWT access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALG],
        options={"require": ["exp", "iat"]},
    )


def verify_token(token: str) -> CurrentUser:
    """
    Verify a bearer token and return the identity it carries.

    No leeway is applied to the expiry check.

    Raises:
        InvalidToken: On a bad signature, expiry, malformed token or missing claims
    """
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as exc:
        raise InvalidToken(str(exc)) from exc

    try:
        return CurrentUser(
            userId=payload["userId"],
            username=payload["username"],
            role=payload["role"],
        )
    except (KeyError, ValueError) as exc:
        raise InvalidToken("token is missing identity claims") from exc
