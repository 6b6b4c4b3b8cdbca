# wordbank/api/v1/deps.py
from fastapi import Depends, Header, HTTPException, Request, status
from wordbank.core.db import Database
from wordbank.core.security import InvalidToken, verify_token
from wordbank.schemas.auth import CurrentUser
from wordbank.services.word_store import WordSetRepository


def get_database(request: Request) -> Database:
    """Return the Database opened at startup (stored on app.state)."""
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_open:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="DATABASE_UNAVAILABLE")
    return database


def get_word_repository(database: Database = Depends(get_database)) -> WordSetRepository:
    return WordSetRepository(database)


async def get_current_user(
    authorization: str | None = Header(default=None),
) -> CurrentUser:
    """
    FastAPI dependency returning the identity carried by the bearer token.

    Expects `Authorization: Bearer <token>`. The identity comes from the
    verified token itself; the database is not consulted.

    Raises:
        HTTPException (401): If no bearer token is provided (AUTH_REQUIRED)
        HTTPException (403): If the token is invalid or expired (AUTH_INVALID_TOKEN)

    Usage:
        @router.get("/protected")
        async def protected_route(user: CurrentUser = Depends(get_current_user)):
            return {"user_id": user.userId}
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="AUTH_REQUIRED",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verify_token(token)
    except InvalidToken:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="AUTH_INVALID_TOKEN")


async def require_admin(current: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """
    FastAPI dependency to ensure the current user is an administrator.

    Builds on `get_current_user`; use it for admin-only endpoints.

    Raises:
        HTTPException (403): If user is not an admin (FORBIDDEN_ADMIN_ONLY)
        HTTPException (401/403): From get_current_user
    """
    if current.role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_ADMIN_ONLY")
    return current
