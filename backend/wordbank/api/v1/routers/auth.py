# wordbank/api/v1/routers/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from tortoise.exceptions import IntegrityError

from wordbank.api.v1.deps import get_current_user, get_database
from wordbank.core.security import verify_password, create_access_token, hash_password
from wordbank.models.user import User
from wordbank.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger("uvicorn.error")

# Routes depend on get_database so that they answer 503 instead of failing when the DB is not open
router = APIRouter(tags=["auth"], dependencies=[Depends(get_database)])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
async def register(body: RegisterRequest):
    """
    Register a new user account.

    The password is hashed before storage. Usernames are unique.

    Args:
        body: Request body containing:
            - username: str (must be unique)
            - password: str (will be hashed before storage)
            - role: "user" (default) or "admin"

    Returns:
        RegisterResponse: message and the new user's id

    Raises:
        HTTPException (400): USERNAME_EXISTS if the username is taken
    """
    if await User.filter(username=body.username).exists():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="USERNAME_EXISTS")

    password_hash = await run_in_threadpool(hash_password, body.password)
    try:
        u = await User.create(username=body.username, password_hash=password_hash, role=body.role)
    except IntegrityError:
        # Lost a race against a concurrent registration of the same name
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="USERNAME_EXISTS")

    logger.info("[auth] registered username=%s role=%s", u.username, u.role)
    return RegisterResponse(message="User created successfully", id=str(u.id))


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest):
    """
    Authenticate a user and issue a bearer token.

    Include the token in later requests as `Authorization: Bearer <token>`.
    The token is valid for 24 hours and cannot be revoked earlier.

    Raises:
        HTTPException (401): AUTH_INVALID_CREDENTIALS on unknown user or wrong password
    """
    user = await User.get_or_none(username=payload.username)
    if not user or not await run_in_threadpool(verify_password, payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_CREDENTIALS")
    token = create_access_token(str(user.id), user.username, user.role)
    return LoginResponse(token=token)


@router.get("/me", response_model=CurrentUser)
async def me(user: CurrentUser = Depends(get_current_user)):
    """Return the identity carried by the caller's token."""
    return user
