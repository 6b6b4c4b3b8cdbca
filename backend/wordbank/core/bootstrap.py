# wordbank/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates a default admin account on first startup so that the admin-only
word endpoints are reachable without editing the database by hand.
"""
import logging
from fastapi.concurrency import run_in_threadpool
from wordbank.models.user import User
from wordbank.core.security import hash_password

logger = logging.getLogger("uvicorn.error")

async def ensure_default_admin(username: str, password: str | None) -> User | None:
    """
    If no admin exists in the database, create one.
    Only takes effect under the following conditions:
      - Currently no user with role="admin"
      - And a password is configured (ADMIN_PASSWORD), to avoid a default weak password

    Returns the created admin, or None when nothing was created.
    """
    if await User.filter(role="admin").exists():
        return None

    if not password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return None

    # If the name is already taken by a regular account, pick a non-conflicting one
    base_username = username
    suffix = 1
    while await User.filter(username=username).exists():
        suffix += 1
        username = f"{base_username}{suffix}"

    u = await User.create(
        username=username,
        password_hash=await run_in_threadpool(hash_password, password),
        role="admin",
    )
    logger.warning("[bootstrap] Created default admin -> username=%s id=%s", u.username, u.id)
    return u
