# wordbank/models/user.py
"""
Database model for users.
Holds authentication credentials and the role used for authorization.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Created at registration (or by the default-admin bootstrap) and never
    modified or deleted by any exposed endpoint.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Username must be unique across all users
    - Role determines access level (user vs admin)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Hashed password, never plain text
    role = fields.CharField(max_length=16, default="user")  # "user" (default) or "admin"
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
