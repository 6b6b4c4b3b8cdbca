# wordbank/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: User account and authentication model
- WordCollection: One word-set document per category
"""
from .user import User
from .word_collection import WordCollection
