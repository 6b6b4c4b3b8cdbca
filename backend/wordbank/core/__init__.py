# wordbank/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default admin creation on first start
- db: Database configuration and connection lifecycle
- security: Password hashing and bearer token issue/verification
"""
