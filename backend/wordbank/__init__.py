"""
Word Bank API.
Category-addressed word collections behind JWT authentication.
"""
__version__ = "0.1.0"
