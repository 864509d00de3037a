# resumehub/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- Account: account credentials, profile and résumé pointer
"""
from .account import Account
