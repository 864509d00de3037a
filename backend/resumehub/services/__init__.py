"""
Services Module

Core of the account-and-artifact service:
- ArtifactStore: validated storage of uploaded résumé documents
- AccountRepository: account records over the accounts table
- AccountService: orchestration of registration, login, profile,
  attachment lifecycle and search
"""
from .artifact_store import ArtifactStore, StoredReference
from .account_repository import AccountRepository
from .account_service import AccountService, Download

__all__ = [
    "ArtifactStore",
    "StoredReference",
    "AccountRepository",
    "AccountService",
    "Download",
]
