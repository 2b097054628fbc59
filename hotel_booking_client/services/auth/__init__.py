"""
Authentication credential module.
"""

from .credential_guard import CredentialGuard
from .storage import (
    CREDENTIAL_KEYS,
    CredentialStorage,
    InMemoryCredentialStorage,
    SqliteCredentialStorage,
    StorageHandle,
)

__all__ = [
    "CredentialGuard",
    "CREDENTIAL_KEYS",
    "CredentialStorage",
    "InMemoryCredentialStorage",
    "SqliteCredentialStorage",
    "StorageHandle",
]
