"""
Credential storage exceptions.
"""


class CredentialStorageError(Exception):
    """Exception raised when persisted credentials cannot be read or written."""
    pass
