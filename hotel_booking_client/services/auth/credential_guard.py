"""
Structural check and cleanup of persisted authentication credentials.
"""

from typing import Iterable, List, Optional, Tuple

from ...config import Settings, get_settings
from ...core.enums import TokenStatus
from ...core.exceptions import CredentialStorageError
from ...utils.logging import configure_logging, get_logger
from .storage import (
    ACCESS_TOKEN_KEY,
    CREDENTIAL_KEYS,
    CredentialStorage,
    StorageHandle,
)

logger = get_logger("hotel.auth")

TOKEN_SEGMENTS = 3


class CredentialGuard:
    """Decide whether a cached access token can be trusted, purging it if not.

    Only the token's shape is checked: a JWT-style ``header.payload.signature``
    with three non-empty segments. Signatures are not verified. A missing
    token and a malformed one both mean "not logged in".
    """

    def __init__(
        self,
        keys: Iterable[str] = CREDENTIAL_KEYS,
        *,
        settings: Optional[Settings] = None,
    ) -> None:
        configure_logging((settings or get_settings()).log_level)
        self.keys: Tuple[str, ...] = tuple(keys)

    @staticmethod
    def check(token: Optional[str]) -> TokenStatus:
        if not token:
            return TokenStatus.ABSENT

        parts = token.split(".")
        if len(parts) != TOKEN_SEGMENTS or not all(parts):
            return TokenStatus.INVALID

        return TokenStatus.VALID

    def enforce(self, storage: CredentialStorage) -> bool:
        """
        Check the stored access token and purge credentials if it is malformed.

        An unreadable or unopenable store is treated like a missing token.

        Args:
            storage: Backend holding the credentials

        Returns:
            True only when a structurally valid token is stored
        """
        try:
            with storage.open() as handle:
                token = handle.get_item(ACCESS_TOKEN_KEY)
                status = self.check(token)
                if status is TokenStatus.INVALID:
                    logger.warning("guard: stored access token is malformed, clearing credentials")
                    self._remove_keys(handle)
                    return False
        except CredentialStorageError as e:
            logger.error(f"guard: cannot read access token: {e}")
            return False

        return status is TokenStatus.VALID

    def purge(self, storage: CredentialStorage) -> List[str]:
        """Remove all credential keys (logout). Return the keys that could not be removed."""
        try:
            with storage.open() as handle:
                return self._remove_keys(handle)
        except CredentialStorageError as e:
            logger.error(f"guard: cannot open credential storage: {e}")
            return list(self.keys)

    def _remove_keys(self, handle: StorageHandle) -> List[str]:
        failed = []
        for key in self.keys:
            try:
                handle.remove_item(key)
            except CredentialStorageError as e:
                logger.error(f"guard: failed to remove '{key}': {e}")
                failed.append(key)

        if failed:
            logger.warning(f"guard: credentials partially cleared, remaining: {', '.join(failed)}")
        else:
            logger.info("guard: credentials cleared")
        return failed
