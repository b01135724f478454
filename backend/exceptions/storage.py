"""
Persistence exceptions.
"""

from .base import DiscStoreException


class StorageException(DiscStoreException):
    """Raised when a data file cannot be read or written."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            f"Storage failure on {filename}: {reason}",
            details={'filename': filename, 'reason': reason}
        )
        self.filename = filename
        self.reason = reason
