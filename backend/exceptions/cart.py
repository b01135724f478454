"""
Cart-related exceptions.
"""

from .base import DiscStoreException


class CartException(DiscStoreException):
    """Base exception for cart-related errors."""
    pass


class CartNotFoundException(CartException):
    """Raised when no cart (or an empty one) exists for a username."""

    def __init__(self, username: str):
        super().__init__(
            f"Cart not found for user {username}",
            details={'username': username}
        )
        self.username = username


class DiscNotInCartException(CartException):
    """Raised when a single-disc operation targets a disc the cart does not hold."""

    def __init__(self, username: str, disc_id: int):
        super().__init__(
            f"Disc {disc_id} is not in the cart of {username}",
            details={'username': username, 'disc_id': disc_id}
        )
        self.username = username
        self.disc_id = disc_id


class DiscUnavailableException(CartException):
    """Raised when a disc is no longer in inventory."""

    def __init__(self, disc_id: int):
        super().__init__(
            f"Disc {disc_id} is not in inventory",
            details={'disc_id': disc_id}
        )
        self.disc_id = disc_id


class NothingPurchasableException(CartException):
    """Raised when none of the discs in a cart can be purchased."""

    def __init__(self, username: str, disc_ids: list[int]):
        super().__init__(
            f"No disc in the cart of {username} is available",
            details={'username': username, 'disc_ids': disc_ids}
        )
        self.username = username
        self.disc_ids = disc_ids
