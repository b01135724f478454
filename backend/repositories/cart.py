# backend/repositories/cart.py
import copy
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from exceptions import CartNotFoundException
from models.cart import Cart
from repositories.base import JsonFileRepository
from schemas.cart import CartResponse


class CartRepository(ABC):
    """Storage contract for shopping carts."""

    @abstractmethod
    def get_all(self) -> List[Cart]:
        pass

    @abstractmethod
    def get(self, id: int) -> Optional[Cart]:
        pass

    @abstractmethod
    def find_cart(self, username: str) -> Optional[Cart]:
        """First cart owned by exactly `username`."""
        pass

    @abstractmethod
    def find_carts(self, username: str) -> List[Cart]:
        pass

    @abstractmethod
    def create(self, username: str, contents: Optional[Dict[int, int]] = None) -> Optional[Cart]:
        """New cart, or None when the username already owns one (case-insensitive)."""
        pass

    @abstractmethod
    def update(self, cart: Cart) -> Optional[Cart]:
        pass

    @abstractmethod
    def edit(self, username: str, change: Callable[[Cart], bool]) -> Optional[Cart]:
        """
        Apply `change` to the cart of `username` and save it, as one step.

        `change` gets a working copy and returns whether it changed anything; on
        False, or if it raises, the stored cart is left as it was and False gives
        None. Raises CartNotFoundException when the user has no cart.
        """
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        pass


class CartFileRepository(JsonFileRepository[Cart], CartRepository):
    record_schema = CartResponse

    def _build(self, record: CartResponse) -> Cart:
        return Cart(record.id, record.username, record.contents)

    def find_carts(self, username: str) -> List[Cart]:
        with self._lock:
            return self._select(lambda cart: cart.username == username)

    def find_cart(self, username: str) -> Optional[Cart]:
        carts = self.find_carts(username)
        return carts[0] if carts else None

    def create(self, username: str, contents: Optional[Dict[int, int]] = None) -> Optional[Cart]:
        with self._lock:
            wanted = username.lower()
            if any((cart.username or "").lower() == wanted for cart in self._items.values()):
                return None
            return self._insert(lambda new_id: Cart(new_id, username, contents))

    def edit(self, username: str, change: Callable[[Cart], bool]) -> Optional[Cart]:
        with self._lock:
            stored = next((cart for cart in self._values() if cart.username == username), None)
            if stored is None:
                raise CartNotFoundException(username)

            working = copy.deepcopy(stored)
            if not change(working):
                return None
            self._items[working.id] = working
            self.save()
            return copy.deepcopy(working)
