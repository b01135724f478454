# backend/models/cart.py
from enum import IntEnum
from typing import Dict, Optional


# How update_disc_quantity combines the amount with the stored quantity
class QuantityMode(IntEnum):
    SET = 0
    ADD = 1
    SUBTRACT = 2


# Represents a user's shopping cart: {disc_id: quantity} pairs owned by a username.
# Every stored quantity is positive; an update that would leave zero or less
# removes the disc instead.
class Cart:
    def __init__(self, id: int, username: str, contents: Optional[Dict[int, int]] = None):
        self.id = id
        self.username = username
        self._contents: Dict[int, int] = {}
        self.set_contents(contents or {})

    @property
    def contents(self) -> Dict[int, int]:
        # Copy, never the live mapping
        return dict(self._contents)

    def set_contents(self, contents: Dict[int, int]) -> None:
        self._contents = {int(disc_id): int(qty) for disc_id, qty in contents.items() if int(qty) > 0}

    def get_quantity(self, disc_id: int) -> int:
        return self._contents.get(disc_id, 0)

    def count(self) -> int:
        return sum(self._contents.values())

    def is_empty(self) -> bool:
        return not self._contents

    def add_disc(self, disc_id: int, quantity: int = 1) -> bool:
        if quantity <= 0:
            return False
        self._contents[disc_id] = self._contents.get(disc_id, 0) + quantity
        return True

    def remove_disc(self, disc_id: int) -> bool:
        if disc_id not in self._contents:
            return False
        del self._contents[disc_id]
        return True

    def update_disc_quantity(self, disc_id: int, quantity: int, mode: int = QuantityMode.SET) -> bool:
        """
        Set, add or subtract `quantity` for a disc already in the cart.

        Returns False when the disc is not in the cart or the mode is unknown.
        A resulting quantity <= 0 removes the disc.
        """
        if disc_id not in self._contents:
            return False
        try:
            mode = QuantityMode(mode)
        except ValueError:
            return False

        if mode == QuantityMode.SET:
            new_quantity = quantity
        elif mode == QuantityMode.ADD:
            new_quantity = self._contents[disc_id] + quantity
        else:
            new_quantity = self._contents[disc_id] - quantity

        if new_quantity > 0:
            self._contents[disc_id] = new_quantity
        else:
            self.remove_disc(disc_id)
        return True

    def __repr__(self):
        return f"Cart(id={self.id}, username={self.username!r}, contents={self._contents})"
