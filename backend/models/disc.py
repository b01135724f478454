# backend/models/disc.py
from enum import IntEnum
from typing import Optional


# Field a disc search is matched against
class DiscFilter(IntEnum):
    ALL = 0
    TYPE = 1
    COLOR = 2
    WEIGHT = 3
    PRICE = 4


# Represents one disc model in store inventory.
# Quantity is the number of discs in stock; price is per disc.
class Disc:
    def __init__(self, id: int, color: str, weight: int, type: str, price: float, quantity: int):
        self.id = id
        self.color = color
        self.weight = weight  # grams
        self.type = type  # e.g. "Putter", "Driver"
        self.price = price
        self.quantity = quantity

    def with_quantity(self, quantity: int) -> "Disc":
        """Same disc with a different quantity (purchase lines, conflicts, restocks)."""
        return Disc(self.id, self.color, self.weight, self.type, self.price, quantity)

    def field_text(self, mode: DiscFilter) -> str:
        if mode == DiscFilter.TYPE:
            return self.type or ""
        if mode == DiscFilter.COLOR:
            return self.color or ""
        if mode == DiscFilter.WEIGHT:
            return str(self.weight)
        return str(float(self.price))

    def matches(self, search: Optional[str], mode: DiscFilter) -> bool:
        # No search term or mode ALL keeps every disc
        if search is None or mode == DiscFilter.ALL:
            return True
        return search.lower() in self.field_text(mode).lower()

    def __eq__(self, other):
        if not isinstance(other, Disc):
            return NotImplemented
        return (self.id, self.color, self.weight, self.type, self.price, self.quantity) == \
               (other.id, other.color, other.weight, other.type, other.price, other.quantity)

    def __repr__(self):
        return (f"Disc(id={self.id}, color={self.color!r}, weight={self.weight}, "
                f"type={self.type!r}, price={self.price}, quantity={self.quantity})")
