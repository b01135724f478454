# backend/repositories/disc.py
from abc import ABC, abstractmethod
from typing import List, Optional

from models.disc import Disc, DiscFilter
from repositories.base import JsonFileRepository
from schemas.disc import DiscResponse


class DiscRepository(ABC):
    """Storage contract for store inventory."""

    @abstractmethod
    def get_all(self) -> List[Disc]:
        pass

    @abstractmethod
    def find(self, search: Optional[str], mode: DiscFilter) -> List[Disc]:
        """Discs whose `mode` field contains `search` (case-insensitive)."""
        pass

    @abstractmethod
    def get(self, id: int) -> Optional[Disc]:
        pass

    @abstractmethod
    def create(self, disc: Disc) -> Disc:
        """Store a copy of `disc` under a new id; the id of `disc` is ignored."""
        pass

    @abstractmethod
    def update(self, disc: Disc) -> Optional[Disc]:
        pass

    @abstractmethod
    def take(self, id: int, wanted: int) -> Optional[Disc]:
        """
        Remove up to `wanted` units from stock and return the disc carrying the
        quantity taken, or None when the disc is not in inventory.

        Taking the whole stock deletes the disc.
        """
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        pass


class DiscFileRepository(JsonFileRepository[Disc], DiscRepository):
    record_schema = DiscResponse

    def _build(self, record: DiscResponse) -> Disc:
        return Disc(**record.model_dump())

    def find(self, search: Optional[str], mode: DiscFilter) -> List[Disc]:
        with self._lock:
            return self._select(lambda disc: disc.matches(search, mode))

    def create(self, disc: Disc) -> Disc:
        return self._insert(
            lambda new_id: Disc(new_id, disc.color, disc.weight, disc.type, disc.price, disc.quantity)
        )

    def take(self, id: int, wanted: int) -> Optional[Disc]:
        with self._lock:
            disc = self._items.get(id)
            if disc is None:
                return None
            # Buy what inventory allows; a sold out disc leaves inventory
            bought = min(wanted, disc.quantity)
            if bought == disc.quantity:
                del self._items[id]
            else:
                self._items[id] = disc.with_quantity(disc.quantity - bought)
            self.save()
            return disc.with_quantity(bought)
