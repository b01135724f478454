# backend/repositories/base.py
import copy
import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from exceptions import StorageException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository(ABC, Generic[T]):
    """
    Whole collection of one entity type, kept in an id-keyed map and backed by
    a JSON array file.

    The file is read once at construction. Every mutation rewrites the complete
    file before the call returns. One lock per instance guards the map, the id
    counter and the file; reads and read-modify-write-save sequences hold it for
    their full duration.

    Entities handed out are copies. Changing one has no effect until it is passed
    back through ``update``. Changes that depend on the stored state (cart edits,
    stock decrements) go through subclass methods that read, change and save
    under a single hold of the lock.

    Subclasses set ``record_schema`` (the pydantic model of one file element) and
    implement ``_build`` to turn a validated record into an entity.
    """

    record_schema: Type[BaseModel]

    def __init__(self, filename: str):
        self.filename = filename
        self._lock = threading.RLock()
        self._items: Dict[int, T] = {}
        self._next_id = 1
        self.load()

    @abstractmethod
    def _build(self, record: BaseModel) -> T:
        pass

    # ---- FILE ----
    def load(self) -> None:
        with self._lock:
            records = []
            if os.path.exists(self.filename):
                try:
                    with open(self.filename, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                    records = TypeAdapter(List[self.record_schema]).validate_python(raw)
                except (OSError, ValueError) as e:
                    # ValueError covers malformed JSON and pydantic validation errors
                    raise StorageException(self.filename, str(e)) from e
            else:
                logger.info("Data file %s not found, starting with an empty collection", self.filename)

            self._items = {}
            for record in records:
                entity = self._build(record)
                self._items[entity.id] = entity

            # Next id is one greater than the largest id in the file
            self._next_id = max(self._items, default=0) + 1
            logger.debug("Loaded %d records from %s", len(self._items), self.filename)

    def save(self) -> None:
        with self._lock:
            records = [
                self.record_schema.model_validate(entity).model_dump(mode="json", by_alias=True)
                for entity in self._values()
            ]
            try:
                directory = os.path.dirname(self.filename)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                with open(self.filename, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2)
            except OSError as e:
                raise StorageException(self.filename, str(e)) from e

    # ---- HELPERS (call with the lock held) ----
    def _values(self) -> List[T]:
        return [self._items[key] for key in sorted(self._items)]

    def _select(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        return [copy.deepcopy(e) for e in self._values() if predicate is None or predicate(e)]

    def _allocate_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _insert(self, factory: Callable[[int], T]) -> T:
        with self._lock:
            entity = factory(self._allocate_id())
            self._items[entity.id] = entity
            self.save()
            return copy.deepcopy(entity)

    # ---- CRUD ----
    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def get_all(self) -> List[T]:
        with self._lock:
            return self._select()

    def get(self, id: int) -> Optional[T]:
        with self._lock:
            entity = self._items.get(id)
            return copy.deepcopy(entity) if entity is not None else None

    def update(self, entity: T) -> Optional[T]:
        with self._lock:
            if entity.id not in self._items:
                return None
            stored = copy.deepcopy(entity)
            self._items[stored.id] = stored
            self.save()
            return copy.deepcopy(stored)

    def delete(self, id: int) -> bool:
        with self._lock:
            if id not in self._items:
                return False
            del self._items[id]
            self.save()
            return True
