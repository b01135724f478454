# backend/repositories/user.py
import copy
from abc import ABC, abstractmethod
from typing import List, Optional

from models.users import User
from repositories.base import JsonFileRepository
from schemas.user import UserRecord


class UserRepository(ABC):
    """Storage contract for user accounts."""

    @abstractmethod
    def get_all(self) -> List[User]:
        pass

    @abstractmethod
    def get(self, id: int) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Exact, case-sensitive match."""
        pass

    @abstractmethod
    def create(self, username: str, password: str) -> Optional[User]:
        """New user, or None when the username is taken (case-insensitive)."""
        pass

    @abstractmethod
    def update(self, user: User) -> Optional[User]:
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        pass

    @abstractmethod
    def delete_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    def login(self, id: int, password: str) -> bool:
        pass

    @abstractmethod
    def logout(self, id: int) -> bool:
        pass


class UserFileRepository(JsonFileRepository[User], UserRepository):
    record_schema = UserRecord

    def _build(self, record: UserRecord) -> User:
        return User(record.id, record.username, record.password)

    def _find(self, username: str) -> Optional[User]:
        for user in self._values():
            if user.username == username:
                return user
        return None

    def get_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._find(username)
            return copy.deepcopy(user) if user is not None else None

    def create(self, username: str, password: str) -> Optional[User]:
        with self._lock:
            wanted = username.lower()
            if any((user.username or "").lower() == wanted for user in self._items.values()):
                return None
            return self._insert(lambda new_id: User(new_id, username, password))

    def update(self, user: User) -> Optional[User]:
        with self._lock:
            current = self._items.get(user.id)
            if current is None:
                return None
            # Keep the session of the stored account
            stored = User(user.id, user.username, user.password, logged_in=current.logged_in)
            self._items[stored.id] = stored
            self.save()
            return copy.deepcopy(stored)

    def delete_by_username(self, username: str) -> bool:
        with self._lock:
            user = self._find(username)
            if user is None:
                return False
            return self.delete(user.id)

    # Login state changes in place; it is never saved
    def login(self, id: int, password: str) -> bool:
        with self._lock:
            user = self._items.get(id)
            return user is not None and user.login(password)

    def logout(self, id: int) -> bool:
        with self._lock:
            user = self._items.get(id)
            return user is not None and user.logout()
