# backend/models/users.py

ADMIN_USERNAME = "admin"


# Represents a store account. The password is stored as plain text.
# Login state lives only in memory and is never written to the data file.
class User:
    def __init__(self, id: int, username: str, password: str, logged_in: bool = False):
        self.id = id
        self.username = username
        self.password = password
        self._logged_in = logged_in

    @property
    def is_admin(self) -> bool:
        return (self.username or "").lower() == ADMIN_USERNAME

    @property
    def logged_in(self) -> bool:
        return self._logged_in

    def login(self, password: str) -> bool:
        if self.password != password:
            return False
        self._logged_in = True
        return True

    def logout(self) -> bool:
        if not self._logged_in:
            return False
        self._logged_in = False
        return True

    def __repr__(self):
        return f"User(id={self.id}, username={self.username!r})"
