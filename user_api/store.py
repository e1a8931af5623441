"""
In-memory user store.

Records live for the lifetime of the store instance. Handlers run in a
worker thread pool, so appends and reads are serialized with a lock.
"""
import threading
import uuid
from typing import Callable, List, Optional, Set

from user_api.models import User


IdGenerator = Callable[[], str]


def uuid_id_generator() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """Deterministic generator producing ``<prefix>1``, ``<prefix>2``, ..."""

    def __init__(self, prefix: str = "user-"):
        self.prefix = prefix
        self._counter = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self.prefix}{self._counter}"


class UserStore:
    """Insertion-ordered collection of users."""

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self.id_generator = id_generator or uuid_id_generator
        self._users: List[User] = []
        self._ids: Set[str] = set()
        self._lock = threading.Lock()

    def create(self, name: str, email: str) -> User:
        """
        Create a user with a fresh id and append it to the store.

        Raises:
            ValueError: If the generator returns an empty or already used id
        """
        with self._lock:
            user_id = self.id_generator()
            if not user_id or user_id in self._ids:
                raise ValueError(f"Id generator returned unusable id: {user_id!r}")
            user = User(id=user_id, name=name, email=email)
            self._users.append(user)
            self._ids.add(user_id)
            return user

    def list(self) -> List[User]:
        """Return a snapshot of all users in creation order."""
        with self._lock:
            return list(self._users)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def __len__(self) -> int:
        return self.count()
