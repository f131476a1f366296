"""
In-memory repository adapter - Implements UserRepository protocol.

Keeps users in a process-local dict. Useful for development and tests;
data is lost when the process exits.
"""

import threading
import uuid

from src.domain.exceptions import UserAlreadyExists
from src.domain.models import NewUser, User


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by email.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The lock makes create() the uniqueness guard, mirroring the UNIQUE
    constraint of the PostgreSQL adapter.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def create(self, user: NewUser) -> User:
        """
        Store a new user under a fresh uuid4 id.

        Raises:
            UserAlreadyExists: If the email is already stored
        """
        with self._lock:
            if user.email in self._users:
                raise UserAlreadyExists()
            created = User(id=str(uuid.uuid4()), email=user.email, password=user.password)
            self._users[user.email] = created
            return created

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            return self._users.get(email)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
