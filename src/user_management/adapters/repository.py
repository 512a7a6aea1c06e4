from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from user_management.domain.user import User

from .base import IRepository


class UserRepository(IRepository):
    """In-memory user store.

    Users are kept in insertion order. Identifiers come from a counter that
    starts at 1 and only ever grows, so ids of deleted users are never handed
    out again. Every public method holds ``self._lock`` for its whole body,
    and users handed out are copies taken under the lock, never the stored
    instances.
    """

    def __init__(self) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, data: User) -> None:  # type: ignore[override]
        with self._lock:
            data.id = self._next_id
            self._next_id += 1
            self._users.append(data.copy())

    def list(self) -> Iterable[User]:  # type: ignore[override]
        with self._lock:
            return [user.copy() for user in self._users]

    def slice(self, offset: int, limit: int) -> List[User]:
        if limit <= 0:
            return []
        offset = max(offset, 0)
        with self._lock:
            return [user.copy() for user in self._users[offset : offset + limit]]

    def get(self, user_id: int) -> Optional[User]:  # type: ignore[override]
        with self._lock:
            user = self._find(user_id)
            return user.copy() if user is not None else None

    def update(  # type: ignore[override]
        self,
        user_id: int,
        name: str,
        email: str,
        details: Optional[str],
    ) -> Optional[User]:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            user.update(name, email, details)
            return user.copy()

    def delete(self, user_id: int) -> bool:  # type: ignore[override]
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return False
            self._users.remove(user)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _find(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None
