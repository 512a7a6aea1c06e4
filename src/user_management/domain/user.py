from __future__ import annotations

from typing import Optional

from user_management.domain.base import IDomain


class User(IDomain):
    def __init__(
        self,
        name: str,
        email: str,
        details: Optional[str] = None,
        user_id: int = 0,
    ) -> None:
        self.id = user_id
        self.name = name
        self.email = email
        self.details = details

    def update(self, name: str, email: str, details: Optional[str]) -> None:
        self.name = name
        self.email = email
        self.details = details

    def copy(self) -> User:
        return User(name=self.name, email=self.email, details=self.details, user_id=self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
