from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from user_management.adapters.repository import UserRepository
from user_management.domain.user import User
from user_management.services.config import settings
from user_management.services.validation import validate_user

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    value: Any = None
    created: bool = False


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class ValidationFailed:
    message: str


UserResult = Union[Success, NotFound, ValidationFailed]


class UserService:
    def __init__(
        self,
        repository: UserRepository,
        default_page: Optional[int] = None,
        default_page_size: Optional[int] = None,
    ) -> None:
        self._repository = repository
        self._default_page = settings.USER_MANAGEMENT_DEFAULT_PAGE if default_page is None else default_page
        self._default_page_size = (
            settings.USER_MANAGEMENT_DEFAULT_PAGE_SIZE if default_page_size is None else default_page_size
        )

    def list_users(self, page: Optional[int] = None, page_size: Optional[int] = None) -> List[User]:
        current_page = self._default_page if page is None else page
        current_page_size = self._default_page_size if page_size is None else page_size
        # page <= 0 gives a negative offset; the repository clamps it to the start
        offset = (current_page - 1) * current_page_size
        return self._repository.slice(offset, current_page_size)

    def get_user(self, user_id: int) -> UserResult:
        user = self._repository.get(user_id)
        if user is None:
            return NotFound()
        return Success(user)

    def create_user(self, name: Optional[str], email: Optional[str], details: Optional[str] = None) -> UserResult:
        logger.info("start create_user")
        error = validate_user(name, email)
        if error:
            logger.info("create_user rejected: %s", error)
            return ValidationFailed(error)
        user = User(name=name, email=email, details=details)
        self._repository.add(user)
        logger.info("finish create_user, id=%s", user.id)
        return Success(user, created=True)

    def update_user(
        self,
        user_id: int,
        name: Optional[str],
        email: Optional[str],
        details: Optional[str] = None,
    ) -> UserResult:
        logger.info("start update_user, id=%s", user_id)
        if self._repository.get(user_id) is None:
            return NotFound()
        error = validate_user(name, email)
        if error:
            logger.info("update_user rejected: %s", error)
            return ValidationFailed(error)
        user = self._repository.update(user_id, name, email, details)
        if user is None:
            return NotFound()
        logger.info("finish update_user, id=%s", user_id)
        return Success(user)

    def delete_user(self, user_id: int) -> UserResult:
        logger.info("start delete_user, id=%s", user_id)
        if not self._repository.delete(user_id):
            return NotFound()
        logger.info("finish delete_user, id=%s", user_id)
        return Success()
