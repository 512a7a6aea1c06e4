import abc
from typing import Iterable, Optional

from user_management.domain.base import IDomain


class IRepository(abc.ABC):
    @abc.abstractmethod
    def add(self, data: IDomain) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def list(self) -> Iterable[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, identifier: int) -> Optional[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, identifier: int, *args, **kwargs) -> Optional[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, identifier: int) -> bool:
        raise NotImplementedError
