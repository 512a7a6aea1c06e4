import abc


class IDomain(abc.ABC):
    @abc.abstractmethod
    def copy(self) -> "IDomain":
        raise NotImplementedError
