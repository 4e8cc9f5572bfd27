import abc
from typing import Any, Self, Union


class PersistenceContext(abc.ABC):
    @abc.abstractmethod
    def find(self, entity_class: type, id_: Any) -> Union[None, Any]: ...

    @abc.abstractmethod
    def persist(self, entity: Any) -> None: ...

    @abc.abstractmethod
    def remove(self, entity: Any) -> None: ...

    @abc.abstractmethod
    def contains(self, entity: Any) -> bool: ...

    @abc.abstractmethod
    def resolve_entity_class(self, entity: Any) -> type: ...

    @abc.abstractmethod
    def begin_transaction(self) -> None: ...

    @abc.abstractmethod
    def commit(self) -> None: ...

    @abc.abstractmethod
    def rollback(self) -> None: ...

    @abc.abstractmethod
    def is_transaction_active(self) -> bool: ...

    @abc.abstractmethod
    def fetch_all(self, statement: Any) -> list[Any]: ...

    @abc.abstractmethod
    def fetch_scalar(self, statement: Any) -> Any: ...

    @abc.abstractmethod
    def close(self) -> None: ...

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
