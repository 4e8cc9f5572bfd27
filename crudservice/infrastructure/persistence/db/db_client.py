import abc

from sqlalchemy import Engine, MetaData
from sqlalchemy.orm import Session


class DatabaseClient(abc.ABC):
    @abc.abstractmethod
    def get_connection_repr(self) -> str: ...

    @property
    @abc.abstractmethod
    def engine(self) -> Engine: ...

    @abc.abstractmethod
    def session(self) -> Session: ...

    def create_schema(self, metadata: MetaData) -> None:
        metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
