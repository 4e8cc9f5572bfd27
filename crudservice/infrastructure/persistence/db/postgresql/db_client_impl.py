import logging
from typing import Union

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from crudservice.infrastructure.persistence.db.db_client import DatabaseClient
from crudservice.infrastructure.persistence.db.postgresql.config import (
    PostgresDatabaseConnection,
)

logger = logging.getLogger(__name__)


class DatabaseClientImpl(DatabaseClient):
    def __init__(
        self,
        db_connection: Union[dict, PostgresDatabaseConnection],
        db_pool_size: int = 5,
    ) -> None:
        if isinstance(db_connection, dict):
            db_connection = PostgresDatabaseConnection.model_validate(db_connection)
        self.db_connection = db_connection
        cn = db_connection
        self.db_url = (
            f"{cn.url_scheme}://{cn.user}:{cn.password}"
            f"@{cn.host}:{cn.port}/{cn.database}"
        )
        self.db_url_repr = (
            f"{cn.url_scheme}://{cn.user}:***@{cn.host}:{cn.port}/{cn.database}"
        )
        self._engine = create_engine(
            self.db_url, pool_size=db_pool_size, pool_pre_ping=True
        )
        self.session_factory = sessionmaker(
            bind=self._engine, expire_on_commit=False
        )
        logger.info("Database client is created for %s", self.db_url_repr)

    def get_connection_repr(self) -> str:
        return self.db_url_repr

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self.session_factory()
