import logging
from pathlib import Path
from typing import Union

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from crudservice.infrastructure.persistence.db.db_client import DatabaseClient
from crudservice.infrastructure.persistence.db.sqlite.config import (
    SQLiteDatabaseConnection,
)

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLiteDatabaseClientImpl(DatabaseClient):
    def __init__(
        self, db_connection: Union[dict, SQLiteDatabaseConnection], echo: bool = False
    ) -> None:
        if isinstance(db_connection, dict):
            db_connection = SQLiteDatabaseConnection.model_validate(db_connection)
        self.db_connection = db_connection
        file_path = Path(db_connection.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        self.db_url = f"{db_connection.url_scheme}:///{file_path}"
        self._engine = create_engine(self.db_url, echo=echo)
        event.listen(self._engine, "connect", _enable_foreign_keys)
        self.session_factory = sessionmaker(
            bind=self._engine, expire_on_commit=False
        )
        logger.info("SQLite database client is created for %s", self.db_url)

    def get_connection_repr(self) -> str:
        return self.db_url

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self.session_factory()
