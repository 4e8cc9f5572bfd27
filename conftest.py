from pathlib import Path
from typing import Any, Generator

import pytest

from crudservice.infrastructure.persistence.db.persistence_context import (
    SqlAlchemyPersistenceContext,
)
from crudservice.infrastructure.persistence.db.sqlite.db_client_impl import (
    SQLiteDatabaseClientImpl,
)
from crudservice.run.config_utils import set_application_configuration
from crudservice.run.containers import CrudServiceContainer
from tests.data.sqlite.init_db import create_test_sqlite_db

TEST_DATA_ROOT = Path(__file__).parent / "tests" / "data"


@pytest.fixture(scope="session")
def local_config_file() -> str:
    return str(TEST_DATA_ROOT / "config" / "crudservice-test-config.yaml")


@pytest.fixture(scope="session")
def local_secrets_file() -> str:
    return str(TEST_DATA_ROOT / "config" / "crudservice-test-config-secrets.yaml")


@pytest.fixture(scope="function")
def database_client(
    tmp_path: Path,
) -> Generator[SQLiteDatabaseClientImpl, Any, None]:
    client = create_test_sqlite_db(
        tmp_path / "crudservice-test.db",
        TEST_DATA_ROOT / "sqlite" / "initial_data.sql",
    )
    yield client
    client.dispose()


@pytest.fixture(scope="function")
def persistence_context(
    database_client: SQLiteDatabaseClientImpl,
) -> Generator[SqlAlchemyPersistenceContext, Any, None]:
    context = SqlAlchemyPersistenceContext(database_client.session())
    yield context
    context.close()


@pytest.fixture(scope="function")
def local_env_container(
    local_config_file: str, local_secrets_file: str, tmp_path: Path
) -> Generator[CrudServiceContainer, Any, None]:
    container = CrudServiceContainer()
    set_application_configuration(
        container,
        config_file_path=local_config_file,
        secrets_file_path=local_secrets_file,
    )
    container.config.from_dict(
        {
            "database": {
                "sqlite": {
                    "connection": {"file_path": str(tmp_path / "container-test.db")}
                }
            }
        }
    )
    yield container
    container.shutdown_resources()
