from logging import config as logging_config

from dependency_injector import containers, providers

from crudservice.infrastructure.persistence.db.persistence_context import (
    SqlAlchemyPersistenceContext,
)
from crudservice.infrastructure.persistence.db.postgresql.db_client_impl import (
    DatabaseClientImpl,
)
from crudservice.infrastructure.persistence.db.sqlite.db_client_impl import (
    SQLiteDatabaseClientImpl,
)


class CrudServiceContainer(containers.DeclarativeContainer):
    config = providers.Configuration()
    secrets = providers.Configuration()

    logging_config = providers.Resource(
        logging_config.dictConfig,
        config=config.run.logging,
    )

    database_client = providers.Selector(
        config.database.provider,
        sqlite=providers.Singleton(
            SQLiteDatabaseClientImpl,
            db_connection=config.database.sqlite.connection,
        ),
        postgresql=providers.Singleton(
            DatabaseClientImpl,
            db_connection=config.database.postgresql.connection,
            db_pool_size=config.database.postgresql.db_pool_size,
        ),
    )

    persistence_context = providers.Factory(
        SqlAlchemyPersistenceContext,
        session=database_client.provided.session.call(),
    )
