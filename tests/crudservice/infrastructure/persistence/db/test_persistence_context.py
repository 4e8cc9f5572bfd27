import logging

from sqlalchemy import select

from crudservice.infrastructure.persistence.db.persistence_context import (
    SqlAlchemyPersistenceContext,
)
from crudservice.infrastructure.persistence.db.sqlite.db_client_impl import (
    SQLiteDatabaseClientImpl,
)
from tests.data.sqlite.models import Address, Customer


class TestSqlAlchemyPersistenceContext:
    def test_is_transaction_active_01(
        self, persistence_context: SqlAlchemyPersistenceContext
    ):
        """_summary_
        Case:
            Entity is read before a transaction is started.
        Expected result:
            implicit transaction is not reported as active
        """
        assert persistence_context.find(Customer, 1) is not None
        assert not persistence_context.is_transaction_active()
        persistence_context.begin_transaction()
        assert persistence_context.is_transaction_active()
        persistence_context.commit()
        assert not persistence_context.is_transaction_active()

    def test_is_transaction_active_02(
        self,
        persistence_context: SqlAlchemyPersistenceContext,
        database_client: SQLiteDatabaseClientImpl,
    ):
        """_summary_
        Case:
            Loaded customer is modified before a transaction is started.
        Expected result:
            implicit transaction is active and kept by begin_transaction
        """
        customer = persistence_context.find(Customer, 2)
        customer.name = "Bobby"
        assert persistence_context.has_pending_changes()
        assert persistence_context.is_transaction_active()
        persistence_context.begin_transaction()
        assert persistence_context.is_transaction_active()
        assert customer.name == "Bobby"
        persistence_context.commit()
        assert not persistence_context.is_transaction_active()
        assert not persistence_context.has_pending_changes()
        with database_client.session() as session:
            assert session.get(Customer, 2).name == "Bobby"

    def test_is_transaction_active_03(
        self, persistence_context: SqlAlchemyPersistenceContext
    ):
        """_summary_
        Case:
            Caller flushed a new address in the implicit transaction.
        Expected result:
            transaction is active until it is rolled back
        """
        persistence_context.session.add(Address(city="York"))
        persistence_context.session.flush()
        assert not persistence_context.session.new
        assert persistence_context.is_transaction_active()
        persistence_context.rollback()
        assert not persistence_context.is_transaction_active()

    def test_persist_01(
        self,
        persistence_context: SqlAlchemyPersistenceContext,
        database_client: SQLiteDatabaseClientImpl,
    ):
        persistence_context.begin_transaction()
        address = Address(city="Oxford", street="Broad Street")
        persistence_context.persist(address)
        assert address.id is not None
        assert persistence_context.contains(address)
        persistence_context.rollback()
        with database_client.session() as session:
            stmt = select(Address).where(Address.city == "Oxford")
            assert session.scalar(stmt) is None

    def test_resolve_entity_class_01(
        self, persistence_context: SqlAlchemyPersistenceContext
    ):
        assert persistence_context.resolve_entity_class(Customer(id=1)) is Customer
        assert persistence_context.resolve_entity_class("text") is str

    def test_close_01(
        self,
        database_client: SQLiteDatabaseClientImpl,
        caplog,
    ):
        """_summary_
        Case:
            Context is closed while a transaction is active.
        Expected result:
            warning is logged and changes are rolled back
        """
        with caplog.at_level(logging.WARNING):
            with SqlAlchemyPersistenceContext(database_client.session()) as context:
                context.begin_transaction()
                context.persist(Address(city="Leeds"))
        assert "active transaction" in caplog.text
        with database_client.session() as session:
            stmt = select(Address).where(Address.city == "Leeds")
            assert session.scalar(stmt) is None
