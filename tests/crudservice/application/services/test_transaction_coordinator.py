from unittest.mock import Mock

import pytest

from crudservice.application.services.interfaces.persistence_context import (
    PersistenceContext,
)
from crudservice.application.services.transaction_coordinator import (
    TransactionCoordinator,
)


@pytest.fixture(scope="function")
def persistence_context() -> PersistenceContext:
    context = Mock(spec=PersistenceContext)
    context.is_transaction_active.return_value = False

    def begin_transaction():
        context.is_transaction_active.return_value = True

    def end_transaction():
        context.is_transaction_active.return_value = False

    context.begin_transaction.side_effect = begin_transaction
    context.commit.side_effect = end_transaction
    context.rollback.side_effect = end_transaction
    return context


class TestTransactionCoordinator:
    def test_transaction_scope_01(self, persistence_context: PersistenceContext):
        """_summary_
        Case:
            There is no active transaction.
        Expected result:
            open a transaction and commit it once
        """
        coordinator = TransactionCoordinator(persistence_context)
        with coordinator.transaction_scope() as was_already_active:
            assert not was_already_active
        persistence_context.begin_transaction.assert_called_once()
        persistence_context.commit.assert_called_once()
        persistence_context.rollback.assert_not_called()

    def test_transaction_scope_02(self, persistence_context: PersistenceContext):
        """_summary_
        Case:
            Caller has already started a transaction.
        Expected result:
            join it without commit or rollback
        """
        persistence_context.is_transaction_active.return_value = True
        coordinator = TransactionCoordinator(persistence_context)
        with coordinator.transaction_scope() as was_already_active:
            assert was_already_active
        with pytest.raises(ValueError):
            with coordinator.transaction_scope():
                raise ValueError("failed")
        persistence_context.begin_transaction.assert_not_called()
        persistence_context.commit.assert_not_called()
        persistence_context.rollback.assert_not_called()

    def test_transaction_scope_03(self, persistence_context: PersistenceContext):
        """_summary_
        Case:
            Operation fails inside its own transaction.
        Expected result:
            roll back and re-raise the same exception
        """
        coordinator = TransactionCoordinator(persistence_context)
        error = RuntimeError("failed")
        with pytest.raises(RuntimeError) as ex:
            with coordinator.transaction_scope():
                raise error
        assert ex.value is error
        persistence_context.rollback.assert_called_once()
        persistence_context.commit.assert_not_called()

    def test_transaction_scope_04(self, persistence_context: PersistenceContext):
        """_summary_
        Case:
            Nested scopes share the outer transaction.
        Expected result:
            only the outer scope commits
        """
        coordinator = TransactionCoordinator(persistence_context)
        with coordinator.transaction_scope():
            with coordinator.transaction_scope() as inner_was_active:
                assert inner_was_active
            persistence_context.commit.assert_not_called()
        persistence_context.begin_transaction.assert_called_once()
        persistence_context.commit.assert_called_once()

    def test_rollback_unless_preexisting_01(
        self, persistence_context: PersistenceContext
    ):
        coordinator = TransactionCoordinator(persistence_context)
        was_already_active = coordinator.begin_if_needed()
        coordinator.rollback_unless_preexisting(was_already_active)
        persistence_context.rollback.assert_called_once()
        coordinator.commit_unless_preexisting(was_already_active)
        persistence_context.commit.assert_not_called()
