import logging
from typing import Any, Union

from sqlalchemy import event, inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import Session, SessionTransaction, SessionTransactionOrigin

from crudservice.application.services.interfaces.persistence_context import (
    PersistenceContext,
)

logger = logging.getLogger(__name__)


class SqlAlchemyPersistenceContext(PersistenceContext):
    """Persistence context backed by a caller owned SQLAlchemy session.

    A transaction is active when it was opened with ``begin_transaction`` or
    when the session holds changes that are not committed yet. The implicit
    transaction SQLAlchemy starts on a read is rolled back before a new one is
    opened only if it has no changes. Changes made by the caller are never
    committed here unless the caller commits them.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self._has_flushed = False
        self._adopted_transaction: Union[None, SessionTransaction] = None
        event.listen(session, "after_flush", self._on_flush)
        event.listen(session, "after_transaction_end", self._on_transaction_end)

    def _on_flush(self, session: Session, flush_context: Any) -> None:
        self._has_flushed = True

    def _on_transaction_end(
        self, session: Session, transaction: SessionTransaction
    ) -> None:
        if transaction.parent is None:
            self._has_flushed = False
            self._adopted_transaction = None

    def has_pending_changes(self) -> bool:
        session = self.session
        return bool(
            self._has_flushed or session.new or session.dirty or session.deleted
        )

    def find(self, entity_class: type, id_: Any) -> Union[None, Any]:
        return self.session.get(entity_class, id_)

    def persist(self, entity: Any) -> None:
        self.session.add(entity)
        self.session.flush()

    def remove(self, entity: Any) -> None:
        self.session.delete(entity)
        self.session.flush()

    def contains(self, entity: Any) -> bool:
        return entity in self.session

    def resolve_entity_class(self, entity: Any) -> type:
        try:
            return inspect(entity).mapper.class_
        except NoInspectionAvailable:
            return type(entity)

    def begin_transaction(self) -> None:
        if self.session.in_transaction():
            if self.has_pending_changes():
                # uncommitted changes stay in the transaction the caller opens
                self._adopted_transaction = self.session.get_transaction()
                return
            self.session.rollback()
        self.session.begin()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def is_transaction_active(self) -> bool:
        transaction = self.session.get_transaction()
        if transaction is not None and (
            transaction.origin != SessionTransactionOrigin.AUTOBEGIN
            or transaction is self._adopted_transaction
        ):
            return True
        return self.has_pending_changes()

    def fetch_all(self, statement: Any) -> list[Any]:
        return list(self.session.scalars(statement).all())

    def fetch_scalar(self, statement: Any) -> Any:
        return self.session.scalar(statement)

    def close(self) -> None:
        if self.is_transaction_active():
            logger.warning("Session is closed with an active transaction")
        if self.session.in_transaction():
            self.session.rollback()
        self.session.close()
