import contextlib
import logging
from typing import Iterator

from crudservice.application.services.interfaces.persistence_context import (
    PersistenceContext,
)

logger = logging.getLogger(__name__)


class TransactionCoordinator:
    """Joins the active transaction or opens a new one.

    A transaction is committed or rolled back only by the call that opened it,
    so repository operations can run inside a transaction managed by the
    caller and the outermost boundary commits exactly once.
    """

    def __init__(self, persistence_context: PersistenceContext) -> None:
        self.persistence_context = persistence_context

    def begin_if_needed(self) -> bool:
        if self.persistence_context.is_transaction_active():
            return True
        self.persistence_context.begin_transaction()
        return False

    def commit_unless_preexisting(self, was_already_active: bool) -> None:
        if was_already_active:
            return
        if self.persistence_context.is_transaction_active():
            self.persistence_context.commit()

    def rollback_unless_preexisting(self, was_already_active: bool) -> None:
        if was_already_active:
            return
        if self.persistence_context.is_transaction_active():
            logger.debug("Rolling back transaction")
            self.persistence_context.rollback()

    @contextlib.contextmanager
    def transaction_scope(self) -> Iterator[bool]:
        was_already_active = self.begin_if_needed()
        try:
            yield was_already_active
            self.commit_unless_preexisting(was_already_active)
        except Exception:
            self.rollback_unless_preexisting(was_already_active)
            raise
