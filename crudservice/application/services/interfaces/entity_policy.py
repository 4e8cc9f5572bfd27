import abc
from typing import Generic

from crudservice.domain.enums.operation_type import OperationType
from crudservice.domain.shared.data_types import ENTITY_TYPE, Params


class EntityPolicy(abc.ABC, Generic[ENTITY_TYPE]):
    """Entity specific hooks invoked by the CRUD lifecycle.

    Hooks raise ``ServiceError`` subclasses to reject an operation. Any other
    exception is reported to the caller as an unexpected error.
    """

    @abc.abstractmethod
    def validate(
        self, entity: ENTITY_TYPE, operation: OperationType, params: Params
    ) -> None:
        """Check field presence and format only.

        Related entities are resolved later in ``before_persist`` or
        ``before_merge``. An invoice may require a customer id here, but it is
        not checked that the customer exists.
        """

    @abc.abstractmethod
    def before_persist(self, entity: ENTITY_TYPE, params: Params) -> None:
        """Attach related entities and compute derived fields."""

    @abc.abstractmethod
    def after_persist(self, entity: ENTITY_TYPE, params: Params) -> None:
        """Update the inverse side of one-to-many associations and save
        dependent entities."""

    @abc.abstractmethod
    def before_merge(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    @abc.abstractmethod
    def after_merge(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    @abc.abstractmethod
    def before_remove(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    @abc.abstractmethod
    def after_remove(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    @abc.abstractmethod
    def check_removable(self, entity: ENTITY_TYPE, params: Params) -> None:
        """Raise ``DependingObjectsError`` when dependent rows exist."""

    @abc.abstractmethod
    def bind(self, target: ENTITY_TYPE, source: ENTITY_TYPE, params: Params) -> None:
        """Copy the attributes of the detached ``source`` onto the managed
        ``target``."""
