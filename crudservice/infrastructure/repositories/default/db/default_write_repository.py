from typing import Any, Union

from crudservice.application.decorators.service_operation import service_operation
from crudservice.application.services.interfaces.entity_policy import EntityPolicy
from crudservice.application.services.interfaces.persistence_context import (
    PersistenceContext,
)
from crudservice.application.services.interfaces.repositories.default.abstract_write_repository import (  # noqa: E501
    AbstractWriteRepository,
)
from crudservice.application.services.transaction_coordinator import (
    TransactionCoordinator,
)
from crudservice.domain.entities.identifiable import get_entity_id
from crudservice.domain.enums.operation_type import OperationType
from crudservice.domain.exceptions.service import (
    InvalidClassError,
    InvalidParameterError,
)
from crudservice.domain.shared.data_types import ENTITY_TYPE, Params
from crudservice.infrastructure.repositories.default.db.default_read_repository import (  # noqa: E501
    SqlDbDefaultReadRepository,
)


class SqlDbDefaultWriteRepository(
    SqlDbDefaultReadRepository[ENTITY_TYPE], AbstractWriteRepository[ENTITY_TYPE]
):
    """CRUD lifecycle running the entity policy hooks in a fixed order.

    Every mutation joins the active transaction if there is one. Otherwise it
    opens a transaction, commits it on success and rolls it back on failure.
    Service errors raised by hooks reach the caller unchanged. Any other
    exception is logged and raised as ``ExecutionError``.
    """

    def __init__(
        self,
        persistence_context: PersistenceContext,
        entity_policy: EntityPolicy[ENTITY_TYPE],
        entity_class: Union[None, type[ENTITY_TYPE]] = None,
    ) -> None:
        super().__init__(persistence_context, entity_class)
        self.entity_policy = entity_policy
        self.transaction_coordinator = TransactionCoordinator(persistence_context)

    def check_entity_class(self, entity: Any) -> None:
        if type(entity) is not self.entity_class:
            raise InvalidClassError(
                self.entity_class,
                type(entity),
                f"Invalid class. Received {type(entity).__name__} "
                f"instead of {self.entity_class.__name__}",
            )

    @service_operation("CREATE")
    def create(
        self, entity: ENTITY_TYPE, params: Union[None, Params] = None
    ) -> ENTITY_TYPE:
        params = params if params is not None else {}
        self.check_entity_class(entity)
        self.entity_policy.validate(entity, OperationType.CREATE, params)
        with self.transaction_coordinator.transaction_scope():
            self.entity_policy.before_persist(entity, params)
            self.persistence_context.persist(entity)
            self.entity_policy.after_persist(entity, params)
        return entity

    @service_operation("UPDATE")
    def update(
        self, entity: ENTITY_TYPE, params: Union[None, Params] = None
    ) -> ENTITY_TYPE:
        params = params if params is not None else {}
        self.check_entity_class(entity)
        id_ = get_entity_id(entity)
        if id_ is None:
            raise InvalidParameterError("id", None, "Entity id is null")
        self.entity_policy.validate(entity, OperationType.UPDATE, params)
        with self.transaction_coordinator.transaction_scope():
            self.entity_policy.before_merge(entity, params)
            managed = self.persistence_context.find(self.entity_class, id_)
            if managed is None:
                raise InvalidParameterError("id", id_, f"Invalid id: {id_}")
            self.entity_policy.bind(managed, entity, params)
            self.entity_policy.after_merge(managed, params)
        return managed

    @service_operation("DELETE")
    def delete(self, id_: Any, params: Union[None, Params] = None) -> ENTITY_TYPE:
        params = params if params is not None else {}
        with self.transaction_coordinator.transaction_scope():
            entity = self.persistence_context.find(self.entity_class, id_)
            if entity is None:
                raise InvalidParameterError("id", id_, f"Invalid id: {id_}")
            self.entity_policy.check_removable(entity, params)
            self.entity_policy.before_remove(entity, params)
            self.persistence_context.remove(entity)
            self.entity_policy.after_remove(entity, params)
        return entity

    @service_operation("GET MANAGED ENTITY")
    def get_managed_entity(self, entity: ENTITY_TYPE) -> ENTITY_TYPE:
        if self.persistence_context.contains(entity):
            return entity
        entity_class = self.persistence_context.resolve_entity_class(entity)
        id_ = get_entity_id(entity)
        if id_ is None:
            raise InvalidParameterError("id", None, "Entity id is null")
        managed = self.persistence_context.find(entity_class, id_)
        if managed is None:
            raise InvalidParameterError(
                "id", id_, f"Invalid id {entity_class.__name__}:{id_}"
            )
        return managed
