import abc
from typing import Any, Generic, Union

from crudservice.application.services.interfaces.repositories.default.abstract_read_repository import (  # noqa: E501
    AbstractReadRepository,
)
from crudservice.domain.shared.data_types import ENTITY_TYPE, Params


class AbstractWriteRepository(
    Generic[ENTITY_TYPE],
    AbstractReadRepository[ENTITY_TYPE],
    abc.ABC,
):
    @abc.abstractmethod
    def create(
        self, entity: ENTITY_TYPE, params: Union[None, Params] = None
    ) -> ENTITY_TYPE: ...

    @abc.abstractmethod
    def update(
        self, entity: ENTITY_TYPE, params: Union[None, Params] = None
    ) -> ENTITY_TYPE: ...

    @abc.abstractmethod
    def delete(self, id_: Any, params: Union[None, Params] = None) -> ENTITY_TYPE: ...

    @abc.abstractmethod
    def get_managed_entity(self, entity: ENTITY_TYPE) -> ENTITY_TYPE: ...
