from typing import Any, Protocol, Union, runtime_checkable

from crudservice.domain.exceptions.service import InvalidClassError


@runtime_checkable
class Identifiable(Protocol):
    def get_id(self) -> Union[None, int]: ...


def get_entity_id(entity: Any) -> Union[None, int]:
    if not isinstance(entity, Identifiable):
        raise InvalidClassError(
            Identifiable,
            type(entity),
            f"{type(entity).__name__} does not provide an identity accessor",
        )
    return entity.get_id()


def is_new_entity(entity: Any) -> bool:
    return get_entity_id(entity) is None
