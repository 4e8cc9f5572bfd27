from typing import Any, Iterable, Union

from crudservice.domain.entities.identifiable import get_entity_id


def new_entities(entities: Union[None, Iterable[Any]]) -> list[Any]:
    if not entities:
        return []
    return [x for x in entities if get_entity_id(x) is None]


def persisted_entities(entities: Union[None, Iterable[Any]]) -> list[Any]:
    if not entities:
        return []
    return [x for x in entities if get_entity_id(x) is not None]


def removed_entities(
    old_entities: Union[None, Iterable[Any]],
    new_entities: Union[None, Iterable[Any]],
) -> list[Any]:
    """Return the items of ``old_entities`` missing from ``new_entities``.

    Items are matched by identity. Items without an identity are never
    reported as removed.
    """
    if not old_entities:
        return []
    kept_ids = {get_entity_id(x) for x in new_entities or []}
    kept_ids.discard(None)
    return [
        x
        for x in old_entities
        if get_entity_id(x) is not None and get_entity_id(x) not in kept_ids
    ]
