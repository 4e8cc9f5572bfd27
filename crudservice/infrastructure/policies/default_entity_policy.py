from sqlalchemy import inspect

from crudservice.application.services.interfaces.entity_policy import EntityPolicy
from crudservice.domain.enums.operation_type import OperationType
from crudservice.domain.shared.data_types import ENTITY_TYPE, Params


class DefaultEntityPolicy(EntityPolicy[ENTITY_TYPE]):
    def validate(
        self, entity: ENTITY_TYPE, operation: OperationType, params: Params
    ) -> None: ...

    def before_persist(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def after_persist(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def before_merge(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def after_merge(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def before_remove(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def after_remove(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def check_removable(self, entity: ENTITY_TYPE, params: Params) -> None: ...

    def bind(self, target: ENTITY_TYPE, source: ENTITY_TYPE, params: Params) -> None:
        """Copy the column values set on ``source`` except primary keys."""
        if target is source:
            return
        values = inspect(source).dict
        for column_attr in inspect(target).mapper.column_attrs:
            if any(column.primary_key for column in column_attr.columns):
                continue
            if column_attr.key in values:
                setattr(target, column_attr.key, values[column_attr.key])
