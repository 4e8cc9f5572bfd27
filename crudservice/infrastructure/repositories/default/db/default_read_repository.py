import math
from typing import Any, Union

from crudservice.application.decorators.service_operation import service_operation
from crudservice.application.services.interfaces.persistence_context import (
    PersistenceContext,
)
from crudservice.application.services.interfaces.repositories.default.abstract_read_repository import (  # noqa: E501
    AbstractReadRepository,
)
from crudservice.domain.exceptions.service import InvalidParameterError
from crudservice.domain.shared.data_types import ENTITY_TYPE, Params
from crudservice.domain.shared.repository.entity_filter import EntityFilter
from crudservice.domain.shared.repository.paginated_output import PaginatedOutput
from crudservice.domain.shared.repository.query_options import QueryOptions
from crudservice.domain.shared.repository.sort_option import SortOption
from crudservice.infrastructure.persistence.db.filter_translator import (
    FilterTranslator,
)


def get_generic_entity_class(instance: Any) -> Union[None, type]:
    for base in getattr(type(instance), "__orig_bases__", ()):
        for arg in getattr(base, "__args__", ()):
            if isinstance(arg, type):
                return arg
    return None


def check_bound(name: str, value: Union[None, int], minimum: int = 0) -> None:
    if value is None:
        return
    if not isinstance(value, int) or value < minimum:
        raise InvalidParameterError(
            name, value, f"{name} must be an integer greater than {minimum - 1}"
        )


class SqlDbDefaultReadRepository(AbstractReadRepository[ENTITY_TYPE]):
    def __init__(
        self,
        persistence_context: PersistenceContext,
        entity_class: Union[None, type[ENTITY_TYPE]] = None,
    ) -> None:
        self.persistence_context = persistence_context
        self.entity_class = entity_class or get_generic_entity_class(self)
        if not self.entity_class:
            raise ValueError(f"Entity class is not defined for {type(self).__name__}")
        self.filter_translator = FilterTranslator(self.entity_class)

    @service_operation("READ")
    def read(
        self, id_: Any, params: Union[None, Params] = None
    ) -> Union[None, ENTITY_TYPE]:
        return self.persistence_context.find(self.entity_class, id_)

    @service_operation("LIST")
    def list_entities(
        self,
        filters: Union[None, list[EntityFilter]] = None,
        sort_options: Union[None, list[SortOption]] = None,
        offset: Union[None, int] = None,
        limit: Union[None, int] = None,
    ) -> list[ENTITY_TYPE]:
        check_bound("offset", offset)
        check_bound("limit", limit)
        stmt = self.filter_translator.build_query(filters, sort_options)
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.persistence_context.fetch_all(stmt)

    @service_operation("COUNT")
    def count(self, filters: Union[None, list[EntityFilter]] = None) -> int:
        stmt = self.filter_translator.build_count_query(filters)
        result = self.persistence_context.fetch_scalar(stmt)
        return int(result) if result else 0

    @service_operation("LAST PAGE")
    def last_page(self, results_per_page: int) -> int:
        if results_per_page is None:
            raise InvalidParameterError(
                "results_per_page", None, "results_per_page is required"
            )
        check_bound("results_per_page", results_per_page, minimum=1)
        return math.ceil(self.count() / results_per_page)

    @service_operation("LIST PAGE")
    def list_page(
        self,
        page_number: int,
        results_per_page: int,
        filters: Union[None, list[EntityFilter]] = None,
        sort_options: Union[None, list[SortOption]] = None,
    ) -> PaginatedOutput[ENTITY_TYPE]:
        check_bound("page_number", page_number, minimum=1)
        check_bound("results_per_page", results_per_page, minimum=1)
        offset = (page_number - 1) * results_per_page
        data = self.list_entities(filters, sort_options, offset, results_per_page)
        return PaginatedOutput(offset=offset, size=len(data), data=data)

    def find(self, query_options: QueryOptions) -> PaginatedOutput[ENTITY_TYPE]:
        data = self.list_entities(
            query_options.filters,
            query_options.sort_options,
            query_options.offset,
            query_options.limit,
        )
        offset = query_options.offset if query_options.offset else 0
        return PaginatedOutput(offset=offset, size=len(data), data=data)
