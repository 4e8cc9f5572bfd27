import abc
from typing import Any, Generic, Union

from crudservice.domain.shared.data_types import ENTITY_TYPE, Params
from crudservice.domain.shared.repository.entity_filter import EntityFilter
from crudservice.domain.shared.repository.paginated_output import PaginatedOutput
from crudservice.domain.shared.repository.query_options import QueryOptions
from crudservice.domain.shared.repository.sort_option import SortOption


class AbstractReadRepository(abc.ABC, Generic[ENTITY_TYPE]):
    @abc.abstractmethod
    def read(
        self, id_: Any, params: Union[None, Params] = None
    ) -> Union[None, ENTITY_TYPE]: ...

    @abc.abstractmethod
    def list_entities(
        self,
        filters: Union[None, list[EntityFilter]] = None,
        sort_options: Union[None, list[SortOption]] = None,
        offset: Union[None, int] = None,
        limit: Union[None, int] = None,
    ) -> list[ENTITY_TYPE]: ...

    @abc.abstractmethod
    def count(self, filters: Union[None, list[EntityFilter]] = None) -> int: ...

    @abc.abstractmethod
    def last_page(self, results_per_page: int) -> int: ...

    @abc.abstractmethod
    def list_page(
        self,
        page_number: int,
        results_per_page: int,
        filters: Union[None, list[EntityFilter]] = None,
        sort_options: Union[None, list[SortOption]] = None,
    ) -> PaginatedOutput[ENTITY_TYPE]: ...

    @abc.abstractmethod
    def find(self, query_options: QueryOptions) -> PaginatedOutput[ENTITY_TYPE]: ...
