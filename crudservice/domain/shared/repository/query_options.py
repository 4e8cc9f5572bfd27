from typing import Union

from pydantic import BaseModel

from crudservice.domain.shared.data_types import ZeroOrPositiveInt
from crudservice.domain.shared.repository.entity_filter import EntityFilter
from crudservice.domain.shared.repository.sort_option import SortOption


class QueryOptions(BaseModel):
    filters: Union[None, list[EntityFilter]] = None
    sort_options: Union[None, list[SortOption]] = None
    offset: Union[None, ZeroOrPositiveInt] = None
    limit: Union[None, ZeroOrPositiveInt] = None
