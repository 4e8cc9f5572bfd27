from pydantic import BaseModel, ConfigDict

from crudservice.domain.enums.sort_order import SortOrder
from crudservice.domain.shared.data_types import AttributePath


class SortOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: AttributePath
    order: SortOrder = SortOrder.ASC
    case_sensitive: bool = True
