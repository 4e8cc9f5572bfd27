from typing import Any, Generic

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeVar

from crudservice.domain.shared.data_types import ZeroOrPositiveInt

T = TypeVar("T", default=Any)


class PaginatedOutput(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    offset: ZeroOrPositiveInt = 0
    size: ZeroOrPositiveInt = 0
    data: list[T] = []
