from typing import Any, Self, Union

from pydantic import BaseModel, ConfigDict, model_validator

from crudservice.domain.enums.filter_operator import FilterOperator
from crudservice.domain.exceptions.service import MissingParameterError
from crudservice.domain.shared.data_types import AttributePath


class EntityFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: AttributePath
    operator: FilterOperator = FilterOperator.EQ
    value: Union[None, Any] = None
    value2: Union[None, Any] = None
    case_sensitive: bool = True
    value_type: Union[None, str] = None
    value2_type: Union[None, str] = None

    @model_validator(mode="before")
    @classmethod
    def force_case_sensitivity(cls, data: Any) -> Any:
        # case folding is defined only for text operands
        if isinstance(data, dict) and not isinstance(data.get("value"), str):
            return {**data, "case_sensitive": True}
        return data

    @model_validator(mode="after")
    def check_operands(self) -> Self:
        if self.operator == FilterOperator.BETWEEN:
            if self.value is None:
                raise MissingParameterError(
                    "value", f"Lower bound is required to filter {self.key}"
                )
            if self.value2 is None:
                raise MissingParameterError(
                    "value2", f"Upper bound is required to filter {self.key}"
                )
        elif self.operator == FilterOperator.LIKE and self.value is None:
            raise MissingParameterError(
                "value", f"A pattern is required to filter {self.key}"
            )
        return self
