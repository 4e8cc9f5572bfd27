import datetime
from typing import Annotated, Any

import annotated_types
from pydantic import BeforeValidator, StringConstraints
from typing_extensions import TypeVar

from crudservice.domain.entities.identifiable import Identifiable
from crudservice.domain.shared.model_validators import validate_date, validate_datetime

Date = Annotated[datetime.date, BeforeValidator(validate_date)]
Datetime = Annotated[datetime.datetime, BeforeValidator(validate_datetime)]
ZeroOrPositiveInt = Annotated[int, annotated_types.Ge(0)]
PositiveInt = Annotated[int, annotated_types.Ge(1)]
AttributePath = Annotated[
    str,
    StringConstraints(pattern=r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"),
]

Params = dict[str, Any]

ENTITY_TYPE = TypeVar("ENTITY_TYPE", bound=Identifiable)
