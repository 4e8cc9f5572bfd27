import datetime
import json
import logging
from decimal import Decimal
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from crudservice.domain.enums.operand_type import OperandType
from crudservice.domain.exceptions.service import InvalidParameterError
from crudservice.domain.shared.data_types import Date, Datetime

logger = logging.getLogger(__name__)

OPERAND_PYTHON_TYPES: dict[OperandType, type] = {
    OperandType.STRING: str,
    OperandType.INTEGER: int,
    OperandType.FLOAT: float,
    OperandType.DECIMAL: Decimal,
    OperandType.BOOLEAN: bool,
    OperandType.DATE: datetime.date,
    OperandType.DATETIME: datetime.datetime,
}

_OPERAND_ADAPTERS: dict[OperandType, TypeAdapter] = {
    OperandType.STRING: TypeAdapter(str),
    OperandType.INTEGER: TypeAdapter(int),
    OperandType.FLOAT: TypeAdapter(float),
    OperandType.DECIMAL: TypeAdapter(Decimal),
    OperandType.BOOLEAN: TypeAdapter(bool),
    OperandType.DATE: TypeAdapter(Date),
    OperandType.DATETIME: TypeAdapter(Datetime),
}


def decode_operand(text: str, operand_type: OperandType) -> Any:
    """Decode a JSON encoded operand into the python type of ``operand_type``.

    Datetimes are accepted as ``dd/MM/yyyy HH:mm`` or ISO-8601, dates as
    ``dd/MM/yyyy`` or ISO-8601.
    """
    try:
        return _OPERAND_ADAPTERS[operand_type].validate_json(text)
    except ValidationError as ex:
        raise InvalidParameterError(
            "value", text, f"Value {text} is not a valid {operand_type.value}"
        ) from ex


def coerce_operand(value: Any, type_hint: Union[None, str, OperandType]) -> Any:
    """Convert a transport-neutral operand into the hinted type.

    Unknown type hints are logged and the operand is returned unchanged.
    """
    if value is None or type_hint is None:
        return value
    try:
        operand_type = OperandType(type_hint)
    except ValueError:
        logger.error(
            "Unsupported operand type '%s'. Operand %r is used without conversion.",
            type_hint,
            value,
        )
        return value
    if type(value) is OPERAND_PYTHON_TYPES[operand_type]:
        return value
    if operand_type != OperandType.STRING and isinstance(value, (bool, int, float)):
        return decode_operand(json.dumps(value), operand_type)
    return decode_operand(json.dumps(str(value)), operand_type)
