import datetime
from typing import Any

DATETIME_FORMAT = "%d/%m/%Y %H:%M"
DATE_FORMAT = "%d/%m/%Y"


def validate_datetime(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.datetime.strptime(value, DATETIME_FORMAT)
        except ValueError:
            pass
    return value


def validate_date(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.datetime.strptime(value, DATE_FORMAT).date()
        except ValueError:
            pass
    return value
