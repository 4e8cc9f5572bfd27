import enum
from collections.abc import Iterable
from typing import Any, Union

GENERIC_USER_MESSAGE = "Unexpected error"


class ServiceErrorCode(enum.IntEnum):
    GENERIC_ERROR = 1000
    INVALID_CLASS = 1001
    MISSING_PARAMETER = 1002
    INVALID_PARAMETER = 1003
    DEPENDING_OBJECTS = 1004


class ServiceError(Exception):
    def __init__(
        self,
        detailed_message: str,
        user_message: Union[None, str] = None,
        code: ServiceErrorCode = ServiceErrorCode.GENERIC_ERROR,
    ) -> None:
        super().__init__(user_message or detailed_message)
        self.code = code
        self.detailed_message = detailed_message
        self.user_message = user_message or detailed_message

    def __str__(self) -> str:
        return self.user_message


class ExecutionError(ServiceError):
    def __init__(self, detailed_message: str) -> None:
        super().__init__(detailed_message, GENERIC_USER_MESSAGE)


class InvalidClassError(ServiceError):
    def __init__(self, expected_class: type, actual_class: type, message: str) -> None:
        super().__init__(message, message, ServiceErrorCode.INVALID_CLASS)
        self.expected_class = expected_class
        self.actual_class = actual_class


class MissingParameterError(ServiceError):
    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message, message, ServiceErrorCode.MISSING_PARAMETER)
        self.parameter = parameter


class InvalidParameterError(ServiceError):
    def __init__(self, parameter: str, value: Any, message: str) -> None:
        super().__init__(message, message, ServiceErrorCode.INVALID_PARAMETER)
        self.parameter = parameter
        self.value = value


class DependingObjectsError(ServiceError):
    def __init__(
        self,
        message: str,
        depending_class: type,
        depending_ids: Union[Any, Iterable[Any]],
    ) -> None:
        super().__init__(message, message, ServiceErrorCode.DEPENDING_OBJECTS)
        self.depending_class = depending_class
        if isinstance(depending_ids, Iterable) and not isinstance(
            depending_ids, (str, bytes)
        ):
            self.depending_ids = list(depending_ids)
        else:
            self.depending_ids = [depending_ids]
