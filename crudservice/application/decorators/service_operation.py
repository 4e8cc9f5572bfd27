import functools
import logging
from typing import Any, Callable, TypeVar

from crudservice.domain.exceptions.service import ExecutionError, ServiceError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def service_operation(operation_name: str) -> Callable[[F], F]:
    """Re-raise service errors unchanged and wrap any other exception.

    Unexpected exceptions are logged with their stack trace and converted to
    ``ExecutionError`` so the detail is not exposed in the user message.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ServiceError:
                raise
            except Exception as ex:
                logger.exception("Unexpected error in %s", operation_name)
                raise ExecutionError(str(ex)) from ex

        return wrapper

    return decorator
