from crudservice.domain.enums.operation_type import OperationType
from crudservice.domain.exceptions.service import (
    DependingObjectsError,
    MissingParameterError,
)
from crudservice.domain.shared.data_types import Params
from crudservice.infrastructure.policies.default_entity_policy import (
    DefaultEntityPolicy,
)
from examples.bookstore.models import Author, Book


class AuthorPolicy(DefaultEntityPolicy[Author]):
    def validate(self, entity: Author, operation: OperationType, params: Params):
        if not entity.name:
            raise MissingParameterError("name", "Author name is required")

    def check_removable(self, entity: Author, params: Params) -> None:
        if entity.books:
            raise DependingObjectsError(
                f"Author {entity.id} has books", Book, [x.id for x in entity.books]
            )


class BookPolicy(DefaultEntityPolicy[Book]):
    def validate(self, entity: Book, operation: OperationType, params: Params):
        if not entity.title:
            raise MissingParameterError("title", "Book title is required")
