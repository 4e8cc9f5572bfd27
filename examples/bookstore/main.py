import logging

from crudservice.domain.enums.filter_operator import FilterOperator
from crudservice.domain.exceptions.service import ServiceError
from crudservice.domain.shared.repository.entity_filter import EntityFilter
from crudservice.domain.shared.repository.sort_option import SortOption
from crudservice.infrastructure.persistence.db.model.base import Base
from crudservice.infrastructure.repositories.default.db.default_write_repository import (  # noqa: E501
    SqlDbDefaultWriteRepository,
)
from crudservice.run.config_utils import set_application_configuration
from crudservice.run.containers import CrudServiceContainer
from examples.bookstore.models import Author, Book
from examples.bookstore.policies import AuthorPolicy, BookPolicy

logger = logging.getLogger(__name__)


class AuthorRepository(SqlDbDefaultWriteRepository[Author]):
    pass


class BookRepository(SqlDbDefaultWriteRepository[Book]):
    pass


def main() -> None:
    container = CrudServiceContainer()
    if not set_application_configuration(container):
        raise SystemExit(1)
    container.init_resources()
    database_client = container.database_client()
    database_client.create_schema(Base.metadata)

    with container.persistence_context() as context:
        authors = AuthorRepository(context, AuthorPolicy())
        books = BookRepository(context, BookPolicy())

        context.begin_transaction()
        author = authors.create(Author(name="Jane Austen"))
        books.create(Book(title="Emma", year=1815, author_id=author.id))
        books.create(Book(title="Persuasion", year=1817, author_id=author.id))
        context.commit()

        result = books.list_entities(
            [
                EntityFilter(
                    key="author.name",
                    operator=FilterOperator.LIKE,
                    value="%austen%",
                    case_sensitive=False,
                ),
                EntityFilter(
                    key="year",
                    operator=FilterOperator.GE,
                    value="1816",
                    value_type="int",
                ),
            ],
            [SortOption(key="title", case_sensitive=False)],
        )
        logger.info("Found books: %s", [x.title for x in result])

        try:
            authors.delete(author.id)
        except ServiceError as ex:
            logger.warning("Author is not deleted: %s", ex)
    container.shutdown_resources()


if __name__ == "__main__":
    main()
