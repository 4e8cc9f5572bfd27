import operator
from typing import Any, Union

from sqlalchemy import Select, String, and_, func, inspect, literal, select, true
from sqlalchemy.orm import MapperProperty, RelationshipProperty, aliased

from crudservice.domain.enums.filter_operator import FilterOperator
from crudservice.domain.enums.sort_order import SortOrder
from crudservice.domain.exceptions.service import InvalidParameterError
from crudservice.domain.shared.operand_decoder import coerce_operand
from crudservice.domain.shared.repository.entity_filter import EntityFilter
from crudservice.domain.shared.repository.sort_option import SortOption

_RELATIONSHIP_OPERATORS = frozenset(
    {
        FilterOperator.IS_NULL,
        FilterOperator.IS_NOT_NULL,
        FilterOperator.IS_EMPTY,
        FilterOperator.IS_NOT_EMPTY,
    }
)

_COMPARATORS = {
    FilterOperator.EQ: operator.eq,
    FilterOperator.NEQ: operator.ne,
    FilterOperator.LT: operator.lt,
    FilterOperator.LE: operator.le,
    FilterOperator.GT: operator.gt,
    FilterOperator.GE: operator.ge,
}


class FilterTranslator:
    """Builds SQLAlchemy select statements from filters and sort options.

    A dotted key such as ``customer.address.city`` is resolved with a LEFT
    OUTER JOIN for each relationship segment. Joins are shared by filters and
    sort options within the same statement.
    """

    def __init__(self, entity_class: type) -> None:
        self.entity_class = entity_class

    def build_query(
        self,
        filters: Union[None, list[EntityFilter]] = None,
        sort_options: Union[None, list[SortOption]] = None,
    ) -> Select:
        stmt = select(self.entity_class)
        joins: dict[str, Any] = {}
        if filters:
            predicate = true()
            for item in filters:
                stmt, attribute, prop = self._resolve_path(stmt, joins, item.key)
                if (
                    isinstance(prop, RelationshipProperty)
                    and item.operator not in _RELATIONSHIP_OPERATORS
                ):
                    raise InvalidParameterError(
                        "key",
                        item.key,
                        f"{item.key} is a relationship and can not be used "
                        f"with {item.operator.value}",
                    )
                predicate = and_(predicate, self._build_predicate(attribute, item))
            stmt = stmt.where(predicate)
        if sort_options:
            terms = []
            for item in sort_options:
                stmt, attribute, prop = self._resolve_path(stmt, joins, item.key)
                if isinstance(prop, RelationshipProperty):
                    raise InvalidParameterError(
                        "key", item.key, f"{item.key} is a relationship"
                    )
                terms.append(self._build_sort_term(attribute, item))
            stmt = stmt.order_by(*terms)
        return stmt

    def build_count_query(
        self, filters: Union[None, list[EntityFilter]] = None
    ) -> Select:
        subquery = self.build_query(filters).subquery()
        return select(func.count()).select_from(subquery)

    def _resolve_path(
        self, stmt: Select, joins: dict[str, Any], path: str
    ) -> tuple[Select, Any, MapperProperty]:
        segments = path.split(".")
        current = self.entity_class
        for index, segment in enumerate(segments[:-1]):
            prefix = ".".join(segments[: index + 1])
            target = joins.get(prefix)
            if target is None:
                relationship = self._get_property(current, segment, path)
                if not isinstance(relationship, RelationshipProperty):
                    raise InvalidParameterError(
                        "key", path, f"{segment} is not a relationship in {path}"
                    )
                target = aliased(relationship.mapper.class_)
                stmt = stmt.outerjoin(getattr(current, segment).of_type(target))
                joins[prefix] = target
            current = target
        prop = self._get_property(current, segments[-1], path)
        return stmt, getattr(current, segments[-1]), prop

    def _get_property(self, current: Any, name: str, path: str) -> MapperProperty:
        mapper = inspect(current).mapper
        if name not in mapper.attrs:
            raise InvalidParameterError(
                "key",
                path,
                f"{mapper.class_.__name__} has no attribute {name}",
            )
        return mapper.attrs[name]

    def _build_predicate(self, attribute: Any, item: EntityFilter) -> Any:
        op = item.operator
        if op == FilterOperator.IS_NULL:
            return attribute == None  # noqa: E711
        if op == FilterOperator.IS_NOT_NULL:
            return attribute != None  # noqa: E711
        if op in (FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY):
            prop = attribute.property
            if not isinstance(prop, RelationshipProperty) or not prop.uselist:
                raise InvalidParameterError(
                    "key", item.key, f"{item.key} is not a collection"
                )
            if op == FilterOperator.IS_EMPTY:
                return ~attribute.any()
            return attribute.any()

        operands = [coerce_operand(item.value, item.value_type)]
        if op == FilterOperator.BETWEEN:
            operands.append(coerce_operand(item.value2, item.value2_type))
        if not item.case_sensitive and all(isinstance(x, str) for x in operands):
            attribute = func.upper(attribute)
            operands = [func.upper(literal(x)) for x in operands]

        if op == FilterOperator.LIKE:
            return attribute.like(operands[0])
        if op == FilterOperator.BETWEEN:
            return attribute.between(operands[0], operands[1])
        return _COMPARATORS[op](attribute, operands[0])

    def _build_sort_term(self, attribute: Any, item: SortOption) -> Any:
        if not item.case_sensitive and isinstance(attribute.expression.type, String):
            attribute = func.upper(attribute)
        if item.order == SortOrder.ASC:
            return attribute.asc()
        return attribute.desc()
