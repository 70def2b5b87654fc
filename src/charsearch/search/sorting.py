"""Ordering specifications for search results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Mapping, Tuple, Union

from charsearch.exceptions import QueryError


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class Order:
    """Sort on one entity property."""

    prop: str
    direction: Direction = Direction.ASC

    @classmethod
    def asc(cls, prop: str) -> Order:
        return cls(prop, Direction.ASC)

    @classmethod
    def desc(cls, prop: str) -> Order:
        return cls(prop, Direction.DESC)

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC


@dataclass(frozen=True, slots=True)
class Sort:
    """An ordered list of ``Order`` entries; the first one is the primary key.

    Example:
        >>> Sort.by("name")
        >>> Sort.by("publisher", "name").descending()
        >>> Sort.by(Order.desc("publisher"), Order.asc("name"))
    """

    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: Union[str, Order], direction: Direction = Direction.ASC) -> Sort:
        orders = tuple(p if isinstance(p, Order) else Order(p, direction) for p in properties)
        return cls(orders)

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    @classmethod
    def parse(cls, spec: str) -> Sort:
        """Parse ``"name"`` or ``"-publisher,name"`` (``-`` means descending)."""
        orders: List[Order] = []
        for raw in spec.split(","):
            item = raw.strip()
            if not item:
                continue
            if item.startswith("-"):
                orders.append(Order.desc(item[1:].strip()))
            else:
                orders.append(Order.asc(item.lstrip("+").strip()))
        return cls(tuple(orders))

    def ascending(self) -> Sort:
        return Sort(tuple(Order.asc(o.prop) for o in self.orders))

    def descending(self) -> Sort:
        return Sort(tuple(Order.desc(o.prop) for o in self.orders))

    def and_(self, other: Sort) -> Sort:
        return Sort(self.orders + other.orders)

    def to_pairs(self, field_mapping: Mapping[str, str]) -> List[Tuple[str, int]]:
        """Translate to ``(document key, 1|-1)`` pairs.

        Raises:
            QueryError: If a property is not a known entity field.
        """
        pairs: List[Tuple[str, int]] = []
        for order in self.orders:
            key = field_mapping.get(order.prop)
            if key is None:
                raise QueryError(
                    f"Cannot sort on unknown property '{order.prop}'; "
                    f"expected one of {sorted(field_mapping)}"
                )
            pairs.append((key, 1 if order.is_ascending else -1))
        return pairs

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __bool__(self) -> bool:
        return bool(self.orders)
