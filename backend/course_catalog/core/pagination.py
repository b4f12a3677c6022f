"""Pagination: immutable page-of-results container.

Invariants:
    - total_pages == ceil(total_count / page_size); 0 iff total_count == 0
    - page_index is stored as requested, never clamped; out-of-range pages
      simply carry an empty items tuple
    - has_previous_page / has_next_page derived from page_index and total_pages

Design Decisions:
    - Frozen dataclass over a list subclass: metadata cannot drift from items
"""

from dataclasses import dataclass
from math import ceil
from typing import Callable, Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PaginatedSequence(Generic[T]):
    """One page of an already-materialized result set plus paging metadata."""

    items: tuple[T, ...]
    page_index: int
    total_pages: int
    total_count: int
    page_size: int

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @classmethod
    def create(
        cls, source: Sequence[T], page_index: int, page_size: int,
    ) -> "PaginatedSequence[T]":
        """Slice page `page_index` (1-based) of `source`."""
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        count = len(source)
        offset = (page_index - 1) * page_size
        if offset < 0:
            items: tuple[T, ...] = ()
        else:
            items = tuple(source[offset:offset + page_size])
        return cls(
            items=items,
            page_index=page_index,
            total_pages=ceil(count / page_size),
            total_count=count,
            page_size=page_size,
        )

    def map(self, fn: Callable[[T], U]) -> "PaginatedSequence[U]":
        """Same page metadata, items transformed by fn."""
        return PaginatedSequence(
            items=tuple(fn(item) for item in self.items),
            page_index=self.page_index,
            total_pages=self.total_pages,
            total_count=self.total_count,
            page_size=self.page_size,
        )
