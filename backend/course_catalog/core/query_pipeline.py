"""Query Pipeline: search filter and sort order for course listings.

Invariants:
    - filter_and_sort is pure: input is read once, never mutated
    - Empty or None search text keeps every item
    - A match is a substring hit on title, topic, or author
    - Text fields (title, topic) order by casefold() unless case_sensitive,
      matching the search predicate; case_sensitive orders by code point
    - Ties on the sort field are ordered by ascending id, in both directions

Design Decisions:
    - Works on any object exposing id/title/topic/release_date/author
      (ORM rows and schemas alike), so the same code runs over DB results
      and plain test fixtures
"""

from typing import Iterable, Protocol, TypeVar
from datetime import date

from course_catalog.core.domain_types import SortField, SortKey

SEARCHABLE_FIELDS = ("title", "topic", "author")


class CourseLike(Protocol):
    id: int
    title: str
    topic: str
    release_date: date
    author: str


C = TypeVar("C", bound=CourseLike)


def sort_field(sort_key: "SortKey | str | None") -> tuple[SortField, bool]:
    """Resolve a sort token to (field, descending)."""
    key = SortKey.from_token(sort_key)
    return key.field, key.descending


def matches_search(
    item: CourseLike, search_text: str | None, case_sensitive: bool = False,
) -> bool:
    if not search_text:
        return True
    if case_sensitive:
        return any(
            search_text in (getattr(item, name) or "")
            for name in SEARCHABLE_FIELDS
        )
    needle = search_text.casefold()
    return any(
        needle in (getattr(item, name) or "").casefold()
        for name in SEARCHABLE_FIELDS
    )


def sort_value(item: CourseLike, field: SortField, case_sensitive: bool = False):
    """Sort key for one field; text compares case-folded unless case_sensitive."""
    value = getattr(item, field.value)
    if isinstance(value, str) and not case_sensitive:
        return value.casefold()
    return value


def filter_and_sort(
    source: Iterable[C],
    search_text: str | None,
    sort_key: "SortKey | str | None",
    case_sensitive: bool = False,
) -> list[C]:
    """Filter by search text, then order by the sort key (ties by id)."""
    field, descending = sort_field(sort_key)
    matched = [
        item for item in source
        if matches_search(item, search_text, case_sensitive)
    ]
    # Two stable passes: id ascending survives the reversed field sort.
    matched.sort(key=lambda item: item.id)
    matched.sort(
        key=lambda item: sort_value(item, field, case_sensitive),
        reverse=descending,
    )
    return matched
