"""Listing State: effective search/page resolution and column sort toggles.

Invariants:
    - A provided search_string (any non-None value, "" included) resets the
      page to 1 and replaces the previous filter
    - Without a new search, the previous filter is kept and page defaults to 1
    - Sort toggles are the tokens each column header links to next
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingState:
    """Effective values for one listing call."""
    search_text: str | None
    page_number: int


@dataclass(frozen=True)
class SortToggles:
    """Next sortOrder token per sortable column ("" means default order)."""
    title: str
    topic: str
    release_date: str


def resolve_listing_state(
    current_filter: str | None,
    search_string: str | None,
    page_number: int | None,
) -> ListingState:
    if search_string is not None:
        return ListingState(search_text=search_string, page_number=1)
    return ListingState(search_text=current_filter, page_number=page_number or 1)


def compute_sort_toggles(sort_order: str | None) -> SortToggles:
    """Clicking the active ascending column flips it; any other click sorts ascending."""
    default = not sort_order
    return SortToggles(
        title="title_desc" if default or sort_order == "title" else "",
        topic="topic_desc" if default or sort_order == "topic" else "topic",
        release_date=(
            "release_date_desc"
            if default or sort_order == "release_date"
            else "release_date"
        ),
    )
