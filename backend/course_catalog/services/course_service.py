"""Course Service: listing orchestration and CRUD over the courses table.

Invariants:
    - Listing loads candidate rows in exactly one query, then hands them to the
      pure pipeline (filter_and_sort) and paginator (PaginatedSequence.create)
    - get_by_id returns None for a missing course; update raises CourseNotFoundError
    - delete of a missing id is a no-op that returns False (idempotent DELETE)
    - Persistence errors propagate untouched (no retry)

Design Decisions:
    - SQL narrows candidates with a case-insensitive icontains and orders by
      (field, id); the Python pipeline then applies the exact predicate and the
      authoritative order, so case-sensitive mode behaves the same on every dialect
"""

import logging
from dataclasses import dataclass

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.core.domain_types import CourseId, SortKey
from course_catalog.core.errors import CourseNotFoundError
from course_catalog.core.listing_state import ListingState, resolve_listing_state
from course_catalog.core.pagination import PaginatedSequence
from course_catalog.core.query_pipeline import (
    SEARCHABLE_FIELDS, filter_and_sort, sort_field,
)
from course_catalog.models.course import Course as CourseModel
from course_catalog.schemas.course import (
    CourseCreate, CourseResponse, CourseUpdate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CourseListing:
    """A listing page together with the effective state that produced it."""
    page: PaginatedSequence[CourseResponse]
    state: ListingState


class CourseService:
    """Catalog operations bound to one request's database session."""

    def __init__(self, db: AsyncSession, case_sensitive: bool = False):
        self.db = db
        self.case_sensitive = case_sensitive

    async def list_courses(
        self,
        sort_order: str | None,
        current_filter: str | None,
        search_string: str | None,
        page_number: int | None,
        page_size: int,
    ) -> PaginatedSequence[CourseResponse]:
        """Filter, sort and paginate courses per the listing request."""
        listing = await self.list_page(
            sort_order, current_filter, search_string, page_number, page_size,
        )
        return listing.page

    async def list_page(
        self,
        sort_order: str | None,
        current_filter: str | None,
        search_string: str | None,
        page_number: int | None,
        page_size: int,
    ) -> CourseListing:
        """Like list_courses, but also returns the resolved search/page state."""
        state = resolve_listing_state(current_filter, search_string, page_number)
        sort_key = SortKey.from_token(sort_order)

        result = await self.db.execute(
            self._candidate_query(state.search_text, sort_key),
        )
        rows = result.scalars().all()

        ordered = filter_and_sort(
            rows, state.search_text, sort_key, self.case_sensitive,
        )
        page = PaginatedSequence.create(ordered, state.page_number, page_size)
        logger.debug(
            "Listed courses",
            extra={
                "sort_order": sort_key.value,
                "page_index": page.page_index,
                "total_count": page.total_count,
            },
        )
        return CourseListing(
            page=page.map(CourseResponse.model_validate), state=state,
        )

    async def get_all(self) -> list[CourseResponse]:
        """Every course in title order (same ordering rules as the listing)."""
        result = await self.db.execute(
            select(CourseModel).order_by(CourseModel.title, CourseModel.id),
        )
        ordered = filter_and_sort(
            result.scalars().all(), None, SortKey.TITLE_ASC, self.case_sensitive,
        )
        return [CourseResponse.model_validate(c) for c in ordered]

    async def get_by_id(self, course_id: CourseId) -> CourseResponse | None:
        course = await self.db.get(CourseModel, course_id)
        if course is None:
            return None
        return CourseResponse.model_validate(course)

    async def create(self, data: CourseCreate) -> CourseResponse:
        course = CourseModel(**data.model_dump())
        self.db.add(course)
        await self.db.commit()
        await self.db.refresh(course)
        logger.info(
            f"Course created: {course.title}", extra={"course_id": course.id},
        )
        return CourseResponse.model_validate(course)

    async def update(
        self, course_id: CourseId, data: CourseUpdate,
    ) -> CourseResponse:
        """Overwrite every mutable field. Raises CourseNotFoundError if absent."""
        course = await self.db.get(CourseModel, course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        for name, value in data.model_dump(exclude={"id"}).items():
            setattr(course, name, value)
        await self.db.commit()
        await self.db.refresh(course)
        logger.info("Course updated", extra={"course_id": course_id})
        return CourseResponse.model_validate(course)

    async def delete(self, course_id: CourseId) -> bool:
        """Delete a course; a missing id leaves the store unchanged."""
        course = await self.db.get(CourseModel, course_id)
        if course is None:
            logger.warning(
                f"Course {course_id} not found, nothing deleted",
                extra={"course_id": course_id},
            )
            return False
        await self.db.delete(course)
        await self.db.commit()
        logger.info("Course deleted", extra={"course_id": course_id})
        return True

    @staticmethod
    def _candidate_query(search_text: str | None, sort_key: SortKey):
        field, descending = sort_field(sort_key)
        column = getattr(CourseModel, field.value)
        query = select(CourseModel).order_by(
            column.desc() if descending else column.asc(), CourseModel.id,
        )
        if search_text:
            query = query.where(or_(*(
                getattr(CourseModel, name).icontains(search_text, autoescape=True)
                for name in SEARCHABLE_FIELDS
            )))
        return query
