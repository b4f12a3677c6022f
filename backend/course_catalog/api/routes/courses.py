"""Courses: listing with search/sort/paging, detail, create, update, delete.

Invariants:
    - Listing query parameters keep their wire names (sortOrder, currentFilter,
      searchString, pageNumber); page size comes from settings, never the client
    - Detail and update answer 404 for a missing course
    - Update answers 404 when the path id and body id disagree
    - Delete always answers 204, whether or not the course existed
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.config import Settings, get_settings
from course_catalog.core.errors import CourseNotFoundError
from course_catalog.core.listing_state import compute_sort_toggles
from course_catalog.infrastructure.database import get_db
from course_catalog.schemas.course import (
    CourseCreate, CourseListResponse, CourseResponse, CourseUpdate,
    PaginationInfo, SortTogglesResponse,
)
from course_catalog.services.course_service import CourseService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/courses", tags=["courses"])


def get_course_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CourseService:
    return CourseService(db, case_sensitive=settings.search_case_sensitive)


@router.get("", response_model=CourseListResponse)
async def list_courses(
    sort_order: str | None = Query(None, alias="sortOrder"),
    current_filter: str | None = Query(None, alias="currentFilter"),
    search_string: str | None = Query(None, alias="searchString"),
    page_number: int | None = Query(None, alias="pageNumber", ge=1),
    service: CourseService = Depends(get_course_service),
    settings: Settings = Depends(get_settings),
):
    """List courses, filtered by search text, sorted, one page at a time."""
    listing = await service.list_page(
        sort_order, current_filter, search_string, page_number,
        settings.page_size,
    )
    page = listing.page
    toggles = compute_sort_toggles(sort_order)
    return CourseListResponse(
        courses=list(page.items),
        pagination=PaginationInfo(
            page_index=page.page_index,
            page_size=page.page_size,
            total_pages=page.total_pages,
            total_count=page.total_count,
            has_previous_page=page.has_previous_page,
            has_next_page=page.has_next_page,
        ),
        current_sort=sort_order,
        current_filter=listing.state.search_text,
        sort_toggles=SortTogglesResponse(
            title=toggles.title,
            topic=toggles.topic,
            release_date=toggles.release_date,
        ),
    )


@router.get("/all", response_model=list[CourseResponse])
async def list_all_courses(
    service: CourseService = Depends(get_course_service),
):
    """Every course, unpaged, ordered by title."""
    return await service.get_all()


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: int, service: CourseService = Depends(get_course_service),
):
    course = await service.get_by_id(course_id)
    if course is None:
        raise CourseNotFoundError(course_id)
    return course


@router.post(
    "", response_model=CourseResponse, status_code=status.HTTP_201_CREATED,
)
async def create_course(
    body: CourseCreate, service: CourseService = Depends(get_course_service),
):
    return await service.create(body)


@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: int,
    body: CourseUpdate,
    service: CourseService = Depends(get_course_service),
):
    """Replace a course. Body id must match the path id."""
    if body.id != course_id:
        raise CourseNotFoundError(course_id)
    return await service.update(course_id, body)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(
    course_id: int, service: CourseService = Depends(get_course_service),
):
    """Delete a course. Missing ids are accepted silently (idempotent)."""
    await service.delete(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
