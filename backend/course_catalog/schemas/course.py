"""Course Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - title 1-200 chars, topic and author 1-100 chars, all stripped and non-blank
    - CourseUpdate carries the id so the route can reject path/body mismatches
    - CourseResponse reads straight from ORM rows (from_attributes)
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CourseBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    topic: str = Field(min_length=1, max_length=100)
    release_date: date
    author: str = Field(min_length=1, max_length=100)

    @field_validator("title", "topic", "author")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class CourseCreate(CourseBase):
    """Course creation request."""


class CourseUpdate(CourseBase):
    """Full replacement of a course's fields."""
    id: int = Field(ge=1)


class CourseResponse(BaseModel):
    """Public-facing course data (the listing/detail view)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    topic: str
    release_date: date
    author: str


class PaginationInfo(BaseModel):
    page_index: int
    page_size: int
    total_pages: int
    total_count: int
    has_previous_page: bool
    has_next_page: bool


class SortTogglesResponse(BaseModel):
    title: str
    topic: str
    release_date: str


class CourseListResponse(BaseModel):
    """One listing page plus the state a client needs to render paging and sort links."""
    courses: list[CourseResponse]
    pagination: PaginationInfo
    current_sort: str | None = None
    current_filter: str | None = None
    sort_toggles: SortTogglesResponse
