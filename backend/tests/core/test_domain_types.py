"""Domain Types: SortKey token parsing and field/direction mapping."""

import pytest

from course_catalog.core.domain_types import CourseId, SortField, SortKey


def test_course_id_wraps_int():
    assert CourseId(7) == 7


def test_sort_key_has_six_members():
    assert {k.value for k in SortKey} == {
        "title", "title_desc", "topic", "topic_desc",
        "release_date", "release_date_desc",
    }


@pytest.mark.parametrize("token", [None, "", "unknown", "Title"])
def test_from_token_defaults_to_title_asc(token):
    assert SortKey.from_token(token) is SortKey.TITLE_ASC


def test_from_token_passes_members_through():
    assert SortKey.from_token(SortKey.TOPIC_DESC) is SortKey.TOPIC_DESC


@pytest.mark.parametrize("key,field,descending", [
    (SortKey.TITLE_ASC, SortField.TITLE, False),
    (SortKey.TITLE_DESC, SortField.TITLE, True),
    (SortKey.TOPIC_ASC, SortField.TOPIC, False),
    (SortKey.TOPIC_DESC, SortField.TOPIC, True),
    (SortKey.RELEASE_DATE_ASC, SortField.RELEASE_DATE, False),
    (SortKey.RELEASE_DATE_DESC, SortField.RELEASE_DATE, True),
])
def test_field_and_direction(key, field, descending):
    assert key.field is field
    assert key.descending is descending
