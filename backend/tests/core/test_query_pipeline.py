"""Query pipeline: search predicate, six sort orders, id tie-break."""

from dataclasses import dataclass
from datetime import date

import pytest

from course_catalog.core.domain_types import SortField, SortKey
from course_catalog.core.query_pipeline import (
    filter_and_sort, matches_search, sort_field,
)


@dataclass
class FakeCourse:
    id: int
    title: str
    topic: str
    release_date: date
    author: str


@pytest.fixture
def courses():
    return [
        FakeCourse(1, "Python Basics", "Programming", date(2021, 3, 1), "Ada Lovelace"),
        FakeCourse(2, "Linear Algebra", "Math", date(2019, 7, 15), "Carl Gauss"),
        FakeCourse(3, "Cooking 101", "Food", date(2023, 1, 10), "Julia Child"),
        FakeCourse(4, "Advanced Python", "Programming", date(2022, 5, 5), "Guido Rossum"),
        FakeCourse(5, "Algebra II", "Math", date(2020, 9, 9), "Emmy Noether"),
    ]


def test_no_search_keeps_everything(courses):
    assert len(filter_and_sort(courses, None, "title")) == 5
    assert len(filter_and_sort(courses, "", "title")) == 5


def test_search_matches_title_topic_or_author(courses):
    by_title = filter_and_sort(courses, "Python", None)
    assert {c.id for c in by_title} == {1, 4}

    by_topic = filter_and_sort(courses, "Food", None)
    assert [c.id for c in by_topic] == [3]

    by_author = filter_and_sort(courses, "Noether", None)
    assert [c.id for c in by_author] == [5]


def test_search_is_case_insensitive_by_default(courses):
    result = filter_and_sort(courses, "algebra", None)
    assert {c.id for c in result} == {2, 5}


def test_case_sensitive_search_respects_case(courses):
    assert filter_and_sort(courses, "algebra", None, case_sensitive=True) == []
    result = filter_and_sort(courses, "Algebra", None, case_sensitive=True)
    assert {c.id for c in result} == {2, 5}


def test_search_with_no_match_is_empty(courses):
    assert filter_and_sort(courses, "Astronomy", "topic_desc") == []


@pytest.mark.parametrize("token,field,descending", [
    ("title", "title", False),
    ("title_desc", "title", True),
    ("topic", "topic", False),
    ("topic_desc", "topic", True),
    ("release_date", "release_date", False),
    ("release_date_desc", "release_date", True),
])
def test_each_sort_token_is_monotonic(courses, token, field, descending):
    result = filter_and_sort(courses, None, token)
    values = [getattr(c, field) for c in result]
    assert values == sorted(values, reverse=descending)


@pytest.mark.parametrize("token", [None, "", "price", "TITLE"])
def test_unknown_token_falls_back_to_title_ascending(courses, token):
    result = filter_and_sort(courses, None, token)
    assert [c.title for c in result] == sorted(c.title for c in courses)


def test_ties_broken_by_ascending_id_in_both_directions(courses):
    asc = filter_and_sort(courses, None, SortKey.TOPIC_ASC)
    assert [c.id for c in asc] == [3, 2, 5, 1, 4]
    desc = filter_and_sort(courses, None, SortKey.TOPIC_DESC)
    assert [c.id for c in desc] == [1, 4, 2, 5, 3]


def test_input_is_not_mutated(courses):
    original = list(courses)
    filter_and_sort(courses, "a", "title_desc")
    assert courses == original


def test_accepts_a_one_shot_iterator(courses):
    result = filter_and_sort(iter(courses), "Programming", "release_date")
    assert [c.id for c in result] == [1, 4]


def test_sort_field_resolution():
    assert sort_field("release_date_desc") == (SortField.RELEASE_DATE, True)
    assert sort_field("bogus") == (SortField.TITLE, False)


def test_matches_search_with_empty_text(courses):
    assert matches_search(courses[0], "") is True
    assert matches_search(courses[0], None) is True


def _titled(*titles):
    return [
        FakeCourse(i, title, "Topic", date(2020, 1, 1), "Author")
        for i, title in enumerate(titles, start=1)
    ]


def test_text_sort_ignores_case_by_default():
    courses = _titled("banana", "Zebra", "cherry", "Apple")
    result = filter_and_sort(courses, None, "title")
    assert [c.title for c in result] == ["Apple", "banana", "cherry", "Zebra"]
    result = filter_and_sort(courses, None, "title_desc")
    assert [c.title for c in result] == ["Zebra", "cherry", "banana", "Apple"]


def test_case_sensitive_text_sort_uses_code_points():
    courses = _titled("banana", "Zebra", "cherry", "Apple")
    result = filter_and_sort(courses, None, "title", case_sensitive=True)
    assert [c.title for c in result] == ["Apple", "Zebra", "banana", "cherry"]


def test_case_only_differences_tie_and_fall_back_to_id():
    courses = _titled("python", "Python", "PYTHON")
    result = filter_and_sort(courses, None, "title_desc")
    assert [c.id for c in result] == [1, 2, 3]
