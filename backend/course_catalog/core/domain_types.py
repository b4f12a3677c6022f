"""Domain Types: identity type and the sort directive enum for course listings.

Invariants:
    - SortKey values are exactly the six request tokens clients send as sortOrder
    - SortKey.from_token never raises: None, "" and unknown tokens give TITLE_ASC
    - Every SortKey maps to one Course field and one direction

Design Decisions:
    - str Enum: the member value doubles as the wire token
"""

from enum import Enum
from typing import NewType


CourseId = NewType("CourseId", int)


class SortField(str, Enum):
    """Course attributes a listing can be ordered by."""
    TITLE = "title"
    TOPIC = "topic"
    RELEASE_DATE = "release_date"


class SortKey(str, Enum):
    """Normalized sort directive derived from the sortOrder request token."""
    TITLE_ASC = "title"
    TITLE_DESC = "title_desc"
    TOPIC_ASC = "topic"
    TOPIC_DESC = "topic_desc"
    RELEASE_DATE_ASC = "release_date"
    RELEASE_DATE_DESC = "release_date_desc"

    @classmethod
    def from_token(cls, token: "str | SortKey | None") -> "SortKey":
        if isinstance(token, SortKey):
            return token
        try:
            return cls(token)
        except ValueError:
            return cls.TITLE_ASC

    @property
    def field(self) -> SortField:
        return SortField(self.value.removesuffix("_desc"))

    @property
    def descending(self) -> bool:
        return self.value.endswith("_desc")
