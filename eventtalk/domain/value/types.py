"""Domain value objects for Event Talk.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from typing import Any

from pydantic import Field

from eventtalk.domain.value.common import ValueObject
from eventtalk.domain.value.identifiers import EventId

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def _coerce_positive_int(raw: Any, default: int) -> int:
    """Coerce a loosely typed value to a positive int, falling back to default."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return default
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return default
    return value if value >= 1 else default


class PageRequest(ValueObject):
    """A page of a sorted scan.

    Pages are 1-based. There is no upper bound on ``page_size``; asking for a
    page past the end simply yields no records.
    """

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @classmethod
    def from_raw(cls, page: Any = None, page_size: Any = None) -> "PageRequest":
        """Build a page request from untrusted input.

        Absent, non-numeric and non-positive values fall back to the defaults
        (page 1, 10 per page) instead of failing.
        """
        return cls(
            page=_coerce_positive_int(page, DEFAULT_PAGE),
            page_size=_coerce_positive_int(page_size, DEFAULT_PAGE_SIZE),
        )

    @property
    def offset(self) -> int:
        """Number of records to skip."""
        return (self.page - 1) * self.page_size

    def total_pages(self, total: int) -> int:
        """Number of pages needed to hold ``total`` records."""
        return math.ceil(total / self.page_size)


class CommentQuery(ValueObject):
    """Filter for comment scans.

    Both filters are optional; an empty query matches every comment.
    """

    event_id: EventId | None = None
    # Literal, case-insensitive substring of the comment content
    content_contains: str | None = None
