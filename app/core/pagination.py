"""
Page envelope for paginated listings.

A Page describes one window of a larger filtered result set. It never fetches
anything itself: prev/next are page indexes for the caller to query when
followed.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One page of results.

    Attributes:
        items: Rows on this page, in query order
        page: Zero-based page index
        offset: Number of rows skipped before this page (page_size * page)
        total: Total number of rows matching the query, across all pages
    """
    items: List[T]
    page: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @classmethod
    def build(cls, items: List[T], page: int, page_size: int, total: int) -> "Page[T]":
        """Create a page, deriving the offset from the page index and size."""
        return cls(items=items, page=page, offset=calculate_offset(page, page_size), total=total)

    @property
    def prev(self) -> Optional[int]:
        """Index of the previous page, or None on the first page."""
        return self.page - 1 if self.page > 0 else None

    @property
    def next(self) -> Optional[int]:
        """Index of the next page, or None when this page reaches the end."""
        return self.page + 1 if self.offset + len(self.items) < self.total else None

    class Config:
        frozen = True  # Envelopes are read-only snapshots of one query


def calculate_offset(page: int, page_size: int) -> int:
    """Number of rows to skip to reach `page` when pages hold `page_size` rows."""
    return page_size * page
