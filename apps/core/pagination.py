"""
Offset pagination over an in-memory collection.

The whole collection is fetched once per page view; the paginator only picks
the visible window and the numbers behind the "Page X of Y" indicator.
"""
import math
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from django.conf import settings


@dataclass(frozen=True)
class Window:
    items: List[Any] = field(default_factory=list)
    offset: int = 0
    page_size: int = 5
    total: int = 0

    @property
    def page_number(self) -> int:
        return self.offset // self.page_size + 1

    @property
    def page_count(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    @property
    def has_next(self) -> bool:
        return self.offset + self.page_size < self.total

    @property
    def previous_offset(self) -> int:
        return max(0, self.offset - self.page_size)

    @property
    def next_offset(self) -> int:
        return self.offset + self.page_size if self.has_next else self.offset

    @property
    def start_index(self) -> int:
        """1-based position of the first visible row (0 when empty)."""
        return self.offset + 1 if self.items else 0

    @property
    def end_index(self) -> int:
        return self.offset + len(self.items)


def last_page_start(total: int, page_size: int) -> int:
    if total <= 0:
        return 0
    return ((total - 1) // page_size) * page_size


def clamp_offset(offset, total: int, page_size: int) -> int:
    """Coerce a raw offset (possibly from a query string) into range."""
    try:
        offset = int(offset)
    except (TypeError, ValueError):
        offset = 0
    return min(max(offset, 0), last_page_start(total, page_size))


def paginate(items: Sequence[Any], offset=0, page_size: int = None) -> Window:
    """Slice ``items`` to the window starting at ``offset``, clamped on every call."""
    page_size = settings.PAGE_SIZE if page_size is None else page_size
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    items = list(items)
    offset = clamp_offset(offset, len(items), page_size)
    return Window(
        items=items[offset:offset + page_size],
        offset=offset,
        page_size=page_size,
        total=len(items),
    )
