"""Fixed-size paging over the filtered survey list."""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")

ITEMS_PER_PAGE = 10


def count_pages(total_items: int, items_per_page: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed for ``total_items``; never less than 1."""
    return max(math.ceil(total_items / items_per_page), 1)


@dataclass
class Paginator:
    """
    Page cursor over a list of ``total_items`` entries.

    ``current_page`` is one-based and always within ``[1, total_pages]``:
    navigation requests outside that range are clamped, never rejected.
    """
    total_items: int = 0
    current_page: int = 1
    items_per_page: int = ITEMS_PER_PAGE

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_items, self.items_per_page)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def reset(self, total_items: int) -> None:
        """Point at a new list and go back to page 1."""
        self.total_items = max(total_items, 0)
        self.current_page = 1

    def go_to_page(self, page: int) -> int:
        self.current_page = min(max(1, page), self.total_pages)
        return self.current_page

    def first_page(self) -> int:
        return self.go_to_page(1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def last_page(self) -> int:
        return self.go_to_page(self.total_pages)

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.items_per_page

    def page_slice(self, items: Sequence[T]) -> List[T]:
        start = self.offset
        return list(items[start:min(start + self.items_per_page, len(items))])

    def bounds(self) -> Tuple[int, int]:
        """One-based (first, last) positions shown on the current page; (0, 0) when empty."""
        if self.total_items == 0:
            return 0, 0
        return self.offset + 1, min(self.offset + self.items_per_page, self.total_items)
