"""Survey ids marked for bulk deletion."""

from typing import Iterable, Iterator, List


class SelectionSet:
    """Insertion-ordered set of record ids, independent of paging and filters."""

    def __init__(self, ids: Iterable[str] = ()):
        self._ids = dict.fromkeys(ids)

    def mark(self, record_id: str) -> None:
        self._ids[record_id] = None

    def unmark(self, record_id: str) -> None:
        self._ids.pop(record_id, None)

    def toggle(self, record_id: str) -> bool:
        """Flip membership of ``record_id``; returns True if it is now marked."""
        if record_id in self._ids:
            self.unmark(record_id)
            return False
        self.mark(record_id)
        return True

    def discard_many(self, record_ids: Iterable[str]) -> None:
        for record_id in record_ids:
            self._ids.pop(record_id, None)

    def clear(self) -> None:
        self._ids.clear()

    def ids(self) -> List[str]:
        return list(self._ids)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __bool__(self) -> bool:
        return bool(self._ids)
