"""Filtering of survey records by topic, format and free-text search."""

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from podsurvey.schemas import SurveyRecord

ALL = "all"


@dataclass(frozen=True)
class FilterState:
    """
    Active dashboard filters. ``ALL`` disables a category filter and an
    empty ``search`` disables the text search.
    """
    topic: str = ALL
    podcast_format: str = ALL
    search: str = ""

    @property
    def is_unconstrained(self) -> bool:
        return self.topic == ALL and self.podcast_format == ALL and not self.search

    def cleared(self) -> "FilterState":
        return FilterState()

    def updated(
        self,
        topic: Optional[str] = None,
        podcast_format: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "FilterState":
        changes = {}
        if topic is not None:
            changes["topic"] = topic or ALL
        if podcast_format is not None:
            changes["podcast_format"] = podcast_format or ALL
        if search is not None:
            changes["search"] = search
        return replace(self, **changes)

    def matches(self, record: SurveyRecord) -> bool:
        if self.topic != ALL and self.topic not in record.topics:
            return False
        if self.podcast_format != ALL and self.podcast_format not in record.podcast_formats:
            return False
        if self.search:
            term = self.search.lower()
            haystacks = [record.name, record.description]
            if record.suggested_guest:
                haystacks.append(record.suggested_guest)
            if not any(term in text.lower() for text in haystacks):
                return False
        return True


def apply_filters(records: Iterable[SurveyRecord], state: FilterState) -> List[SurveyRecord]:
    """Records matching every active filter, in their original order."""
    return [record for record in records if state.matches(record)]


def available_labels(records: Iterable[SurveyRecord], field_name: str) -> List[str]:
    """Sorted distinct labels present in ``field_name`` across ``records``."""
    labels = set()
    for record in records:
        labels.update(getattr(record, field_name))
    return sorted(labels)
