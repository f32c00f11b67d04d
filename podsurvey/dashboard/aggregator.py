"""Frequency counts over the multi-valued survey fields."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from podsurvey.schemas import SurveyRecord

StatsTable = Dict[str, int]

CATEGORY_FIELDS = ("topics", "podcast_formats")


def count_labels(records: Iterable[SurveyRecord], field_name: str) -> StatsTable:
    """
    Count, for each label, how many records carry it in ``field_name``.

    A record listing the same label twice still counts once for it.
    """
    counts: Counter = Counter()
    for record in records:
        counts.update(list(dict.fromkeys(getattr(record, field_name))))
    return dict(counts)


def rank(table: StatsTable) -> List[Tuple[str, int]]:
    """Entries by descending count; ties keep first-seen order."""
    return sorted(table.items(), key=lambda item: item[1], reverse=True)


@dataclass
class SurveyStats:
    topics: StatsTable = field(default_factory=dict)
    podcast_formats: StatsTable = field(default_factory=dict)

    def ranked_topics(self) -> List[Tuple[str, int]]:
        return rank(self.topics)

    def ranked_formats(self) -> List[Tuple[str, int]]:
        return rank(self.podcast_formats)


def aggregate(records: Iterable[SurveyRecord]) -> SurveyStats:
    """Build the topic and format tables for a record collection."""
    records = list(records)
    return SurveyStats(
        topics=count_labels(records, "topics"),
        podcast_formats=count_labels(records, "podcast_formats"),
    )
