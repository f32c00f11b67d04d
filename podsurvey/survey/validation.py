"""Checks a survey submission must pass before it reaches the store."""

from typing import Iterable

from podsurvey.errors import ValidationError
from podsurvey.schemas import SurveySubmission
from podsurvey.vocabulary import PODCAST_FORMATS, TOPICS


def _unknown(values: Iterable[str], vocabulary: Iterable[str]) -> list[str]:
    allowed = set(vocabulary)
    return [value for value in values if value not in allowed]


def validate_submission(submission: SurveySubmission) -> SurveySubmission:
    """
    Validate a submission and return it with duplicate selections removed.

    Raises:
        ValidationError: no topic or no format was selected, or a selected
            value is not part of the fixed vocabulary.
    """
    if not submission.topics:
        raise ValidationError("Please select at least one topic", field="topics")

    if not submission.podcast_formats:
        raise ValidationError("Please select at least one podcast format", field="podcast_formats")

    bad_topics = _unknown(submission.topics, TOPICS)
    if bad_topics:
        raise ValidationError(f"Unknown topic: {bad_topics[0]}", field="topics")

    bad_formats = _unknown(submission.podcast_formats, PODCAST_FORMATS)
    if bad_formats:
        raise ValidationError(f"Unknown podcast format: {bad_formats[0]}", field="podcast_formats")

    return submission.model_copy(
        update={
            "topics": list(dict.fromkeys(submission.topics)),
            "podcast_formats": list(dict.fromkeys(submission.podcast_formats)),
        }
    )
