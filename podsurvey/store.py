"""Record store client for survey responses."""

import logging
import uuid
from typing import Callable, Iterable, List

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from podsurvey.errors import StoreError
from podsurvey.models import Survey
from podsurvey.schemas import SurveyRecord, SurveySubmission

logger = logging.getLogger("PodSurvey.store")


def _parse_ids(ids: Iterable[str]) -> List[uuid.UUID]:
    parsed = []
    for raw in ids:
        try:
            parsed.append(raw if isinstance(raw, uuid.UUID) else uuid.UUID(str(raw)))
        except ValueError as e:
            raise StoreError(f"Invalid survey id: {raw!r}") from e
    return parsed


class SurveyStore:
    """
    Read, insert and bulk-delete survey rows.

    Each call opens its own session from ``session_maker`` so a store can
    outlive any single request. Every database failure surfaces as
    ``StoreError``; nothing is retried.
    """

    def __init__(self, session_maker: Callable[[], AsyncSession]):
        self._session_maker = session_maker

    async def list(self) -> List[SurveyRecord]:
        """Return every survey, newest first."""
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(Survey).order_by(desc(Survey.created_at))
                )
                return [SurveyRecord.from_model(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise StoreError(f"Could not load surveys: {e}") from e

    async def insert(self, submission: SurveySubmission) -> SurveyRecord:
        """Store a new survey and return it with its id and timestamp."""
        survey = Survey(
            name=submission.name,
            topics=list(submission.topics),
            description=submission.description,
            podcast_formats=list(submission.podcast_formats),
            suggested_guest=submission.suggested_guest,
        )
        try:
            async with self._session_maker() as session:
                session.add(survey)
                await session.flush()
                record = SurveyRecord.from_model(survey)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not save survey: {e}") from e

        logger.info(f"Survey {record.id} stored")
        return record

    async def delete_by_ids(self, ids: Iterable[str]) -> int:
        """Delete the surveys with the given ids; returns the number removed."""
        parsed = _parse_ids(ids)
        if not parsed:
            return 0
        try:
            async with self._session_maker() as session:
                result = await session.execute(delete(Survey).where(Survey.id.in_(parsed)))
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not delete surveys: {e}") from e

        logger.info(f"Deleted {result.rowcount} of {len(parsed)} requested surveys")
        return result.rowcount
