"""Public survey submission API."""

import logging

from litestar import Controller, post
from litestar.response import Response
from litestar.status_codes import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_503_SERVICE_UNAVAILABLE

from podsurvey.errors import StoreError, ValidationError
from podsurvey.schemas import SubmissionResponse, SurveySubmission
from podsurvey.store import SurveyStore
from podsurvey.survey import validate_submission
from podsurvey.utils.logging import error_log

logger = logging.getLogger("PodSurvey.surveys")


def _reply(success: bool, message: str, status_code: int) -> Response[dict]:
    return Response(
        content=SubmissionResponse(success=success, message=message).model_dump(),
        status_code=status_code,
        media_type="application/json",
    )


class SurveysController(Controller):
    """API endpoint behind the public survey form."""

    path = "/api/surveys"
    tags = ["surveys"]

    @post("/")
    async def submit_survey(self, data: SurveySubmission, store: SurveyStore) -> Response[dict]:
        """Submit a survey response."""
        try:
            submission = validate_submission(data)
        except ValidationError as e:
            logger.info(f"Rejected survey submission: {e.message}")
            return _reply(False, e.message, HTTP_400_BAD_REQUEST)

        try:
            record = await store.insert(submission)
        except StoreError as e:
            error_log("Error saving survey", exc=e)
            return _reply(
                False,
                "Sorry, we could not save your answers. Please try again later.",
                HTTP_503_SERVICE_UNAVAILABLE,
            )

        logger.info(f"Survey submitted by {record.display_name} ({len(record.topics)} topics)")
        return _reply(True, "Thank you for your submission!", HTTP_201_CREATED)
