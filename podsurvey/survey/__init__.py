"""Public survey submission."""

from podsurvey.survey.validation import validate_submission

__all__ = ["validate_submission"]
