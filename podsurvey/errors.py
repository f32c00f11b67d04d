"""Exceptions raised by the survey service."""


class SurveyError(Exception):
    """Base class for survey service errors."""


class StoreError(SurveyError):
    """The record store failed (network, auth, constraint violation...)."""


class ValidationError(SurveyError):
    """A survey submission is incomplete or uses unknown values."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class AuthenticationError(SurveyError):
    """Admin sign-in was rejected."""
