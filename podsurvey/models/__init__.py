"""Database models."""

from podsurvey.models.base import Base
from podsurvey.models.survey import Survey

__all__ = [
    "Base",
    "Survey",
]
