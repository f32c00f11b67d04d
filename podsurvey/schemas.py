"""Pydantic schemas shared by the API, the store and the dashboard."""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from podsurvey.models import Survey


class SurveyRecord(BaseModel):
    """A submitted survey as seen by the dashboard (read-only)."""
    id: str
    name: str = ""
    topics: Tuple[str, ...] = ()
    description: str = ""
    podcast_formats: Tuple[str, ...] = ()
    suggested_guest: Optional[str] = None
    created_at: datetime

    class Config:
        frozen = True
        from_attributes = True

    @property
    def display_name(self) -> str:
        return self.name or "Anonymous"

    @classmethod
    def from_model(cls, survey: Survey) -> "SurveyRecord":
        return cls(
            id=str(survey.id),
            name=survey.name or "",
            topics=tuple(survey.topics or ()),
            description=survey.description or "",
            podcast_formats=tuple(survey.podcast_formats or ()),
            suggested_guest=survey.suggested_guest,
            created_at=survey.created_at,
        )


class SurveySubmission(BaseModel):
    """Request to submit a survey from the public form."""
    name: str = Field(default="", max_length=200, description="Respondent name, empty for anonymous")
    topics: list[str] = Field(default_factory=list, description="Selected topics")
    description: str = Field(default="", max_length=5000, description="What the respondent wants to hear about")
    podcast_formats: list[str] = Field(default_factory=list, description="Preferred formats")
    suggested_guest: Optional[str] = Field(default=None, max_length=200)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("suggested_guest", mode="before")
    @classmethod
    def _blank_guest_is_none(cls, value):
        # The form always sends the field; an empty box means "no suggestion".
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class SubmissionResponse(BaseModel):
    """Response after submitting a survey."""
    success: bool
    message: str
