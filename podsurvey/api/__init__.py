"""Survey API routes."""

from podsurvey.api.admin import AdminController
from podsurvey.api.surveys import SurveysController

__all__ = ["AdminController", "SurveysController"]
