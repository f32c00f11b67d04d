"""Dependency providers shared by route handlers."""

from litestar import Request
from litestar.datastructures import State
from litestar.di import Provide

from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.store import SurveyStore
from podsurvey.theme import THEME_COOKIE, ThemeState


def provide_survey_store(state: State) -> SurveyStore:
    return state.survey_store


def provide_dashboards(state: State) -> DashboardRegistry:
    return state.dashboards


def provide_theme(request: Request) -> ThemeState:
    return ThemeState.from_cookie(request.cookies.get(THEME_COOKIE))


DEPENDENCIES = {
    "store": Provide(provide_survey_store, sync_to_thread=False),
    "dashboards": Provide(provide_dashboards, sync_to_thread=False),
    "theme": Provide(provide_theme, sync_to_thread=False),
}
