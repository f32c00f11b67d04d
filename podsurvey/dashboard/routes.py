"""Dashboard page and its form actions (requires authentication)."""

from typing import Annotated

from litestar import Request, get, post
from litestar.enums import RequestEncodingType
from litestar.params import Body
from litestar.response import Redirect, Template
from litestar.status_codes import HTTP_303_SEE_OTHER
from pydantic import BaseModel, Field

from podsurvey.auth.identity import SESSION_COOKIE, require_admin_guard
from podsurvey.dashboard.controller import DashboardController
from podsurvey.dashboard.filters import ALL
from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.theme import ThemeState
from podsurvey.utils import get_base_path


class FilterForm(BaseModel):
    """Filter inputs posted by the dashboard."""
    topic: str = Field(default=ALL, max_length=200)
    podcast_format: str = Field(default=ALL, max_length=200)
    search: str = Field(default="", max_length=200)


class PageForm(BaseModel):
    page: int


NAVIGATION = {
    "first": DashboardController.first_page,
    "previous": DashboardController.previous_page,
    "next": DashboardController.next_page,
    "last": DashboardController.last_page,
}


async def _controller(request: Request, dashboards: DashboardRegistry, theme: ThemeState, reload: bool = False) -> DashboardController:
    return await dashboards.open(request.cookies.get(SESSION_COOKIE), theme=theme, reload=reload)


def _back(request: Request, controller: DashboardController) -> Redirect:
    target = controller.redirect_to or "/dashboard"
    return Redirect(f"{get_base_path(request)}{target}", status_code=HTTP_303_SEE_OTHER)


@get("/dashboard", guards=[require_admin_guard])
async def dashboard_page(request: Request, dashboards: DashboardRegistry, theme: ThemeState) -> Template | Redirect:
    """Survey dashboard: statistics, filters and the current page of responses."""
    controller = await _controller(request, dashboards, theme, reload=True)
    if controller.redirect_to:
        return Redirect(f"{get_base_path(request)}{controller.redirect_to}")
    return Template(
        template_name="dashboard/index.html",
        context={
            "view": controller.view(),
            "theme": theme,
            "all_value": ALL,
        },
    )


@post("/dashboard/filters", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def update_filters(
    request: Request,
    dashboards: DashboardRegistry,
    theme: ThemeState,
    data: Annotated[FilterForm, Body(media_type=RequestEncodingType.URL_ENCODED)],
) -> Redirect:
    controller = await _controller(request, dashboards, theme)
    controller.update_filters(topic=data.topic, podcast_format=data.podcast_format, search=data.search)
    return _back(request, controller)


@post("/dashboard/filters/clear", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def clear_filters(request: Request, dashboards: DashboardRegistry, theme: ThemeState) -> Redirect:
    controller = await _controller(request, dashboards, theme)
    controller.clear_filters()
    return _back(request, controller)


@post("/dashboard/page", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def go_to_page(
    request: Request,
    dashboards: DashboardRegistry,
    theme: ThemeState,
    data: Annotated[PageForm, Body(media_type=RequestEncodingType.URL_ENCODED)],
) -> Redirect:
    controller = await _controller(request, dashboards, theme)
    controller.go_to_page(data.page)
    return _back(request, controller)


@post("/dashboard/page/{direction:str}", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def navigate(request: Request, dashboards: DashboardRegistry, theme: ThemeState, direction: str) -> Redirect:
    """First/previous/next/last page buttons; unknown directions are ignored."""
    controller = await _controller(request, dashboards, theme)
    move = NAVIGATION.get(direction)
    if move is not None:
        move(controller)
    return _back(request, controller)


@post("/dashboard/select/{record_id:str}", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def toggle_selection(request: Request, dashboards: DashboardRegistry, theme: ThemeState, record_id: str) -> Redirect:
    controller = await _controller(request, dashboards, theme)
    controller.toggle_selection(record_id)
    return _back(request, controller)


@post("/dashboard/selection/clear", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def clear_selection(request: Request, dashboards: DashboardRegistry, theme: ThemeState) -> Redirect:
    controller = await _controller(request, dashboards, theme)
    controller.clear_selection()
    return _back(request, controller)


@post("/dashboard/delete", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def delete_selected(request: Request, dashboards: DashboardRegistry, theme: ThemeState) -> Redirect:
    """Bulk-delete the selected surveys."""
    controller = await _controller(request, dashboards, theme)
    await controller.delete_selected()
    return _back(request, controller)


@post("/dashboard/refresh", guards=[require_admin_guard], status_code=HTTP_303_SEE_OTHER)
async def refresh(request: Request, dashboards: DashboardRegistry, theme: ThemeState) -> Redirect:
    """Re-fetch all surveys from the store."""
    controller = await _controller(request, dashboards, theme)
    await controller.load()
    return _back(request, controller)


routes = [
    dashboard_page,
    update_filters,
    clear_filters,
    go_to_page,
    navigate,
    toggle_selection,
    clear_selection,
    delete_selected,
    refresh,
]
