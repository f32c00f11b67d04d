"""Admin login and logout pages."""

import logging
from typing import Annotated
from urllib.parse import parse_qs

from litestar import Request, get, post
from litestar.enums import RequestEncodingType
from litestar.params import Body
from litestar.response import Redirect, Template
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_303_SEE_OTHER,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
)
from pydantic import BaseModel, Field

from podsurvey.auth.identity import SESSION_COOKIE, SESSION_TTL, admin_identity
from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.errors import AuthenticationError
from podsurvey.theme import ThemeState
from podsurvey.utils import get_base_path

logger = logging.getLogger("PodSurvey.auth")

ACCESS_DENIED = "Access denied. Invalid URL."


def has_admin_flag(request: Request) -> bool:
    """True when the URL carries the bare `admin` query flag (`/login?admin`)."""
    return "admin" in parse_qs(request.url.query, keep_blank_values=True)


class LoginForm(BaseModel):
    """Credentials posted by the login page."""
    email: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1, max_length=200)


def _login_page(theme: ThemeState, admin_access: bool, error: str | None = None, email: str = "", status_code: int = HTTP_200_OK) -> Template:
    return Template(
        template_name="auth/login.html",
        context={"theme": theme, "admin_access": admin_access, "error": error, "email": email},
        status_code=status_code,
    )


@get("/login")
async def login_page(request: Request, theme: ThemeState) -> Template | Redirect:
    """Login page; already signed-in admins go straight to the dashboard."""
    session = await admin_identity.get_session(request.cookies.get(SESSION_COOKIE))
    if session is not None:
        return Redirect(f"{get_base_path(request)}/dashboard")
    return _login_page(theme, admin_access=has_admin_flag(request))


@post("/login", status_code=HTTP_200_OK)
async def login_submit(
    request: Request,
    theme: ThemeState,
    data: Annotated[LoginForm, Body(media_type=RequestEncodingType.URL_ENCODED)],
) -> Template | Redirect:
    """Check credentials; only accepted when the page was opened with ``?admin``."""
    if not has_admin_flag(request):
        logger.warning("Login attempt without admin query parameter")
        return _login_page(theme, False, ACCESS_DENIED, data.email, HTTP_403_FORBIDDEN)

    try:
        session_id = await admin_identity.sign_in(data.email, data.password)
    except AuthenticationError as e:
        return _login_page(theme, True, str(e), data.email, HTTP_401_UNAUTHORIZED)

    response = Redirect(f"{get_base_path(request)}/dashboard", status_code=HTTP_303_SEE_OTHER)
    response.set_cookie(
        SESSION_COOKIE,
        session_id,
        max_age=SESSION_TTL,
        httponly=True,
        secure=request.url.scheme == "https",
        samesite="lax",
        path="/",
    )
    return response


async def _logout(request: Request, dashboards: DashboardRegistry) -> Redirect:
    session_id = request.cookies.get(SESSION_COOKIE)
    controller = dashboards.get(session_id) if session_id else None
    if controller is not None:
        await controller.logout()
        dashboards.discard(session_id)
    else:
        await admin_identity.sign_out(session_id)

    response = Redirect(f"{get_base_path(request)}/login?admin", status_code=HTTP_303_SEE_OTHER)
    response.delete_cookie(SESSION_COOKIE, path="/")
    return response


@get("/logout")
async def logout_get(request: Request, dashboards: DashboardRegistry) -> Redirect:
    """End the admin session (GET handler)."""
    return await _logout(request, dashboards)


@post("/logout", status_code=HTTP_303_SEE_OTHER)
async def logout_post(request: Request, dashboards: DashboardRegistry) -> Redirect:
    """End the admin session (form button)."""
    return await _logout(request, dashboards)


routes = [login_page, login_submit, logout_get, logout_post]
