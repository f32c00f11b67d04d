"""Public survey page and theme toggle."""

from typing import Optional

from litestar import Request, get
from litestar.response import Redirect, Template

from podsurvey.theme import THEME_COOKIE, ThemeState
from podsurvey.utils import get_base_path
from podsurvey.vocabulary import PODCAST_FORMATS, TOPICS

THEME_COOKIE_MAX_AGE = 365 * 86400


@get(["/", "/survey"])
async def survey_form(theme: ThemeState) -> Template:
    """Anonymous survey form."""
    return Template(
        template_name="survey/form.html",
        context={"topics": TOPICS, "podcast_formats": PODCAST_FORMATS, "theme": theme},
    )


def _safe_next(target: Optional[str]) -> Optional[str]:
    # Only same-site absolute paths; "//host" would leave the site.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


@get("/theme/toggle")
async def toggle_theme(request: Request, theme: ThemeState, next: Optional[str] = None) -> Redirect:
    """Flip between light and dark mode and go back where the user came from."""
    target = _safe_next(next) or f"{get_base_path(request)}/"
    response = Redirect(target)
    response.set_cookie(
        THEME_COOKIE,
        theme.mode.toggled().value,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="lax",
        path="/",
    )
    return response


routes = [survey_form, toggle_theme]
