import logging
import os
from os import getenv
from pathlib import Path

# Load .env before importing modules that read configuration at import time
# (podsurvey.auth.identity reads the admin credentials).
ENV_FILE_PATHS = [
    Path("/opt/podsurvey/.env"),
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]
REQUIRED_ENV = ("DATABASE_URL", "ADMIN_EMAIL", "ADMIN_PASSWORD")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def load_env_file_fallback(paths=ENV_FILE_PATHS) -> int:
    """Copy KEY=VALUE pairs from the first readable .env file into os.environ.

    Variables already present in the environment win. Returns how many were set.
    """
    for env_file in paths:
        if not env_file.is_file():
            continue
        loaded = 0
        try:
            with open(env_file, "r") as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith("#") or "=" not in line:
                        continue
                    key, value = line.split("=", 1)
                    key, value = key.strip(), _unquote(value.strip())
                    if key and value and key not in os.environ:
                        os.environ[key] = value
                        loaded += 1
        except OSError as e:
            print(f"[PodSurvey] Warning: could not read {env_file}: {e}")
            continue
        if loaded:
            print(f"[PodSurvey] Loaded {loaded} environment variables from {env_file}")
        return loaded
    return 0


if not all(getenv(name) for name in REQUIRED_ENV):
    load_env_file_fallback()

from typing import Any

from litestar import Litestar, Request
from litestar.contrib.jinja import JinjaTemplateEngine
from litestar.datastructures import State
from litestar.exceptions import HTTPException, NotAuthorizedException
from litestar.plugins.sqlalchemy import SQLAlchemyAsyncConfig, SQLAlchemyInitPlugin
from litestar.response import Redirect, Response
from litestar.status_codes import HTTP_401_UNAUTHORIZED, HTTP_500_INTERNAL_SERVER_ERROR
from litestar.template.config import TemplateConfig
from advanced_alchemy.config import EngineConfig
from sqlalchemy.pool import NullPool

from podsurvey.auth.identity import admin_identity
from podsurvey.dashboard.registry import DashboardRegistry
from podsurvey.dependencies import DEPENDENCIES
from podsurvey.models import Base
from podsurvey.routes import ROUTES
from podsurvey.store import SurveyStore
from podsurvey.utils import get_base_path
from podsurvey.utils.logging import log_request_error

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"
# Local development default (Docker Compose); production sets DATABASE_URL
DATABASE_URL = getenv(
    "DATABASE_URL",
    "postgresql+asyncpg://postgres:postgres@db:5432/podsurvey"
)

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("PodSurvey")

logger.info(f"Starting app in {'DEBUG' if DEBUG else 'PRODUCTION'} mode")
if not admin_identity.configured:
    logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD not set: dashboard sign-in is disabled")

# --- SQLAlchemy config
config = SQLAlchemyAsyncConfig(
    connection_string=DATABASE_URL,
    # SQLite (tests, local runs): fresh connection per session, no pool
    engine_config=EngineConfig(poolclass=NullPool) if DATABASE_URL.startswith("sqlite") else EngineConfig(),
    metadata=Base.metadata,
    create_all=DEBUG,  # production uses deploy/init_db.py
)
plugin = SQLAlchemyInitPlugin(config)

survey_store = SurveyStore(config.create_session_maker())
dashboards = DashboardRegistry(survey_store, admin_identity)


# --- Templates
def register_template_globals(engine: JinjaTemplateEngine) -> None:
    def base_path_helper(ctx: dict[str, Any]) -> str:
        request = ctx.get("request")
        return get_base_path(request) if request is not None else ""

    engine.register_template_callable("get_base_path", base_path_helper)


template_config = TemplateConfig(
    directory=Path(__file__).parent / "templates",
    engine=JinjaTemplateEngine,
    engine_callback=register_template_globals,
)


# --- Exception handlers
def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return Response(
        content={"detail": "Internal Server Error"},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/json"
    )


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    content = {"status_code": exc.status_code, "detail": exc.detail}
    if exc.extra:
        content["extra"] = exc.extra
    return Response(content=content, status_code=exc.status_code, media_type="application/json")


def handle_auth_exception(request: Request, exc: NotAuthorizedException) -> Response:
    """Redirect pages to the login form; API callers get a 401."""
    if "/api/" in request.url.path:
        return Response(
            content={"detail": "Not authorized", "error": str(exc.detail)},
            status_code=HTTP_401_UNAUTHORIZED,
            media_type="application/json"
        )
    return Redirect(f"{get_base_path(request)}/login?admin")


# --- App init
app = Litestar(
    route_handlers=ROUTES,
    debug=DEBUG,
    plugins=[plugin],
    dependencies=DEPENDENCIES,
    state=State({"survey_store": survey_store, "dashboards": dashboards}),
    template_config=template_config,
    exception_handlers={
        Exception: log_exceptions,
        HTTPException: handle_http_exception,
        NotAuthorizedException: handle_auth_exception,
    },
)
