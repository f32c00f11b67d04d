from pathlib import Path

from litestar.static_files import create_static_files_router

from podsurvey.api import AdminController, SurveysController
from podsurvey.auth.routes import routes as routes_auth
from podsurvey.dashboard.routes import routes as routes_dashboard
from podsurvey.home.routes import routes as routes_home

STATIC_DIR = Path(__file__).parent / "static"

ROUTES = [
    *routes_home,
    *routes_auth,
    *routes_dashboard,
    SurveysController,
    AdminController,
    create_static_files_router(
        path="/static",
        directories=[STATIC_DIR],
        name="static-files",
    ),
]
