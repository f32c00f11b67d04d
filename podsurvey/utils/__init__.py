"""Utility functions for the survey application."""

from litestar.connection import ASGIConnection

KNOWN_PREFIXES = ("/dashboard", "/login", "/logout", "/api", "/survey", "/theme")


def get_base_path(connection: ASGIConnection) -> str:
    """
    Return the prefix the app is mounted under (e.g. '/survey-app'), or ''.

    Prefers the ASGI ``root_path`` (set by ``uvicorn --root-path``) and falls
    back to cutting the request path at the first known route prefix.
    """
    root_path = connection.scope.get("root_path", "")
    if root_path:
        return root_path.rstrip("/")

    path = connection.url.path
    positions = [path.find(prefix) for prefix in KNOWN_PREFIXES if prefix in path]
    if not positions:
        return ""
    return path[:min(positions)]
