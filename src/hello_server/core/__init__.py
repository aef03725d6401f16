# Core shared modules for both FastAPI and stdlib servers
from .config import Config, setup_logging
from .pages import (
    ABOUT_HTML,
    HOME_HTML,
    NOT_FOUND_BODY,
    ROUTES,
    TIME_JSON,
    clean_path,
    dispatch,
    handle_about,
    handle_home,
    handle_time,
    redirect_location,
)

__all__ = [
    # Config
    "Config",
    "setup_logging",
    # Pages
    "ABOUT_HTML",
    "HOME_HTML",
    "NOT_FOUND_BODY",
    "ROUTES",
    "TIME_JSON",
    "clean_path",
    "dispatch",
    "handle_about",
    "handle_home",
    "handle_time",
    "redirect_location",
]
