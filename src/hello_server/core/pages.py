"""
Routing table and static responses shared by the FastAPI and stdlib servers.

Every handler takes the request path and returns a ``(status, content_type, body)``
tuple. The table is built once at import time and never changes.
"""
import posixpath
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple
from urllib.parse import quote

PageResult = Tuple[int, str, str]

HTML_CONTENT_TYPE = "text/html"
JSON_CONTENT_TYPE = "application/json"
NOT_FOUND_CONTENT_TYPE = "text/plain; charset=utf-8"
NOT_FOUND_BODY = "404 page not found\n"

# Characters left as-is in a Location header. The path is decoded, so "%", "?"
# and "#" in it must be escaped; the query is passed through still encoded.
PATH_SAFE = "/:@!$&'()*+,;="
QUERY_SAFE = ":/%#?=@[]!$&'()*+,;"

HOME_HTML = """
    <html>
        <head><title>Hello Server</title></head>
        <body>
            <h1>Hello, World!</h1>
            <p>Welcome to the hello server.</p>
            <p><a href="/about">About</a> | <a href="/api/time">Current Time</a></p>
        </body>
    </html>
    """

ABOUT_HTML = """
    <html>
        <head><title>About - Hello Server</title></head>
        <body>
            <h1>About This Server</h1>
            <p>This is a simple HTTP server built with FastAPI and uvicorn.</p>
            <p>Features:</p>
            <ul>
                <li>Basic routing</li>
                <li>HTML responses</li>
                <li>JSON API endpoints</li>
            </ul>
            <p><a href="/">Back to Home</a></p>
        </body>
    </html>
    """

# Kept verbatim: clients match on this exact body. No clock is read.
TIME_JSON = '{"message": "Current time from Go server", "status": "success"}'

NOT_FOUND: PageResult = (404, NOT_FOUND_CONTENT_TYPE, NOT_FOUND_BODY)


def handle_home(path: str) -> PageResult:
    """Home page. Also the fallback for every unregistered path."""
    if path != "/":
        return NOT_FOUND
    return 200, HTML_CONTENT_TYPE, HOME_HTML


def handle_about(path: str) -> PageResult:
    return 200, HTML_CONTENT_TYPE, ABOUT_HTML


def handle_time(path: str) -> PageResult:
    return 200, JSON_CONTENT_TYPE, TIME_JSON


ROUTES: Mapping[str, Callable[[str], PageResult]] = MappingProxyType({
    "/": handle_home,
    "/about": handle_about,
    "/api/time": handle_time,
})


def dispatch(path: str) -> PageResult:
    """Exact match against ROUTES, falling back to the root handler."""
    handler = ROUTES.get(path, handle_home)
    return handler(path)


def clean_path(path: str) -> str:
    """
    Canonical form of a request path.

    Adds a leading slash, collapses repeated slashes, resolves ``.`` and ``..``
    segments and keeps a trailing slash if the original had one.
    """
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    cleaned = posixpath.normpath(path)
    # normpath keeps exactly two leading slashes (POSIX rule)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    if path.endswith("/") and cleaned != "/":
        cleaned += "/"
    return cleaned


def redirect_location(path: str, query: str = "") -> Optional[str]:
    """
    Location for a 301 when ``path`` is not canonical, else None.

    ``path`` is the decoded request path. The result is percent-encoded so it
    is always a single-line, ASCII header value.
    """
    cleaned = clean_path(path)
    if cleaned == path:
        return None
    location = quote(cleaned, safe=PATH_SAFE)
    if query:
        location = f"{location}?{quote(query, safe=QUERY_SAFE)}"
    return location
