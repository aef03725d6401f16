import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse, Response
import uvicorn

from .core import (
    Config,
    setup_logging,
    handle_home,
    handle_about,
    handle_time,
    redirect_location,
)
from .core.pages import PageResult

setup_logging()
logger = logging.getLogger(__name__)

# Handlers answer every method the same way
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "TRACE", "CONNECT"]


def page_response(request: Request, result: PageResult) -> Response:
    """Turn a (status, content_type, body) tuple into a FastAPI response."""
    status, content_type, body = result
    payload = body.encode("utf-8")
    # Set content-type directly: media_type would append "; charset=utf-8"
    headers = {
        "content-type": content_type,
        "content-length": str(len(payload)),
    }
    if status == 404:
        headers["x-content-type-options"] = "nosniff"
    if request.method == "HEAD":
        payload = b""
    return Response(
        content=payload,
        status_code=status,
        headers=headers
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application"""
    # Startup
    logger.info(f"Server starting on {Config.display_url()}")
    logger.info(f"Logging level: {Config.LOG_LEVEL}")

    yield

    # Shutdown
    logger.info("Shutting down hello server")


# FastAPI Application
app = FastAPI(
    title="Hello Server",
    description="Minimal HTTP server with a home page, an about page and a JSON status endpoint",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)


@app.middleware("http")
async def clean_request_path(request: Request, call_next):
    """Redirect non-canonical paths (//about, /a/../about) and log every request."""
    path = request.scope["path"]
    query = request.scope.get("query_string", b"").decode("latin-1")
    logger.debug(f"Incoming request: {request.method} {path}")

    location = redirect_location(path, query)
    if location is not None:
        logger.info(f"Redirecting {path} -> {location}")
        return RedirectResponse(url=location, status_code=301)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"Request failed: {request.method} {path}: {e}")
        raise
    logger.debug(f"Response status: {response.status_code}")
    return response


# Routes

@app.api_route("/", methods=ALL_METHODS)
async def home(request: Request):
    """Home page with links to the other routes"""
    return page_response(request, handle_home("/"))


@app.api_route("/about", methods=ALL_METHODS)
async def about(request: Request):
    """Static description of the server"""
    return page_response(request, handle_about("/about"))


@app.api_route("/api/time", methods=ALL_METHODS)
async def time_status(request: Request):
    """Fixed JSON status body"""
    return page_response(request, handle_time("/api/time"))


# Catch-all (registered last) so unknown paths get the plain-text 404
@app.api_route("/{path:path}", methods=ALL_METHODS)
async def not_found(request: Request, path: str):
    return page_response(request, handle_home(request.scope["path"]))


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=Config.SERVER_HOST,
        port=Config.SERVER_PORT,
        log_level=Config.LOG_LEVEL.lower()
    )
