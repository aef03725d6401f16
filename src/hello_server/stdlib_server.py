"""
Hello server using Python stdlib http.server.

Serves the same routing table as the FastAPI app without uvicorn.
Uses a thread per request with the shared core modules.

Run with: python run.py --stdlib
"""
import logging
import sys
import threading
from typing import Optional
from http.server import HTTPServer, BaseHTTPRequestHandler
from urllib.parse import unquote

from .core import Config, setup_logging, dispatch, redirect_location

logger = logging.getLogger(__name__)


class HelloHandler(BaseHTTPRequestHandler):
    """Dispatches every method through the shared routing table."""

    def log_message(self, format, *args):
        logger.info(f"[{self.client_address[0]}] {format % args}")

    def request_target(self) -> str:
        """Target exactly as sent; http.server collapses a leading '//' in self.path."""
        words = self.requestline.split()
        if len(words) >= 2:
            return words[1]
        return self.path

    def send_page(self, include_body: bool = True):
        """Resolve the request path and write the response."""
        raw_path, _, query = self.request_target().partition("?")
        path = unquote(raw_path)

        location = redirect_location(path, query)
        if location is not None:
            self.send_response(301)
            self.send_header("Location", location)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        status, content_type, body = dispatch(path)
        payload = body.encode("utf-8")

        self.send_response(status)
        self.send_header("Content-Type", content_type)
        if status == 404:
            self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if include_body:
            self.wfile.write(payload)

    def do_GET(self):
        self.send_page()

    def do_HEAD(self):
        self.send_page(include_body=False)

    def do_POST(self):
        self.send_page()

    def do_PUT(self):
        self.send_page()

    def do_DELETE(self):
        self.send_page()

    def do_PATCH(self):
        self.send_page()

    def do_OPTIONS(self):
        self.send_page()

    def do_TRACE(self):
        self.send_page()

    def do_CONNECT(self):
        self.send_page()


class ThreadedHTTPServer(HTTPServer):
    """HTTP server that handles each request in a new thread."""

    def process_request(self, request, client_address):
        thread = threading.Thread(target=self.process_request_thread, args=(request, client_address))
        thread.daemon = True
        thread.start()

    def process_request_thread(self, request, client_address):
        try:
            self.finish_request(request, client_address)
        except Exception:
            self.handle_error(request, client_address)
        finally:
            self.shutdown_request(request)


def create_server(host: Optional[str] = None, port: Optional[int] = None) -> ThreadedHTTPServer:
    """Bind a threaded server. Raises OSError if the address is taken."""
    host = Config.SERVER_HOST if host is None else host
    port = Config.SERVER_PORT if port is None else port
    return ThreadedHTTPServer((host, port), HelloHandler)


def main(host: Optional[str] = None, port: Optional[int] = None):
    setup_logging()
    port = Config.SERVER_PORT if port is None else port

    logger.info(f"Server starting on {Config.display_url(port)}")
    try:
        server = create_server(host, port)
    except OSError as e:
        logger.critical(f"Server failed to start: {e}")
        sys.exit(1)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        server.server_close()


if __name__ == "__main__":
    main()
