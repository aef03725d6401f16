#!/usr/bin/env python3
"""
Hello server CLI - serve and diagnostic commands

Usage:
    hello-server serve              # FastAPI/uvicorn on SERVER_HOST:SERVER_PORT
    hello-server serve --stdlib     # stdlib http.server
    hello-server check-port         # Is the listen port free?
    hello-server status             # Query /api/time on a running server
"""

import asyncio
import argparse
import logging
import sys

import httpx

from .core import Config, setup_logging
from .check_port import check_port, is_port_available

logger = logging.getLogger(__name__)


def run_fastapi(host: str, port: int):
    """Run with FastAPI/uvicorn"""
    import uvicorn

    uvicorn.run(
        "hello_server.main:app",
        host=host,
        port=port,
        log_level=Config.LOG_LEVEL.lower(),
        http="h11",   # HTTP/1.1 only
        ws="none",    # No WebSocket support
    )


def run_stdlib(host: str, port: int):
    """Run with stdlib http.server"""
    from .stdlib_server import main as stdlib_main
    stdlib_main(host, port)


def cmd_serve(host: str, port: int, use_stdlib: bool = False):
    """Start a listener, failing fast if the port is taken"""
    setup_logging()

    if not is_port_available(host, port):
        logger.critical(f"Server failed to start: port {port} on {host} is already in use")
        sys.exit(1)

    if use_stdlib:
        logger.info("Mode: stdlib http.server")
        run_stdlib(host, port)
    else:
        logger.info("Mode: FastAPI/uvicorn (http=h11, ws=none)")
        run_fastapi(host, port)


async def cmd_status(base_url: str) -> bool:
    """Check that a running server answers /api/time"""
    url = f"{base_url.rstrip('/')}/api/time"
    print(f"Checking {url}...")

    async with httpx.AsyncClient(timeout=5.0) as client:
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            print(f"  ✗ Cannot connect: {e}")
            return False

    if response.status_code != 200:
        print(f"  ✗ Unexpected status: {response.status_code}")
        return False

    try:
        data = response.json()
    except ValueError:
        print(f"  ✗ Response is not JSON: {response.text!r}")
        return False

    if data.get("status") != "success":
        print(f"  ✗ Server reported status {data.get('status')!r}")
        return False

    print(f"  ✓ {data.get('message', '')}")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="hello-server",
        description="Hello server - serve and diagnostic commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hello-server serve                   Start FastAPI/uvicorn on :8080
  hello-server serve --stdlib          Start the stdlib server
  hello-server check-port --port 9000  Check whether port 9000 is free
  hello-server status                  Query a running server
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the server")
    serve_parser.add_argument("--stdlib", "-s", action="store_true", help="Use stdlib http.server instead of uvicorn")
    serve_parser.add_argument("--host", default=Config.SERVER_HOST)
    serve_parser.add_argument("--port", type=int, default=Config.SERVER_PORT)

    port_parser = subparsers.add_parser("check-port", help="Check whether the listen port is free")
    port_parser.add_argument("--host", default=Config.SERVER_HOST)
    port_parser.add_argument("--port", type=int, default=Config.SERVER_PORT)

    status_parser = subparsers.add_parser("status", help="Query /api/time on a running server")
    status_parser.add_argument("--url", default=Config.display_url())

    args = parser.parse_args(argv)

    if args.command == "serve":
        cmd_serve(args.host, args.port, use_stdlib=args.stdlib)
    elif args.command == "check-port":
        check_port(args.host, args.port)
    elif args.command == "status":
        ok = asyncio.run(cmd_status(args.url))
        sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
