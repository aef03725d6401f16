#!/usr/bin/env python3
"""
Run the hello server.

Usage:
    python run.py              # FastAPI/uvicorn (production)
    python run.py --stdlib     # stdlib http.server

Host and port come from SERVER_HOST / SERVER_PORT (default 0.0.0.0:8080).
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from hello_server.cli import cmd_serve
from hello_server.core import Config


if __name__ == "__main__":
    use_stdlib = "--stdlib" in sys.argv or "-s" in sys.argv
    cmd_serve(Config.SERVER_HOST, Config.SERVER_PORT, use_stdlib=use_stdlib)
