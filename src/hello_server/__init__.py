"""Minimal HTTP server: home page, about page and a JSON status endpoint."""

__version__ = "1.0.0"
