"""
Shared configuration for both the FastAPI and stdlib servers.
"""
import os
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be a valid integer, got {value!r}. Configure this in your .env file.")


class Config:
    """Centralized configuration loaded from environment variables."""

    # Listener (all interfaces, port 8080 unless overridden)
    SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT = _int_env("SERVER_PORT", "8080")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def display_url(cls, port: Optional[int] = None) -> str:
        """URL shown in startup logs."""
        return f"http://localhost:{port if port is not None else cls.SERVER_PORT}"


def setup_logging():
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger("hello_server")
