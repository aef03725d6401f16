import socket
import sys
from typing import Optional

from .core import Config


def is_port_available(host: str, port: int) -> bool:
    """Return True if we can bind (host, port) right now."""
    # Bind rather than connect: we want to know if WE can listen on it
    bind_host = "" if host == "0.0.0.0" else host

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((bind_host, port))
    except OSError:
        return False
    finally:
        sock.close()
    return True


def check_port(host: Optional[str] = None, port: Optional[int] = None):
    host = Config.SERVER_HOST if host is None else host
    port = Config.SERVER_PORT if port is None else port

    print(f"Checking if port {port} is available on {host}...")

    if is_port_available(host, port):
        print(f"Port {port} is available.")
        sys.exit(0)

    print(f"\n[ERROR] Port {port} is already in use!")
    print(f"Something is already listening on port {port}.")
    print("Please stop the existing process or change SERVER_PORT in your .env file.")
    sys.exit(1)


if __name__ == "__main__":
    check_port()
