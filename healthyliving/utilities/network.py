"""Network helpers for the launcher.

Kept apart from `healthyliving.main` so the launcher only deals with
starting uvicorn and printing where the screen can be opened.
"""
import socket


def get_local_ip() -> str:
    """Return the LAN address of this machine, or '127.0.0.1' when offline.

    Connecting a UDP socket sends nothing; it only makes the OS choose the
    outgoing interface, whose address is then read back.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def screen_urls(port: int) -> list[str]:
    """URLs under which the recipe screen is reachable (local first)."""
    urls = [f"http://localhost:{port}"]
    local_ip = get_local_ip()
    if local_ip not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{local_ip}:{port}")
    return urls
