from dataclasses import dataclass, field
from typing import Dict

VERSION = "0.1.0"

DEFAULT_MAX_REDIRECTS = 10

DEFAULT_HEADERS = {
    "X-Powered-By": "Python Http Cli",
    "User-Agent": f"veryhttp/{VERSION}",
}


@dataclass
class ClientConfig:
    """Configuration of the HTTP client, built once at startup.

    Attributes:
        headers: Headers attached to every outgoing request.
        timeout: Timeout in seconds applied to network operations. None
            disables timeouts, a hung connection then blocks until the
            process is interrupted.
        follow_redirects: Whether redirect responses are followed.
        max_redirects: Number of redirects followed before giving up.
    """

    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: float | None = None
    follow_redirects: bool = True
    max_redirects: int = DEFAULT_MAX_REDIRECTS
