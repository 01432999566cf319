"""Health probing of parser endpoints and the status record kept per parser."""

from __future__ import annotations

import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

_USER_AGENT = "ParserHealthCheck/1.0"
_DEFAULT_TIMEOUT = 5.0


class HealthCheckError(Exception):
    """A health probe failed; ``duration`` is how long it took in seconds."""

    def __init__(self, message: str, duration: float = 0.0) -> None:
        super().__init__(message)
        self.duration = duration


@dataclass
class ParserStatus:
    """What is known about the health of one parser."""

    name: str
    last_check: Optional[datetime] = None
    last_success: Optional[datetime] = None
    error_count: int = 0
    success_count: int = 0
    is_healthy: bool = False
    last_error: Optional[BaseException] = None
    circuit_state: str = "closed"
    initialized: bool = False
    health_endpoint: str = ""
    response_time: float = 0.0


class HealthClient(Protocol):
    """Probes an endpoint.

    ``check_health`` returns the probe duration in seconds when the endpoint
    is healthy and raises HealthCheckError otherwise.
    """

    def check_health(self, endpoint: str) -> float: ...


class HttpHealthCheckClient:
    """Probes HTTP endpoints with a GET request; any 2xx answer is healthy."""

    def __init__(
        self, timeout: float = _DEFAULT_TIMEOUT, user_agent: str = _USER_AGENT
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self.timeout = timeout
        self.user_agent = user_agent

    def check_health(self, endpoint: str) -> float:
        """Return the request duration in seconds if ``endpoint`` answers 2xx."""
        try:
            request = urllib.request.Request(
                endpoint, headers={"User-Agent": self.user_agent}, method="GET"
            )
        except ValueError as exc:
            raise HealthCheckError(
                f"Failed to create request for health check: {exc}"
            ) from exc

        start = time.monotonic()
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = response.status
        except urllib.error.HTTPError as exc:
            status = exc.code
            exc.close()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise HealthCheckError(
                f"Err during health request: {exc}", time.monotonic() - start
            ) from exc
        duration = time.monotonic() - start

        if 200 <= status < 300:
            return duration
        raise HealthCheckError(
            f"health check failed with status: {status}", duration
        )