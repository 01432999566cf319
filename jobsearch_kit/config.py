"""Configuration records for the circuit breaker and the HTTP server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CircuitBreakerConfig:
    """Circuit breaker settings; non-positive values mean "use the default".

    Durations are given in seconds.
    """

    failure_threshold: int = 0
    success_threshold: int = 0
    half_open_max_requests: int = 0
    reset_timeout: float = 0.0
    window_duration: float = 0.0


@dataclass
class ServerConfig:
    """Settings of the HTTP server; timeouts are in seconds."""

    host: str = "localhost"
    port: str = "8080"
    read_timeout: float = 10.0
    write_timeout: float = 10.0
    idle_timeout: float = 60.0
    max_header_bytes: int = 1 << 20

    def addr(self) -> str:
        """Return the listen address as ``host:port``."""
        return f"{self.host}:{self.port}"


def default_server_config() -> ServerConfig:
    """Return a server configuration with the default values."""
    return ServerConfig(
        host="localhost",
        port="8080",
        read_timeout=10.0,
        write_timeout=10.0,
        idle_timeout=60.0,
        max_header_bytes=1 << 20,
    )