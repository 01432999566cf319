"""Building blocks for a job-vacancy search service."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "circuit_breaker",
    "config",
    "dto",
    "fifo_queue",
    "formatting",
    "health",
    "rate_limiter",
    "status_manager",
    "text_utils",
]