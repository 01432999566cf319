"""A thread-safe circuit breaker with closed, open and half-open states."""

from __future__ import annotations

import threading
import time
from dataclasses import replace
from enum import IntEnum
from typing import Callable, Protocol, Tuple, TypeVar

from .config import CircuitBreakerConfig

T = TypeVar("T")

_DEFAULT_FAILURE_THRESHOLD = 5
_DEFAULT_SUCCESS_THRESHOLD = 3
_DEFAULT_HALF_OPEN_MAX_REQUESTS = 2
_DEFAULT_RESET_TIMEOUT = 10.0
_DEFAULT_WINDOW_DURATION = 10.0


class State(IntEnum):
    """State of a circuit breaker."""

    CLOSED = 0
    OPEN = 1
    HALF_OPEN = 2


class CircuitBreakerError(Exception):
    """Base class for calls refused by the circuit breaker."""


class CircuitOpenError(CircuitBreakerError):
    """The breaker is open and refuses calls."""

    def __init__(self) -> None:
        super().__init__("circuit breaker is open")


class TooManyRequestsError(CircuitBreakerError):
    """The half-open breaker has no trial slots left."""

    def __init__(self) -> None:
        super().__init__("too many requests in half-open state")


class CircuitBreakerProtocol(Protocol):
    """What callers need from a circuit breaker."""

    def execute(self, fn: Callable[[], T]) -> T: ...

    def stats(self) -> Tuple[int, int, int]: ...


def _resolve(config: CircuitBreakerConfig) -> CircuitBreakerConfig:
    return replace(
        config,
        failure_threshold=config.failure_threshold
        if config.failure_threshold > 0
        else _DEFAULT_FAILURE_THRESHOLD,
        success_threshold=config.success_threshold
        if config.success_threshold > 0
        else _DEFAULT_SUCCESS_THRESHOLD,
        half_open_max_requests=config.half_open_max_requests
        if config.half_open_max_requests > 0
        else _DEFAULT_HALF_OPEN_MAX_REQUESTS,
        reset_timeout=config.reset_timeout
        if config.reset_timeout > 0
        else _DEFAULT_RESET_TIMEOUT,
        window_duration=config.window_duration
        if config.window_duration > 0
        else _DEFAULT_WINDOW_DURATION,
    )


class CircuitBreaker:
    """Guards calls to an unreliable operation.

    ``execute`` runs the callable and returns its result. An exception raised
    by the callable counts as a failure and propagates unchanged.
    """

    def __init__(
        self,
        config: CircuitBreakerConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = _resolve(config or CircuitBreakerConfig())
        self._clock = clock
        self._lock = threading.Lock()
        self._state = State.CLOSED
        self._failures = 0
        self._successes = 0
        self._last_failure_time = 0.0
        self._half_open_attempts = 0
        self._total_requests = 0
        self._total_successes = 0
        self._total_failures = 0

    def execute(self, fn: Callable[[], T]) -> T:
        """Run ``fn`` under the breaker's protection and return its result."""
        with self._lock:
            if self._state is State.OPEN:
                if self._clock() - self._last_failure_time < self.config.reset_timeout:
                    raise CircuitOpenError()
                self._state = State.HALF_OPEN
                self._half_open_attempts = 0
                self._successes = 0

            half_open = self._state is State.HALF_OPEN
            if half_open:
                self._half_open_attempts += 1
                if self._half_open_attempts > self.config.half_open_max_requests:
                    self._half_open_attempts -= 1
                    raise TooManyRequestsError()
            self._total_requests += 1

        try:
            result = fn()
        except Exception:
            with self._lock:
                self._total_failures += 1
                if half_open and self._state is not State.HALF_OPEN:
                    self._release_slot()
                else:
                    self._on_failure()
            raise

        with self._lock:
            self._total_successes += 1
            if half_open and self._state is not State.HALF_OPEN:
                self._release_slot()
            else:
                self._on_success()
        return result

    def _release_slot(self) -> None:
        self._half_open_attempts = max(0, self._half_open_attempts - 1)

    def _on_failure(self) -> None:
        if self._state is State.CLOSED:
            self._failures += 1
            if self._failures >= self.config.failure_threshold:
                self._state = State.OPEN
                self._last_failure_time = self._clock()
                self._failures = 0
        elif self._state is State.HALF_OPEN:
            self._state = State.OPEN
            self._last_failure_time = self._clock()
            self._half_open_attempts = 0
            self._successes = 0

    def _on_success(self) -> None:
        if self._state is State.CLOSED:
            self._failures = 0
        elif self._state is State.HALF_OPEN:
            self._successes += 1
            if self._successes >= self.config.success_threshold:
                self._state = State.CLOSED
                self._failures = 0
                self._successes = 0
                self._half_open_attempts = 0

    def state(self) -> State:
        """Return the current state."""
        with self._lock:
            return self._state

    def stats(self) -> Tuple[int, int, int]:
        """Return ``(total, successes, failures)`` of executed calls."""
        with self._lock:
            return self._total_requests, self._total_successes, self._total_failures