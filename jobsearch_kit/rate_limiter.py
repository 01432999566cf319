"""A ticker-driven rate limiter handing out at most one token per interval."""

from __future__ import annotations

import threading
import time
from typing import Optional, Protocol


class RateLimiterStopped(Exception):
    """Raised when waiting on a stopped rate limiter."""

    def __init__(self) -> None:
        super().__init__("rate limiter stopped")


class RateLimiterProtocol(Protocol):
    """What callers need from a rate limiter."""

    def wait(self, timeout: Optional[float] = None) -> None: ...

    def stop(self) -> None: ...


class ChannelRateLimiter:
    """Issues a token every ``rate`` seconds into a one-slot buffer.

    Tokens do not accumulate: a tick that finds the slot full is dropped.
    """

    def __init__(self, rate: float) -> None:
        if rate <= 0:
            raise ValueError("Rate must be greater than zero")
        self.rate = rate
        self._cond = threading.Condition()
        self._token = False
        self._stopped = False
        self._stop_event = threading.Event()
        self._ticker = threading.Thread(
            target=self._run, name="rate-limiter", daemon=True
        )
        self._ticker.start()

    def __enter__(self) -> "ChannelRateLimiter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        next_tick = time.monotonic() + self.rate
        while True:
            delay = max(0.0, next_tick - time.monotonic())
            if self._stop_event.wait(delay):
                return
            with self._cond:
                if self._stopped:
                    return
                if not self._token:
                    self._token = True
                    self._cond.notify()
            next_tick += self.rate
            now = time.monotonic()
            if next_tick <= now:
                missed = int((now - next_tick) // self.rate) + 1
                next_tick += missed * self.rate

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until a token is available and take it.

        Raises RateLimiterStopped if the limiter is or becomes stopped, and
        TimeoutError if ``timeout`` seconds pass without a token.
        """
        with self._cond:
            if self._stopped:
                raise RateLimiterStopped()
            ready = self._cond.wait_for(
                lambda: self._token or self._stopped, timeout=timeout
            )
            if self._stopped:
                raise RateLimiterStopped()
            if not ready:
                raise TimeoutError("no rate limiter token within timeout")
            self._token = False

    def stop(self) -> None:
        """Stop issuing tokens and release all waiters; idempotent."""
        with self._cond:
            if self._stopped:
                return
            self._stopped = True
            self._stop_event.set()
            self._cond.notify_all()
        if self._ticker is not threading.current_thread():
            self._ticker.join()