"""Tracks the health of every parser, probing them periodically."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from .health import HealthClient, HttpHealthCheckClient, ParserStatus

logger = logging.getLogger(__name__)

_STALE_AFTER = timedelta(minutes=5)
_DEFAULT_INTERVAL = 30.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParserInfo(Protocol):
    """What the manager needs to know about a parser."""

    @property
    def name(self) -> str: ...

    @property
    def health_endpoint(self) -> str: ...


class ParserStatusManager:
    """Keeps a status per parser and refreshes it in a background thread.

    The first round of probes runs right after construction; after it every
    parser is marked initialized and :meth:`wait_initialized` returns. Further
    rounds follow every ``interval`` seconds until :meth:`stop`.
    """

    def __init__(
        self,
        *parsers: ParserInfo,
        client: Optional[HealthClient] = None,
        interval: float = _DEFAULT_INTERVAL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._client: HealthClient = client or HttpHealthCheckClient()
        self._now = clock
        self._lock = threading.Lock()
        self._statuses: Dict[str, ParserStatus] = {}
        for parser in parsers:
            self._statuses[parser.name] = ParserStatus(
                name=parser.name,
                last_check=self._now(),
                initialized=False,
                circuit_state="closed",
                health_endpoint=parser.health_endpoint,
                is_healthy=False,
            )
        self._initialized = threading.Event()
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="parser-health", daemon=True
        )
        self._thread.start()

    def __enter__(self) -> "ParserStatusManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        self._check_all()
        self._initialized.set()
        while not self._stop.wait(self.interval):
            self._check_all()

    def _probe(self, name: str, endpoint: str) -> Tuple[str, bool]:
        try:
            self._client.check_health(endpoint)
        except Exception as exc:
            logger.debug("health check of %s failed: %s", name, exc)
            return name, False
        return name, True

    def _check_all(self) -> None:
        with self._lock:
            targets = [(s.name, s.health_endpoint) for s in self._statuses.values()]
        if not targets:
            return
        with ThreadPoolExecutor(max_workers=len(targets)) as pool:
            results = list(pool.map(lambda t: self._probe(*t), targets))
        for name, healthy in results:
            with self._lock:
                status = self._statuses.get(name)
                if status is not None:
                    status.is_healthy = healthy
                    status.last_check = self._now()
                    status.initialized = True

    def wait_initialized(self, timeout: Optional[float] = None) -> bool:
        """Wait for the first round of probes; return False on timeout."""
        return self._initialized.wait(timeout)

    def update_status(
        self, name: str, success: bool, error: Optional[BaseException] = None
    ) -> None:
        """Record the outcome of a real call made through parser ``name``."""
        with self._lock:
            now = self._now()
            status = self._statuses.get(name)
            if status is None:
                status = ParserStatus(name=name, initialized=True, last_check=now)
                self._statuses[name] = status
            status.last_check = now
            if success:
                status.success_count += 1
                status.error_count = 0
                status.is_healthy = True
                status.last_error = None
            else:
                status.error_count += 1
                status.success_count = 0
                status.is_healthy = False
                status.last_error = error

    def healthy_parsers(self) -> List[str]:
        """Names of parsers that are healthy and were checked recently."""
        with self._lock:
            now = self._now()
            return [
                name
                for name, status in self._statuses.items()
                if status.is_healthy
                and status.last_check is not None
                and now - status.last_check < _STALE_AFTER
            ]

    def parser_status(self, name: str) -> ParserStatus:
        """Return a snapshot of the status of ``name``; KeyError if unknown."""
        with self._lock:
            return replace(self._statuses[name])

    def stop(self) -> None:
        """Stop the background probing and wait for it; idempotent."""
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        logger.info("Parsers status manager was stopped correctly")