# jobsearch_kit

Small building blocks for a service that searches job vacancies across
several sources. The package needs nothing beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is inside

- `jobsearch_kit.config`: `CircuitBreakerConfig` (thresholds and durations
  in seconds; zero or negative values mean "use the default"),
  `ServerConfig` and `default_server_config()`. `ServerConfig.addr()`
  returns `host:port`.
- `jobsearch_kit.circuit_breaker`: `CircuitBreaker` with the states
  `State.CLOSED`, `State.OPEN` and `State.HALF_OPEN`. `execute(fn)` runs a
  callable and returns its result; an exception from the callable counts as
  a failure and is re-raised. A refused call raises `CircuitOpenError` or
  `TooManyRequestsError` (both subclasses of `CircuitBreakerError`).
  `state()` returns the current state and `stats()` the tuple
  `(total, successes, failures)`. Defaults: 5 failures to open, 3 successes
  to close, 2 trial requests in half-open, 10 s reset timeout.
- `jobsearch_kit.cache`: `ShardedCache(num_shards, cleanup_interval)`, a
  thread-safe cache whose keys are spread over shards by FNV-1a hash.
  `set(key, value, ttl)`, `get(key)` (raises `KeyError` when the key is
  missing or expired), `delete(key)`, `cleanup_expired()`, `shard_index(key)`
  and `close()`. A positive `cleanup_interval` starts a background thread
  that drops expired items; `num_shards` must be between 1 and 1000. It is
  also a context manager.
- `jobsearch_kit.fifo_queue`: `FIFOQueue(capacity)`, a bounded, non-blocking
  FIFO queue. `enqueue()` returns `False` when full or closed, `dequeue()`
  raises `QueueEmpty` when there is nothing to take, `close()` refuses new
  items while still yielding the held ones, and `clear()` empties an open
  queue.
- `jobsearch_kit.rate_limiter`: `ChannelRateLimiter(rate)`, which issues at
  most one token every `rate` seconds without accumulating them.
  `wait(timeout=None)` blocks for a token, raising `TimeoutError` on timeout
  and `RateLimiterStopped` once `stop()` has been called.
- `jobsearch_kit.text_utils`: `format_number`, `format_salary`,
  `quick_uuid` and `build_url`.
- `jobsearch_kit.formatting`: source names and icons, currency symbols,
  experience and schedule labels (in Russian), `pluralize`,
  `format_published_at` for relative publication times and
  `format_duration`.
- `jobsearch_kit.dto`: `SearchRequest` and `SearchVacancyRequest` with
  `from_dict()` and `validate_and_normalize()` (raising `ValidationError`),
  and response records with `to_dict()` for JSON output.
- `jobsearch_kit.health`: `ParserStatus`, the `HealthClient` protocol and
  `HttpHealthCheckClient`, whose `check_health(endpoint)` sends a GET and
  returns the duration in seconds for any 2xx answer, raising
  `HealthCheckError` otherwise.
- `jobsearch_kit.status_manager`: `ParserStatusManager`, which probes every
  parser's health endpoint in a background thread, records outcomes through
  `update_status()`, and lists parsers that are healthy and checked within
  the last five minutes via `healthy_parsers()`.

## Examples

    from jobsearch_kit.circuit_breaker import CircuitBreaker, CircuitOpenError
    from jobsearch_kit.config import CircuitBreakerConfig

    breaker = CircuitBreaker(CircuitBreakerConfig(failure_threshold=2))

    def fetch():
        return "data"

    try:
        breaker.execute(fetch)
    except CircuitOpenError:
        print("source is temporarily unavailable")

    total, successes, failures = breaker.stats()

Caching with a time to live:

    from jobsearch_kit.cache import ShardedCache

    with ShardedCache(8, cleanup_interval=60) as cache:
        cache.set("query", ["vacancy"], ttl=300)
        cache.get("query")   # ["vacancy"]

Formatting:

    from jobsearch_kit.text_utils import format_salary

    format_salary(150000, 0, "RUB")   # "от 150 000 RUB"

## What it does not do

The package has no HTTP server, routes or request handlers, no parsers that
query vacancy sites, and no command-line program. It supplies the pieces
such a service is built from; wiring them into a running service is left to
the application.