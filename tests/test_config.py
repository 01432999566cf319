import dataclasses

import pytest

from jobsearch_kit.config import CircuitBreakerConfig, ServerConfig, default_server_config


def test_default_server_config_values():
    conf = default_server_config()
    assert conf.host == "localhost"
    assert conf.port == "8080"
    assert conf.read_timeout == 10.0
    assert conf.write_timeout == 10.0
    assert conf.idle_timeout == 60.0
    assert conf.max_header_bytes == 1 << 20


def test_default_server_config_addr():
    assert default_server_config().addr() == "localhost:8080"


def test_custom_addr_joins_host_and_port():
    conf = ServerConfig(host="0.0.0.0", port="9000")
    assert conf.addr() == "0.0.0.0:9000"


def test_server_config_default_constructor_matches_factory():
    assert ServerConfig() == default_server_config()


def test_breaker_config_keeps_given_values():
    conf = CircuitBreakerConfig(10, 5, 3, 5.0, 30.0)
    assert conf.failure_threshold == 10
    assert conf.success_threshold == 5
    assert conf.half_open_max_requests == 3
    assert conf.reset_timeout == 5.0
    assert conf.window_duration == 30.0


def test_breaker_config_empty_is_all_zero():
    conf = CircuitBreakerConfig()
    assert dataclasses.astuple(conf) == (0, 0, 0, 0.0, 0.0)


def test_breaker_config_is_immutable():
    conf = CircuitBreakerConfig(1, 2, 3, 4.0, 5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        conf.failure_threshold = 7  # type: ignore[misc]
    assert conf.failure_threshold == 1
    assert dataclasses.astuple(conf) == (1, 2, 3, 4.0, 5.0)


def test_breaker_config_replace_gives_new_copy():
    conf = CircuitBreakerConfig(1, 2, 3, 4.0, 5.0)
    changed = dataclasses.replace(conf, failure_threshold=7)
    assert changed.failure_threshold == 7
    assert conf.failure_threshold == 1