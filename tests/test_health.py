import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from jobsearch_kit.health import HealthCheckError, HttpHealthCheckClient, ParserStatus


class _Handler(BaseHTTPRequestHandler):
    agents: list = []

    def do_GET(self):
        type(self).agents.append(self.headers.get("User-Agent"))
        codes = {"/ok": 200, "/empty": 204, "/down": 503, "/missing": 404}
        code = codes.get(self.path, 404)
        self.send_response(code)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server():
    _Handler.agents = []
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    host, port = httpd.server_address[:2]
    yield f"http://{host}:{port}"
    httpd.shutdown()
    httpd.server_close()


def test_healthy_endpoint_returns_duration(server):
    client = HttpHealthCheckClient(timeout=2.0)
    duration = client.check_health(server + "/ok")
    assert 0.0 <= duration < 2.0


def test_any_2xx_is_healthy(server):
    client = HttpHealthCheckClient(timeout=2.0)
    assert client.check_health(server + "/empty") >= 0.0


def test_sends_user_agent(server):
    client = HttpHealthCheckClient(timeout=2.0)
    duration = client.check_health(server + "/ok")
    assert 0.0 <= duration < 2.0
    assert _Handler.agents == ["ParserHealthCheck/1.0"]


@pytest.mark.parametrize("path,code", [("/down", 503), ("/missing", 404)])
def test_error_status_raises(server, path, code):
    client = HttpHealthCheckClient(timeout=2.0)
    with pytest.raises(HealthCheckError) as info:
        client.check_health(server + path)
    assert str(info.value) == f"health check failed with status: {code}"
    assert info.value.duration >= 0.0


def test_invalid_url_raises():
    client = HttpHealthCheckClient()
    with pytest.raises(HealthCheckError) as info:
        client.check_health("not a url")
    assert str(info.value).startswith("Failed to create request")


def test_connection_refused_raises():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    client = HttpHealthCheckClient(timeout=1.0)
    with pytest.raises(HealthCheckError) as info:
        client.check_health(f"http://127.0.0.1:{port}/ok")
    assert str(info.value).startswith("Err during health request")


def test_non_positive_timeout_rejected():
    with pytest.raises(ValueError):
        HttpHealthCheckClient(timeout=0)


def test_parser_status_defaults():
    status = ParserStatus(name="hh")
    assert status.circuit_state == "closed"
    assert status.is_healthy is False
    assert status.initialized is False
    assert status.error_count == 0 and status.success_count == 0