"""Tests for the HTTP binding."""

import pytest
from fastapi.testclient import TestClient

from orbitip.config import Config
from orbitip.mux import Handlers, ServeMux
from orbitip.protocol import ASPX, Command, Request
from orbitip.response import ResponseValues
from orbitip.server import create_app, new_server


def _card_read(rv: ResponseValues, req: Request) -> None:
    if req.uid == "04A1B2C3":
        rv.grant(5)
    else:
        rv.deny()


def _fail(rv: ResponseValues, req: Request) -> None:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def client() -> TestClient:
    """Client for an app on the default path with a few handlers."""
    handlers = Handlers(
        {
            Command.CARD_READ: _card_read,
            Command.HEARTBEAT: lambda rv, req: None,
            Command.POWER_UP: _fail,
        }
    )
    return TestClient(create_app(ServeMux(handlers)))


class TestRoute:
    """GET /orbit.php."""

    def test_grant(self, client: TestClient) -> None:
        """Known card gets a GRNT document."""
        resp = client.get("/orbit.php", params={"cmd": "CO", "uid": "04A1B2C3"})
        assert resp.status_code == 200
        assert resp.content == b"<ORBIT>\nGRNT=05\n</ORBIT>"

    def test_deny(self, client: TestClient) -> None:
        """Unknown card gets a DENY document."""
        resp = client.get("/orbit.php", params={"cmd": "CO", "uid": "FFFFFFFF"})
        assert resp.status_code == 200
        assert resp.content == b"<ORBIT>\nDENY\n</ORBIT>"

    def test_empty_body(self, client: TestClient) -> None:
        """Handler that sets nothing gives 200 with an empty body."""
        resp = client.get("/orbit.php", params={"cmd": "HB"})
        assert resp.status_code == 200
        assert resp.content == b""

    def test_unknown_command(self, client: TestClient) -> None:
        """Unregistered command gives 404 with an empty body."""
        resp = client.get("/orbit.php", params={"cmd": "SW"})
        assert resp.status_code == 404
        assert resp.content == b""

    def test_handler_failure(self, client: TestClient) -> None:
        """Handler exception gives 500 with an empty body."""
        resp = client.get("/orbit.php", params={"cmd": "PU"})
        assert resp.status_code == 500
        assert resp.content == b""

    def test_repeated_parameter_uses_first(self, client: TestClient) -> None:
        """For a repeated key the first value is used."""
        resp = client.get("/orbit.php?cmd=CO&uid=04A1B2C3&uid=FFFFFFFF")
        assert resp.content == b"<ORBIT>\nGRNT=05\n</ORBIT>"

    def test_other_path(self, client: TestClient) -> None:
        """Only root + ext is served."""
        assert client.get("/orbit.asp", params={"cmd": "CO"}).status_code == 404

    def test_post_not_allowed(self, client: TestClient) -> None:
        """The reader only issues GET requests."""
        assert client.post("/orbit.php", params={"cmd": "CO"}).status_code == 405


class TestCustomPath:
    """Root and extension other than the defaults."""

    def test_root_and_ext(self):
        """App listens on the configured root + ext."""
        app = create_app(ServeMux(Handlers({Command.CARD_READ: _card_read})), "/door", ASPX)
        client = TestClient(app)
        assert client.get("/door.aspx", params={"cmd": "CO"}).status_code == 200
        assert client.get("/orbit.php", params={"cmd": "CO"}).status_code == 404


class TestNewServer:
    """Server construction without starting it."""

    def test_bound_to_address(self):
        """uvicorn server carries host and port."""
        server = new_server("127.0.0.1", 8080, "/orbit", ASPX, Handlers())
        assert server.config.host == "127.0.0.1"
        assert server.config.port == 8080

    def test_from_config(self):
        """Config supplies the listen path."""
        cfg = Config(root="/door", ext="aspx", port=8080)
        server = new_server(cfg.host, cfg.port, cfg.root, cfg.extension, Handlers({Command.HEARTBEAT: _fail}))
        client = TestClient(server.config.app)
        assert client.get("/door.aspx", params={"cmd": "HB"}).status_code == 500
        assert client.get("/orbit.php", params={"cmd": "HB"}).status_code == 404
