"""
Unit tests for transport setup.
"""

import httpx
import pytest

from exec_client.domain.errors import ConnectionSetupError
from exec_client.infrastructure.config import Settings
from exec_client.infrastructure.http import ExecServiceClient, open_transport


def ok_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"status": "SERVING", "url": str(request.url)})


class TestOpenTransport:
    """Tests for open_transport()."""

    def test_tcp_endpoint(self):
        settings = Settings(_env_file=None, host="10.0.0.5", port=9000)
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return ok_handler(request)

        client = open_transport(settings, transport=httpx.MockTransport(handler))
        try:
            assert isinstance(client, ExecServiceClient)
            assert client.endpoint == "10.0.0.5:9000"
            client.health_check()
        finally:
            client.close()

        assert seen == ["http://10.0.0.5:9000/health"]

    def test_empty_host_is_rejected(self):
        settings = Settings(_env_file=None, host="")

        with pytest.raises(ConnectionSetupError):
            open_transport(settings)

    def test_unix_socket_endpoint(self, tmp_path):
        socket_path = tmp_path / "exec.sock"
        settings = Settings(_env_file=None, socket_path=str(socket_path))

        client = open_transport(settings)
        try:
            assert client.endpoint == f"unix://{socket_path}"
        finally:
            client.close()

    def test_unix_socket_in_missing_directory(self, tmp_path):
        settings = Settings(_env_file=None, socket_path=str(tmp_path / "nope" / "exec.sock"))

        with pytest.raises(ConnectionSetupError, match="does not exist"):
            open_transport(settings)

    def test_no_request_is_sent_on_setup(self, settings):
        calls = []

        def handler(request):
            calls.append(request)
            return ok_handler(request)

        client = open_transport(settings, transport=httpx.MockTransport(handler))
        client.close()

        assert calls == []
