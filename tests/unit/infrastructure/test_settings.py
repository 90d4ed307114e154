"""
Unit tests for client settings.
"""

import pytest
from pydantic import ValidationError

from exec_client.infrastructure.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, settings):
        assert settings.host == "127.0.0.1"
        assert settings.port == 7878
        assert settings.socket_path is None
        assert settings.max_stop_timeout == 3
        assert settings.cli_stop_timeout == 10
        assert settings.launch_delay_ms == 100
        assert settings.poll_interval_ms == 100
        assert settings.endpoint == "127.0.0.1:7878"

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("EXEC_CLIENT_PORT", "9000")
        monkeypatch.setenv("EXEC_CLIENT_SERVER_COMMAND", "my-server --fast")

        settings = Settings(_env_file=None)

        assert settings.port == 9000
        assert settings.server_command == "my-server --fast"

    def test_socket_path_endpoint(self):
        settings = Settings(_env_file=None, socket_path="/run/exec.sock")

        assert settings.endpoint == "unix:///run/exec.sock"

    def test_log_settings_are_normalised(self):
        settings = Settings(_env_file=None, log_level="debug", log_format="JSON")

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("log_level", "LOUD"),
            ("log_format", "xml"),
            ("port", 0),
            ("port", 70000),
            ("max_stop_timeout", -1),
            ("poll_interval_ms", 0),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
