"""
Client configuration

Loads configuration from environment variables using pydantic-settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Execution client settings, read from ``EXEC_CLIENT_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXEC_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============== Service endpoint ==============
    host: str = Field(default="127.0.0.1", description="Execution service host")
    port: int = Field(default=7878, ge=1, le=65535, description="Execution service port")
    socket_path: Optional[str] = Field(
        default=None,
        description="Unix socket of the service; takes precedence over host/port",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Per-request timeout in seconds"
    )

    # ============== Auto-launch ==============
    server_command: str = Field(
        default="sandbox-exec-server",
        description="Command used to start the service when it is unreachable",
    )
    launch_delay_ms: int = Field(
        default=100, ge=0, description="Wait after spawning before probing again"
    )

    # ============== Execution ==============
    poll_interval_ms: int = Field(
        default=100, ge=1, description="Interval between completion polls"
    )
    companion_dir_prefix: str = Field(default="exec_client_")
    companion_socket_name: str = Field(default="remote_client.sock")

    # ============== Shutdown ==============
    max_stop_timeout: int = Field(
        default=3, ge=0, description="Upper bound for the stop timeout sent to the service"
    )
    cli_stop_timeout: int = Field(
        default=10, ge=0, description="Stop timeout requested by the `stop` command"
    )

    # ============== Logging ==============
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="text")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @property
    def endpoint(self) -> str:
        """Address of the service, for messages and logs."""
        if self.socket_path:
            return f"unix://{self.socket_path}"
        return f"{self.host}:{self.port}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get the settings singleton.

    lru_cache makes sure the environment is read only once.
    """
    return Settings()
