"""
Execution service API data transfer objects

Request and response bodies exchanged with the execution service over HTTP.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HealthCheckResponse(BaseModel):
    """Body of GET /health."""

    status: str = Field(..., description="Serving status (SERVING/NOT_SERVING)")


class ExecCommandRequest(BaseModel):
    """
    Body of POST /exec.

    Field names follow the service's wire format.
    """

    process_id: int = Field(..., description="Process id of the submitting client")
    command: str = Field(..., min_length=1, description="Command to execute")
    parameters: List[str] = Field(default_factory=list, description="Ordered arguments")
    environments: List[str] = Field(
        default_factory=list, description="Ordered KEY=VALUE environment entries"
    )
    sockpath: str = Field(default="", description="Companion socket path")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "process_id": 4242,
                    "command": "/bin/hello_world",
                    "parameters": ["hello_world"],
                    "environments": ["HOME=/root", "PATH=/usr/bin:/bin"],
                    "sockpath": "/tmp/exec_client_x1y2/remote_client.sock",
                }
            ]
        }
    )


class ExecCommandResponse(BaseModel):
    """Body returned by POST /exec."""

    status: str = Field(..., description="RUNNING or LAUNCH_FAILED")
    process_id: int = Field(default=0, description="Handle assigned by the service")


class GetResultRequest(BaseModel):
    """Body of POST /result."""

    process_id: int


class GetResultResponse(BaseModel):
    """Body returned by POST /result."""

    status: str = Field(..., description="RUNNING, STOPPED or ERROR")
    result: int = Field(default=0, description="Exit code once stopped")


class KillProcessRequest(BaseModel):
    """Body of POST /kill."""

    process_id: int
    signal: int


class StopServerRequest(BaseModel):
    """Body of POST /stop."""

    time: int = Field(..., ge=0, description="Seconds the service may take to stop")
