"""
Execution service HTTP client

Implements IExecServicePort over a blocking httpx client.
"""

from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from exec_client.domain.errors import TransportUnavailableError
from exec_client.domain.ports import IExecServicePort
from exec_client.domain.value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    HealthStatus,
    PollResult,
    ResultStatus,
    StopRequest,
    SubmitResponse,
    SubmitStatus,
)
from exec_client.infrastructure.http.dto import (
    ExecCommandRequest,
    ExecCommandResponse,
    GetResultRequest,
    GetResultResponse,
    HealthCheckResponse,
    KillProcessRequest,
    StopServerRequest,
)
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class ExecServiceClient(IExecServicePort):
    """
    HTTP adapter for the execution service.

    One instance wraps one httpx.Client for the lifetime of a run.
    Every failure to obtain a decodable 2xx answer is reported as
    TransportUnavailableError; the service's own error detail is not
    distinguished from a network failure.
    """

    def __init__(self, client: httpx.Client, endpoint: str):
        """
        Args:
            client: Configured httpx client (base_url, timeout, transport)
            endpoint: Human-readable service address
        """
        self._client = client
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def close(self) -> None:
        self._client.close()

    def _call(
        self,
        method: str,
        path: str,
        payload: Optional[BaseModel] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        try:
            response = self._client.request(
                method,
                path,
                json=payload.model_dump() if payload is not None else None,
            )
        except httpx.TimeoutException as e:
            raise TransportUnavailableError(self._endpoint, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportUnavailableError(self._endpoint, str(e) or type(e).__name__) from e

        if not 200 <= response.status_code < 300:
            raise TransportUnavailableError(
                self._endpoint,
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise TransportUnavailableError(
                self._endpoint, f"{method} {path} returned invalid JSON"
            ) from e

    def _decode(self, model: Type[ResponseModel], body: Any, path: str) -> ResponseModel:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise TransportUnavailableError(
                self._endpoint, f"unexpected response from {path}: {e.error_count()} error(s)"
            ) from e

    def health_check(self) -> HealthStatus:
        body = self._call("GET", "/health")
        response = self._decode(HealthCheckResponse, body, "/health")
        return HealthStatus(response.status)

    def exec_command(self, request: ExecutionRequest) -> SubmitResponse:
        payload = ExecCommandRequest(**request.to_dict())
        body = self._call("POST", "/exec", payload)
        response = self._decode(ExecCommandResponse, body, "/exec")
        return SubmitResponse(
            status=SubmitStatus(response.status),
            handle=ExecutionHandle(response.process_id),
        )

    def get_result(self, handle: ExecutionHandle) -> PollResult:
        body = self._call("POST", "/result", GetResultRequest(process_id=handle.process_id))
        response = self._decode(GetResultResponse, body, "/result")
        return PollResult(status=ResultStatus(response.status), exit_code=response.result)

    def kill_process(self, handle: ExecutionHandle, signal: int) -> None:
        self._call(
            "POST",
            "/kill",
            KillProcessRequest(process_id=handle.process_id, signal=int(signal)),
        )
        logger.debug("Kill request acknowledged", process_id=handle.process_id, signal=int(signal))

    def stop_server(self, request: StopRequest) -> None:
        self._call("POST", "/stop", StopServerRequest(**request.to_dict()))

