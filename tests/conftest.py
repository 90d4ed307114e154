"""Pytest configuration and fixtures."""

import logging
import sys
from collections import deque
from pathlib import Path
from typing import List, Optional

import pytest
import structlog

# Add src to path for imports when the package is not installed
_src_path = Path(__file__).resolve().parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from exec_client.application.context import ClientContext
from exec_client.domain.errors import ServiceLaunchError, TransportUnavailableError
from exec_client.domain.ports import IExecServicePort, ILauncherPort
from exec_client.domain.value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    HealthStatus,
    PollResult,
    StopRequest,
    SubmitResponse,
)
from exec_client.infrastructure.config import Settings
from exec_client.infrastructure.logging import get_logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "contract: wire-level tests against the HTTP adapter")


UNREACHABLE = object()


def _unreachable() -> TransportUnavailableError:
    return TransportUnavailableError("fake:0", "connection refused")


class FakeExecService(IExecServicePort):
    """
    In-memory execution service.

    Scripted answers are queued per operation; the sentinel UNREACHABLE
    (or an exception instance) makes that call fail instead.
    """

    def __init__(self):
        self.health_answers: deque = deque()
        self.submit_answers: deque = deque()
        self.result_answers: deque = deque()
        self.kill_error: Optional[Exception] = None
        self.stop_error: Optional[Exception] = None
        self.calls: List[str] = []
        self.requests: List[ExecutionRequest] = []
        self.polled: List[ExecutionHandle] = []
        self.kills: List[tuple] = []
        self.stops: List[StopRequest] = []
        self.closed = False

    @property
    def endpoint(self) -> str:
        return "fake:0"

    @staticmethod
    def _answer(queue: deque, default):
        answer = queue.popleft() if queue else default
        if answer is UNREACHABLE:
            raise _unreachable()
        if isinstance(answer, Exception):
            raise answer
        return answer

    def health_check(self) -> HealthStatus:
        self.calls.append("health_check")
        return self._answer(self.health_answers, HealthStatus.SERVING)

    def exec_command(self, request: ExecutionRequest) -> SubmitResponse:
        self.calls.append("exec_command")
        self.requests.append(request)
        return self._answer(self.submit_answers, UNREACHABLE)

    def get_result(self, handle: ExecutionHandle) -> PollResult:
        self.calls.append("get_result")
        self.polled.append(handle)
        return self._answer(self.result_answers, UNREACHABLE)

    def kill_process(self, handle: ExecutionHandle, signal: int) -> None:
        self.calls.append("kill_process")
        self.kills.append((handle, signal))
        if self.kill_error is not None:
            raise self.kill_error

    def stop_server(self, request: StopRequest) -> None:
        self.calls.append("stop_server")
        self.stops.append(request)
        if self.stop_error is not None:
            raise self.stop_error

    def close(self) -> None:
        self.closed = True


class FakeLauncher(ILauncherPort):
    """Counts spawn attempts; optionally fails or makes a service healthy."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.spawned = 0

    @property
    def command(self) -> str:
        return "fake-exec-server"

    def spawn(self) -> int:
        self.spawned += 1
        if self.fail:
            raise ServiceLaunchError(self.command, "No such file or directory")
        return 31337


class SleepRecorder:
    """Stand-in for time.sleep that records the requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, isolated from the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_service() -> FakeExecService:
    return FakeExecService()


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def context(fake_service, fake_launcher, settings, sleeper) -> ClientContext:
    """Client context wired to in-memory fakes."""
    return ClientContext(
        service=fake_service,
        launcher=fake_launcher,
        settings=settings,
        sleep=sleeper,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() so captured streams are not reused across tests."""
    yield
    structlog.reset_defaults()
    get_logger()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
