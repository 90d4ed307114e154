"""
Execution Value Objects

Immutable value objects exchanged with the remote execution service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from exec_client.domain.errors import InvalidRequestError


class HealthStatus(str, Enum):
    """Serving status reported by the health probe."""

    SERVING = "SERVING"
    NOT_SERVING = "NOT_SERVING"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class SubmitStatus(str, Enum):
    """Status returned by the service right after an exec request."""

    RUNNING = "RUNNING"
    LAUNCH_FAILED = "LAUNCH_FAILED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class ResultStatus(str, Enum):
    """Status returned when polling an execution for completion."""

    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


@dataclass(frozen=True)
class ExecutionHandle:
    """
    Opaque identifier assigned by the service to a launched execution.

    Only valid while the remote execution exists. The client keeps no
    other state about it.
    """

    process_id: int

    def __int__(self) -> int:
        return self.process_id

    def __str__(self) -> str:
        return str(self.process_id)


@dataclass(frozen=True)
class ExecutionRequest:
    """
    Request to run a command on the execution service.

    Attributes:
        process_id: Process id of the submitting client
        command: Command (path) to execute, must be non-empty
        parameters: Ordered argument strings
        environment: Ordered ``KEY=VALUE`` strings, forwarded verbatim
        sockpath: Companion socket path inside a call-scoped temporary directory
    """

    process_id: int
    command: str
    parameters: Tuple[str, ...] = ()
    environment: Tuple[str, ...] = ()
    sockpath: str = ""

    def __post_init__(self):
        """Validate and freeze the request sequences."""
        if not self.command:
            raise InvalidRequestError("command", "must be a non-empty string")
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "environment", tuple(self.environment))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation."""
        return {
            "process_id": self.process_id,
            "command": self.command,
            "parameters": list(self.parameters),
            "environments": list(self.environment),
            "sockpath": self.sockpath,
        }


@dataclass(frozen=True)
class SubmitResponse:
    """Immediate answer to an exec request."""

    status: SubmitStatus
    handle: ExecutionHandle


@dataclass(frozen=True)
class PollResult:
    """Completion status of an execution and its exit code when stopped."""

    status: ResultStatus
    exit_code: int = 0


@dataclass(frozen=True)
class StopRequest:
    """
    Graceful stop request for the service.

    Attributes:
        timeout: Seconds the service may take to stop, already clamped
    """

    timeout: int = 0

    @classmethod
    def clamped(cls, requested: int, maximum: int) -> "StopRequest":
        """Build a stop request whose timeout never exceeds ``maximum``."""
        return cls(timeout=max(0, min(int(requested), int(maximum))))

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.timeout}


@dataclass
class LaunchAttempt:
    """Bookkeeping for the single auto-launch permitted per liveness check."""

    attempted: bool = False
    pid: Optional[int] = None
