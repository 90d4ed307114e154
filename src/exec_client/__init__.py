"""
Sandbox Exec Client

Client-side orchestration for a trusted remote execution service:
auto-launch, command submission, completion polling, signals and shutdown.
"""

__version__ = "0.1.0"

from .application import (
    ClientContext,
    LivenessService,
    ResultPoller,
    RunCommand,
    ShutdownService,
    SignalService,
    SubmissionService,
    connect,
)
from .domain.errors import (
    ConnectionSetupError,
    ExecClientError,
    InvalidRequestError,
    RemoteReportedError,
    RemoteSubmissionError,
    ServiceLaunchError,
    ServiceNotServingError,
    SignalDeliveryError,
    TransportUnavailableError,
)
from .domain.value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    HealthStatus,
    PollResult,
    ResultStatus,
    StopRequest,
    SubmitStatus,
)

__all__ = [
    "ClientContext",
    "connect",
    "RunCommand",
    "LivenessService",
    "SubmissionService",
    "ResultPoller",
    "SignalService",
    "ShutdownService",
    "ExecClientError",
    "ConnectionSetupError",
    "InvalidRequestError",
    "TransportUnavailableError",
    "ServiceNotServingError",
    "ServiceLaunchError",
    "RemoteSubmissionError",
    "RemoteReportedError",
    "SignalDeliveryError",
    "ExecutionHandle",
    "ExecutionRequest",
    "HealthStatus",
    "PollResult",
    "ResultStatus",
    "StopRequest",
    "SubmitStatus",
]
