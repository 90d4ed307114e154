"""
Client Domain Layer

Value objects, error taxonomy and port interfaces for talking to
the remote execution service.
"""

from .value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    HealthStatus,
    PollResult,
    ResultStatus,
    StopRequest,
    SubmitResponse,
    SubmitStatus,
)

__all__ = [
    "ExecutionHandle",
    "ExecutionRequest",
    "HealthStatus",
    "PollResult",
    "ResultStatus",
    "StopRequest",
    "SubmitResponse",
    "SubmitStatus",
]
