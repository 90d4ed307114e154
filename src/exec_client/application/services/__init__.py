"""
Application Services

Service classes for the client-side orchestration use cases.
"""

from .liveness_service import LivenessService
from .result_poller import ResultPoller
from .shutdown_service import ShutdownService
from .signal_service import SignalService
from .submission_service import SubmissionService

__all__ = [
    "LivenessService",
    "ResultPoller",
    "ShutdownService",
    "SignalService",
    "SubmissionService",
]
