"""
Application Layer

Orchestrates the domain ports to run commands on the execution service.
Contains the client context, services and commands.
"""

from .commands.run_command import RunCommand
from .context import ClientContext, connect
from .services import (
    LivenessService,
    ResultPoller,
    ShutdownService,
    SignalService,
    SubmissionService,
)

__all__ = [
    # Context
    "ClientContext",
    "connect",
    # Commands
    "RunCommand",
    # Services
    "LivenessService",
    "ResultPoller",
    "ShutdownService",
    "SignalService",
    "SubmissionService",
]
