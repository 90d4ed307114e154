"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .http import ExecServiceClient, open_transport
from .launcher import ProcessLauncher

__all__ = ["ExecServiceClient", "ProcessLauncher", "open_transport"]
