"""
HTTP Infrastructure

HTTP client adapters for the execution service.
"""

from .connection import open_transport
from .exec_service_client import ExecServiceClient

__all__ = ["ExecServiceClient", "open_transport"]
