"""
Execution client errors

Errors raised while talking to the remote execution service.
"""

from typing import Optional


class ExecClientError(Exception):
    """Base class for execution client errors."""

    pass


class ConnectionSetupError(ExecClientError):
    """The transport handle to the service could not be built."""

    def __init__(self, endpoint: str, reason: str = ""):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Failed to set up connection to {endpoint}: {reason}")


class TransportUnavailableError(ExecClientError):
    """The service could not be reached or answered unintelligibly."""

    def __init__(
        self,
        endpoint: str,
        reason: str = "",
        status_code: Optional[int] = None,
    ):
        self.endpoint = endpoint
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to send request to {endpoint}: {reason}")


class ServiceNotServingError(ExecClientError):
    """The service is reachable but does not accept work."""

    def __init__(self, status: str = ""):
        self.status = status
        super().__init__(f"Service is present but not serving (status={status})")


class ServiceLaunchError(ExecClientError):
    """Auto-launching the service failed, or it stayed unreachable after launch."""

    def __init__(self, command: str, reason: str = ""):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to launch service '{command}': {reason}")


class RemoteSubmissionError(ExecClientError):
    """The service rejected an exec request."""

    def __init__(self, command: str, status: str = ""):
        self.command = command
        self.status = status
        super().__init__(
            f"Failed to launch the process '{command}' (status={status})"
        )


class RemoteReportedError(ExecClientError):
    """Polling returned a status other than running or stopped."""

    def __init__(self, process_id: int, status: str = ""):
        self.process_id = process_id
        self.status = status
        super().__init__(
            f"Execution {process_id} reported unexpected status {status}"
        )


class SignalDeliveryError(ExecClientError):
    """A signal could not be delivered to a running execution."""

    def __init__(self, process_id: int, signal: int, reason: str = ""):
        self.process_id = process_id
        self.signal = signal
        self.reason = reason
        super().__init__(
            f"Failed to deliver signal {signal} to execution {process_id}: {reason}"
        )


class InvalidRequestError(ExecClientError, ValueError):
    """A request was rejected before it was sent."""

    def __init__(self, field: str, reason: str = ""):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
