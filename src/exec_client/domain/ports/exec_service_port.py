"""
Execution Service Port Interface

Defines the contract for calls to the remote execution service.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod

from exec_client.domain.value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    HealthStatus,
    PollResult,
    StopRequest,
    SubmitResponse,
)


class IExecServicePort(ABC):
    """
    Port interface for the remote execution service.

    Every call blocks until the service answers. Implementations raise
    TransportUnavailableError when the service cannot be reached or its
    answer cannot be decoded.
    """

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Human-readable address of the service."""
        pass

    @abstractmethod
    def health_check(self) -> HealthStatus:
        """
        Probe whether the service is serving.

        Returns:
            Serving status reported by the service

        Raises:
            TransportUnavailableError: If the service is unreachable
        """
        pass

    @abstractmethod
    def exec_command(self, request: ExecutionRequest) -> SubmitResponse:
        """
        Submit a command for execution.

        Args:
            request: Execution request value object

        Returns:
            Submission status and the assigned handle
        """
        pass

    @abstractmethod
    def get_result(self, handle: ExecutionHandle) -> PollResult:
        """
        Query completion status of an execution.

        Args:
            handle: Handle returned by exec_command

        Returns:
            Current status and, when stopped, the exit code
        """
        pass

    @abstractmethod
    def kill_process(self, handle: ExecutionHandle, signal: int) -> None:
        """
        Deliver a signal to a running execution.

        Args:
            handle: Target execution
            signal: Signal number
        """
        pass

    @abstractmethod
    def stop_server(self, request: StopRequest) -> None:
        """
        Ask the service to stop gracefully.

        Args:
            request: Stop request carrying the clamped timeout
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the transport handle."""
        pass
