"""
Submission Service

Sends a command to the execution service and interprets the answer.
"""

import os
import tempfile
from pathlib import Path
from typing import Sequence

from exec_client.application.context import ClientContext
from exec_client.domain.errors import RemoteSubmissionError, TransportUnavailableError
from exec_client.domain.value_objects import (
    ExecutionHandle,
    ExecutionRequest,
    SubmitStatus,
)
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SubmissionService:
    """
    Command submitter.

    Each call allocates its own temporary directory and advertises a
    companion socket path inside it. The directory is removed when the
    call returns; when the service is expected to use that path is
    outside this client's control.
    """

    def __init__(self, context: ClientContext):
        self._context = context

    def build_request(
        self,
        command: str,
        parameters: Sequence[str],
        environment: Sequence[str],
        sockpath: str,
    ) -> ExecutionRequest:
        """Assemble a request for this client process; order is preserved."""
        return ExecutionRequest(
            process_id=os.getpid(),
            command=command,
            parameters=tuple(parameters),
            environment=tuple(environment),
            sockpath=sockpath,
        )

    def submit(
        self,
        command: str,
        parameters: Sequence[str] = (),
        environment: Sequence[str] = (),
    ) -> ExecutionHandle:
        """
        Submit a command for execution.

        Args:
            command: Command to run, non-empty
            parameters: Ordered argument strings
            environment: Ordered KEY=VALUE strings, sent verbatim

        Returns:
            Handle assigned by the service

        Raises:
            InvalidRequestError: If command is empty
            RemoteSubmissionError: The service could not launch the process
            TransportUnavailableError: The request could not be sent
        """
        settings = self._context.settings

        with tempfile.TemporaryDirectory(prefix=settings.companion_dir_prefix) as tmp_dir:
            sockpath = str(Path(tmp_dir) / settings.companion_socket_name)
            request = self.build_request(command, parameters, environment, sockpath)

            logger.debug(
                "Submitting command",
                command=command,
                parameters=list(request.parameters),
                environment_size=len(request.environment),
                sockpath=sockpath,
            )

            try:
                response = self._context.service.exec_command(request)
            except TransportUnavailableError as e:
                logger.error("Failed to send exec request", command=command, error=str(e))
                raise

        if response.status is SubmitStatus.RUNNING:
            logger.info("Process launched", command=command, process_id=response.handle.process_id)
            return response.handle

        logger.error("Service failed to launch the process", command=command, status=response.status.value)
        raise RemoteSubmissionError(command, response.status.value)
