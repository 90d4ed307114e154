"""
Run Command

The full exec path: liveness check, submission, completion polling.
"""

from pathlib import PurePosixPath
from typing import List, Optional, Sequence

from exec_client.application.context import ClientContext
from exec_client.application.services import (
    LivenessService,
    ResultPoller,
    SubmissionService,
)
from exec_client.application.services.result_poller import PollHook
from exec_client.domain.value_objects import ExecutionHandle
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


def program_parameters(path: str, args: Sequence[str]) -> List[str]:
    """
    Build the parameter list for a program path.

    The first parameter is the program name (last path component), then
    the caller's arguments in order, like a process argv.
    """
    name = PurePosixPath(path).name or path
    return [name, *args]


class RunCommand:
    """
    Command handler for remote execution.

    Orchestrates the execution flow:
    1. Ensure the service is running (auto-launch once)
    2. Submit the program with its parameters and environment
    3. Poll until the program stops
    """

    def __init__(self, context: ClientContext):
        self._context = context
        self._liveness = LivenessService(context)
        self._submission = SubmissionService(context)
        self._poller = ResultPoller(context)
        self.handle: Optional[ExecutionHandle] = None

    def execute(
        self,
        path: str,
        args: Sequence[str] = (),
        environment: Sequence[str] = (),
        on_poll: Optional[PollHook] = None,
    ) -> int:
        """
        Run ``path`` remotely and wait for it.

        Args:
            path: Program path on the service side
            args: Program arguments
            environment: Complete KEY=VALUE list for the program
            on_poll: Hook run before each completion poll

        Returns:
            The program's exit code

        Raises:
            ExecClientError: Any failure along the exec path
        """
        self.start(path, args, environment)
        return self.wait(on_poll=on_poll)

    def start(
        self,
        path: str,
        args: Sequence[str] = (),
        environment: Sequence[str] = (),
    ) -> ExecutionHandle:
        """Ensure the service is running and submit ``path``; returns the handle."""
        self._liveness.ensure_running()

        self.handle = self._submission.submit(
            path,
            program_parameters(path, args),
            environment,
        )
        return self.handle

    def wait(self, on_poll: Optional[PollHook] = None) -> int:
        """Poll the execution started by start() until it stops."""
        if self.handle is None:
            raise RuntimeError("wait() called before start()")

        logger.debug("Waiting for result", process_id=self.handle.process_id)
        return self._poller.wait_result(self.handle, on_poll=on_poll)
