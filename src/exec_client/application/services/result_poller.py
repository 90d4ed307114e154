"""
Result Poller

Waits for a submitted execution to stop and returns its exit code.
"""

from typing import Callable, Optional

from exec_client.application.context import ClientContext
from exec_client.domain.errors import RemoteReportedError, TransportUnavailableError
from exec_client.domain.value_objects import ExecutionHandle, ResultStatus
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)

PollHook = Callable[[ExecutionHandle], None]


class ResultPoller:
    """
    Fixed-interval completion poller.

    There is no deadline: the loop ends only when the service reports
    STOPPED, reports any other non-running status, or cannot be reached.
    """

    def __init__(self, context: ClientContext):
        self._context = context

    def wait_result(
        self,
        handle: ExecutionHandle,
        on_poll: Optional[PollHook] = None,
    ) -> int:
        """
        Block until the execution stops.

        Args:
            handle: Handle returned by submission
            on_poll: Called with the handle before every poll, on the
                calling thread (used to forward pending signals)

        Returns:
            Exit code reported with the first STOPPED status

        Raises:
            RemoteReportedError: A status other than RUNNING or STOPPED
            TransportUnavailableError: The service could not be reached
        """
        interval = self._context.settings.poll_interval_ms / 1000.0
        polls = 0

        while True:
            if on_poll is not None:
                on_poll(handle)

            try:
                result = self._context.service.get_result(handle)
            except TransportUnavailableError as e:
                logger.error("Failed to get result", process_id=handle.process_id, error=str(e))
                raise
            polls += 1

            if result.status is ResultStatus.STOPPED:
                logger.info(
                    "Execution stopped",
                    process_id=handle.process_id,
                    exit_code=result.exit_code,
                    polls=polls,
                )
                return result.exit_code

            if result.status is ResultStatus.RUNNING:
                self._context.sleep(interval)
                continue

            logger.error(
                "Execution reported unexpected status",
                process_id=handle.process_id,
                status=result.status.value,
            )
            raise RemoteReportedError(handle.process_id, result.status.value)
