"""
Signal Service

Best-effort delivery of signals to a running execution.
"""

from typing import Optional

from exec_client.application.context import ClientContext
from exec_client.domain.errors import ExecClientError, SignalDeliveryError
from exec_client.domain.value_objects import ExecutionHandle
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SignalService:
    """
    Fire-and-forget signal dispatcher.

    Failures are logged and kept in ``last_error``; they never propagate.
    """

    def __init__(self, context: ClientContext):
        self._context = context
        self.last_error: Optional[SignalDeliveryError] = None

    def send_signal(self, handle: ExecutionHandle, signal: int) -> bool:
        """
        Send a signal to the execution behind ``handle``.

        Args:
            handle: Target execution
            signal: Signal number

        Returns:
            True if the service acknowledged the signal, False otherwise
        """
        try:
            self._context.service.kill_process(handle, int(signal))
        except ExecClientError as e:
            self.last_error = SignalDeliveryError(handle.process_id, int(signal), str(e))
            logger.warning(
                "Send signal failed (non-fatal)",
                process_id=handle.process_id,
                signal=int(signal),
                error=str(e),
            )
            return False

        logger.debug("Signal sent", process_id=handle.process_id, signal=int(signal))
        return True
