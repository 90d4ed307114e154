"""
Shutdown Service

Requests a graceful stop of the execution service.
"""

from exec_client.application.context import ClientContext
from exec_client.domain.errors import TransportUnavailableError
from exec_client.domain.value_objects import StopRequest
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ShutdownService:
    """Stop coordinator with a bounded timeout."""

    def __init__(self, context: ClientContext):
        self._context = context

    def stop(self, requested_timeout: int) -> bool:
        """
        Ask the service to stop within ``requested_timeout`` seconds.

        The timeout is clamped to ``settings.max_stop_timeout`` before it is
        sent. An unreachable service already counts as stopped.

        Returns:
            True if the service acknowledged, False if it was not running
        """
        maximum = self._context.settings.max_stop_timeout
        request = StopRequest.clamped(requested_timeout, maximum)
        if request.timeout != requested_timeout:
            logger.debug(
                "Stop timeout clamped",
                requested=requested_timeout,
                sent=request.timeout,
            )

        try:
            self._context.service.stop_server(request)
        except TransportUnavailableError as e:
            logger.info("The service is not running", endpoint=self._context.service.endpoint, error=str(e))
            return False

        logger.info("The service has received the stop request", timeout=request.timeout)
        return True
