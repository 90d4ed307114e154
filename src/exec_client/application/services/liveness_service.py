"""
Liveness Service

Makes sure the execution service is up, launching it once if needed.
"""

from exec_client.application.context import ClientContext
from exec_client.domain.errors import (
    ServiceLaunchError,
    ServiceNotServingError,
    TransportUnavailableError,
)
from exec_client.domain.value_objects import HealthStatus, LaunchAttempt
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LivenessService:
    """
    Health probe with a single best-effort auto-launch.

    Probe outcomes:
    - SERVING: done
    - NOT_SERVING (or an unrecognised status): fail, nothing is launched
    - unreachable: spawn the service once, wait, probe again; a second
      unreachable probe fails

    Concurrent clients on the same host may both observe "unreachable"
    and both spawn; nothing here coordinates across processes.
    """

    def __init__(self, context: ClientContext):
        self._context = context

    def ensure_running(self) -> LaunchAttempt:
        """
        Ensure the service is reachable and serving.

        Returns:
            Record of the launch attempt made by this call, if any

        Raises:
            ServiceNotServingError: The service answered but is not serving
            ServiceLaunchError: Spawning failed, or the service stayed unreachable
        """
        service = self._context.service
        launcher = self._context.launcher
        attempt = LaunchAttempt()

        while True:
            try:
                status = service.health_check()
            except TransportUnavailableError as e:
                if attempt.attempted:
                    logger.error(
                        "Service still unreachable after launch",
                        endpoint=service.endpoint,
                        command=launcher.command,
                        error=str(e),
                    )
                    raise ServiceLaunchError(
                        launcher.command, "service unreachable after launch"
                    ) from e

                logger.info(
                    "Service unreachable, launching it",
                    endpoint=service.endpoint,
                    command=launcher.command,
                )
                attempt.pid = launcher.spawn()
                attempt.attempted = True
                self._context.sleep(self._context.settings.launch_delay_ms / 1000.0)
                continue

            if status is HealthStatus.SERVING:
                logger.debug(
                    "Service is serving",
                    endpoint=service.endpoint,
                    launched=attempt.attempted,
                )
                return attempt

            logger.error("Service is not serving", endpoint=service.endpoint, status=status.value)
            raise ServiceNotServingError(status.value)
