"""
Local service launcher

Starts the execution service as a detached background process.
"""

import shlex
import subprocess
from typing import List

from exec_client.domain.errors import ServiceLaunchError
from exec_client.domain.ports import ILauncherPort
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ProcessLauncher(ILauncherPort):
    """
    Spawns the service with its own session so it outlives the client.

    The child is never waited on; the caller only re-probes the service
    after a short delay.
    """

    def __init__(self, command: str):
        """
        Args:
            command: Service command line, split with shell rules
        """
        self._command = command

    @property
    def command(self) -> str:
        return self._command

    def _argv(self) -> List[str]:
        try:
            argv = shlex.split(self._command)
        except ValueError as e:
            raise ServiceLaunchError(self._command, f"invalid command line: {e}") from e
        if not argv:
            raise ServiceLaunchError(self._command, "no server command configured")
        return argv

    def spawn(self) -> int:
        argv = self._argv()
        try:
            process = subprocess.Popen(  # noqa: S603
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                start_new_session=True,
                close_fds=True,
            )
        except OSError as e:
            raise ServiceLaunchError(self._command, str(e)) from e

        logger.info("Service process spawned", command=self._command, pid=process.pid)
        return process.pid
