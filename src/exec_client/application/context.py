"""
Client Context

Per-run state shared by the application services.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from exec_client.domain.ports import IExecServicePort, ILauncherPort
from exec_client.infrastructure.config import Settings, get_settings
from exec_client.infrastructure.http import open_transport
from exec_client.infrastructure.launcher import ProcessLauncher


@dataclass
class ClientContext:
    """
    Everything one run needs to talk to the execution service.

    Created once per run by connect() and passed to every service. It is
    not persisted or reused across runs; closing it releases the transport.

    Attributes:
        service: Port to the remote execution service
        launcher: Port used to auto-launch the service
        settings: Client settings
        sleep: Blocking sleep in seconds, replaceable in tests
    """

    service: IExecServicePort
    launcher: ILauncherPort
    settings: Settings
    sleep: Callable[[float], None] = field(default=time.sleep)

    def close(self) -> None:
        self.service.close()

    def __enter__(self) -> "ClientContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def connect(settings: Optional[Settings] = None) -> ClientContext:
    """
    Establish the connection handle for one run.

    Args:
        settings: Client settings, defaults to the environment-driven singleton

    Returns:
        A fresh ClientContext

    Raises:
        ConnectionSetupError: If the transport cannot be built
    """
    settings = settings or get_settings()
    return ClientContext(
        service=open_transport(settings),
        launcher=ProcessLauncher(settings.server_command),
        settings=settings,
    )
