"""
Signal forwarding

Relays signals received by the client to the remote execution.
"""

import signal
from collections import deque
from typing import Deque, Dict, Iterable

from exec_client.application.services import SignalService
from exec_client.domain.value_objects import ExecutionHandle
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)

FORWARDED_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT")
    if hasattr(signal, name)
)


class SignalForwarder:
    """
    Records signals while installed and forwards them on demand.

    Handlers only queue the signal number. drain() is meant to run from
    the poll loop, so remote calls never overlap.

    Example:
        with SignalForwarder(SignalService(context)) as forwarder:
            poller.wait_result(handle, on_poll=forwarder.drain)
    """

    def __init__(
        self,
        signal_service: SignalService,
        signals: Iterable[int] = FORWARDED_SIGNALS,
    ):
        self._signal_service = signal_service
        self._signals = tuple(signals)
        self._pending: Deque[int] = deque()
        self._previous: Dict[int, object] = {}

    def _handle(self, signum, frame) -> None:
        self._pending.append(signum)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def install(self) -> None:
        for signum in self._signals:
            self._previous[signum] = signal.signal(signum, self._handle)
        logger.debug("Signal handlers installed", signals=list(self._signals))

    def restore(self) -> None:
        while self._previous:
            signum, handler = self._previous.popitem()
            signal.signal(signum, handler)

    def drain(self, handle: ExecutionHandle) -> None:
        """Forward every recorded signal to ``handle``."""
        while self._pending:
            signum = self._pending.popleft()
            logger.info("Forwarding signal", process_id=handle.process_id, signal=signum)
            self._signal_service.send_signal(handle, signum)

    def __enter__(self) -> "SignalForwarder":
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.restore()
