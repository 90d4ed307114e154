"""
Connection establishment

Builds the transport handle to the execution service from settings.
"""

from pathlib import Path
from typing import Optional

import httpx

from exec_client.domain.errors import ConnectionSetupError
from exec_client.infrastructure.config import Settings
from exec_client.infrastructure.http.exec_service_client import ExecServiceClient
from exec_client.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Host header used when talking over a Unix socket
UDS_BASE_URL = "http://localhost"


def open_transport(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> ExecServiceClient:
    """
    Build the HTTP client for the service endpoint.

    The service is either reached over TCP (host/port) or over a local
    Unix socket when ``socket_path`` is set. No request is sent here and
    there is no retry: any problem building the handle is fatal.

    Args:
        settings: Client settings
        transport: Optional transport override (tests)

    Returns:
        Execution service adapter bound to the new client

    Raises:
        ConnectionSetupError: If the endpoint is invalid
    """
    endpoint = settings.endpoint

    if settings.socket_path:
        socket_dir = Path(settings.socket_path).expanduser().parent
        if not socket_dir.is_dir():
            raise ConnectionSetupError(endpoint, f"directory {socket_dir} does not exist")
        base_url = UDS_BASE_URL
        if transport is None:
            transport = httpx.HTTPTransport(uds=settings.socket_path)
    else:
        if not settings.host:
            raise ConnectionSetupError(endpoint, "host must not be empty")
        base_url = f"http://{settings.host}:{settings.port}"

    try:
        client = httpx.Client(
            base_url=base_url,
            timeout=settings.request_timeout,
            transport=transport,
        )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise ConnectionSetupError(endpoint, str(e)) from e

    logger.debug("Transport ready", endpoint=endpoint, base_url=base_url)
    return ExecServiceClient(client, endpoint)
