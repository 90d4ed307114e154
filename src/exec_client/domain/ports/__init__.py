"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on external systems are abstracted through ports.
"""

from .exec_service_port import IExecServicePort
from .launcher_port import ILauncherPort

__all__ = [
    "IExecServicePort",
    "ILauncherPort",
]
