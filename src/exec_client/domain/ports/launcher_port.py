"""
Service Launcher Port Interface

Defines the contract for starting the execution service locally.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod


class ILauncherPort(ABC):
    """Port interface for spawning the execution service as a detached process."""

    @property
    @abstractmethod
    def command(self) -> str:
        """Command line used to start the service."""
        pass

    @abstractmethod
    def spawn(self) -> int:
        """
        Start the service without waiting for it.

        Returns:
            Process id of the spawned service

        Raises:
            ServiceLaunchError: If the process could not be started
        """
        pass
