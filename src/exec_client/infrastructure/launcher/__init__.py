"""
Launcher Infrastructure

Local spawning of the execution service.
"""

from .process_launcher import ProcessLauncher

__all__ = ["ProcessLauncher"]
