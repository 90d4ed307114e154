"""
Interfaces Layer

Driving adapters that initiate interactions with the system.
Contains the command line interface and OS signal forwarding.
"""

from .cli import main
from .signals import SignalForwarder

__all__ = ["main", "SignalForwarder"]
