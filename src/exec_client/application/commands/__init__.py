"""
Application Commands

Use cases composed from the application services.
"""

from .run_command import RunCommand, program_parameters

__all__ = ["RunCommand", "program_parameters"]
