"""Process and filesystem adapters."""

from .files import atomic_write_text
from .process import CommandOutput, ProcessError, run

__all__ = [
    "CommandOutput",
    "ProcessError",
    "atomic_write_text",
    "run",
]
