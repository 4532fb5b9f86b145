"""
Output formatters for process identifiers.
"""

from abc import ABC, abstractmethod

from ..models.run_options import ProcessIdentity


class OutputFormatter(ABC):
    """Base class for output formatters."""

    @abstractmethod
    def format(self, identity: ProcessIdentity) -> str:
        """Format the process identity."""
        pass


class TextFormatter(OutputFormatter):
    """Plain <pid>:<ppid> formatter."""

    def format(self, identity: ProcessIdentity) -> str:
        return f"{identity.pid}:{identity.ppid}"
