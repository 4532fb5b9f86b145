"""
Output handlers for different destination types.
"""

import sys
from abc import ABC, abstractmethod

from .formatters import OutputFormatter
from ..models.run_options import ProcessIdentity


class OutputHandler(ABC):
    """Base class for output handlers."""

    def __init__(self, formatter: OutputFormatter):
        self.formatter = formatter

    @abstractmethod
    def output(self, identity: ProcessIdentity):
        """Output the process identity."""
        pass


class StdoutHandler(OutputHandler):
    """Output to stdout."""

    def output(self, identity: ProcessIdentity):
        """Output to stdout."""
        content = self.formatter.format(identity)
        # Flushed so the line is visible before any sleep
        print(content, file=sys.stdout, flush=True)
