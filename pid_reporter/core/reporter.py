"""
Main reporter class.
"""

import time
from typing import Optional

from .process_identity import get_process_identity
from ..models.run_options import RunOptions, ProcessIdentity
from ..output.formatters import TextFormatter
from ..output.handlers import OutputHandler, StdoutHandler


class ProcessReporter:
    """Prints the process identity, then sleeps and resolves the exit status."""

    def __init__(self, options: RunOptions, handler: Optional[OutputHandler] = None):
        self.options = options
        self.handler = handler or StdoutHandler(TextFormatter())

    def run(self) -> int:
        """Run the report and return the process exit status."""
        self.report()

        if self.options.sleep_seconds > 0:
            time.sleep(self.options.sleep_seconds)

        return self.options.exit_code

    def report(self) -> ProcessIdentity:
        """Write the identity line and return the identity written."""
        identity = get_process_identity()
        self.handler.output(identity)
        return identity
