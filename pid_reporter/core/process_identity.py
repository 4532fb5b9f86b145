"""
Process identifier lookup.
"""

import psutil

from ..models.run_options import ProcessIdentity


def get_process_identity() -> ProcessIdentity:
    """Read pid and ppid of the calling process from the OS."""
    process = psutil.Process()
    return ProcessIdentity(pid=process.pid, ppid=process.ppid())
