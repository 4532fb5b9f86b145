"""
Data models for a single reporter invocation.
"""

from dataclasses import dataclass


@dataclass
class RunOptions:
    """Options collected from the command line."""
    sleep_seconds: int = 0
    exit_code: int = 0
    show_help: bool = False


@dataclass(frozen=True)
class ProcessIdentity:
    """Identifiers of the running process and its parent."""
    pid: int
    ppid: int
