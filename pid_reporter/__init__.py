"""
PY-PID-REPORTER - print <pid>:<ppid> of the calling process.
"""

__version__ = '1.0.0'
