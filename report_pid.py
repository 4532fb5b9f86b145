#!/usr/bin/env python3
"""
PY-PID-REPORTER - print <pid>:<ppid> of this command process.

Entry point for running from a source checkout.
"""

import sys

from pid_reporter.main import main

if __name__ == '__main__':
    sys.exit(main())
