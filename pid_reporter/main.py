"""
Main CLI interface for the process reporter.
"""

import argparse
import re
import sys
from typing import List, Optional

import psutil

from .config.settings import config
from .core.reporter import ProcessReporter
from .models.run_options import RunOptions

_LEADING_INT = re.compile(r'\s*([+-]?\d+)', re.ASCII)
_VALUE_OPTIONS = ('-s', '-x')


class ReporterArgumentParser(argparse.ArgumentParser):
    """Argument parser that answers parse failures with the usage text."""

    def error(self, message):
        print(f"Error: {message}", file=sys.stderr)
        print_usage()
        self.exit(0)


def print_usage():
    """Print usage text to stderr."""
    print(config.get_usage(), file=sys.stderr)


def parse_integer(value: str) -> int:
    """Parse the leading integer of value.

    Leading whitespace and an optional sign are accepted, trailing garbage is
    ignored. Raises ValueError when no digits lead the string or the result
    does not fit a 32-bit signed integer.
    """
    match = _LEADING_INT.match(value)
    if not match:
        raise ValueError(f"invalid integer value: {value!r}")

    number = int(match.group(1))
    if not config.get('parsing.int_min') <= number <= config.get('parsing.int_max'):
        raise ValueError(f"integer value out of range: {value!r}")

    return number


def fold_integer_values(values: Optional[List[str]], initial: int) -> int:
    """Apply repeated option values in order, keeping the last valid one."""
    result = initial
    for value in values or []:
        try:
            result = parse_integer(value)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
    return result


def attach_option_values(argv: List[str]) -> List[str]:
    """Join each -s/-x with the token after it.

    The following token is always the option value, even when it starts with
    a dash, so '-s -z' becomes '-s=-z'. A trailing -s/-x is left alone.
    Tokens after '--' are not rewritten.
    """
    result = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--':
            result.extend(argv[i:])
            break
        if arg in _VALUE_OPTIONS and i + 1 < len(argv):
            result.append(f"{arg}={argv[i + 1]}")
            i += 2
        else:
            result.append(arg)
            i += 1
    return result


def create_argument_parser():
    """Create and configure argument parser."""
    parser = ReporterArgumentParser(
        description='Print <pid>:<ppid> of this command process',
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument('-s', dest='sleep', action='append', metavar='num',
                        help='Seconds to sleep before exiting')
    parser.add_argument('-x', dest='exit_code', action='append', metavar='num',
                        help='Exit code')
    parser.add_argument('-h', '-?', dest='help', action='store_true',
                        help='Show usage and exit')
    return parser


def parse_options(argv: Optional[List[str]] = None) -> RunOptions:
    """Parse command line arguments into run options.

    Unknown options are ignored. When help is requested no option values are
    parsed, so no diagnostics are printed.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_argument_parser()
    args, _unknown = parser.parse_known_args(attach_option_values(argv))

    if args.help:
        return RunOptions(show_help=True)

    defaults = config.get_defaults()
    return RunOptions(
        sleep_seconds=fold_integer_values(args.sleep, defaults.get('sleep_seconds', 0)),
        exit_code=fold_integer_values(args.exit_code, defaults.get('exit_code', 0)),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    options = parse_options(argv)

    if options.show_help:
        print_usage()
        return 0

    try:
        return ProcessReporter(options).run()
    except psutil.Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
