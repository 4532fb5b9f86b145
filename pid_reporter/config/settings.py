"""
Configuration defaults for the reporter.
"""

from typing import Dict, Any

USAGE_TEXT = """
print <pid>:<ppid> of this command process

Usage:
 -s <num>
            sleep time.
            this program exits after sleeping <num> seconds.
            time SHOULD be greater than 0.
            default is 0.
 -x <num>
            exit code.
            exit code can be changed by -x option.
            default is 0.
 -h, -?
            show this help and exit.
"""


class Config:
    """Configuration manager."""

    def __init__(self):
        self._config = self._load_default_config()

    def _load_default_config(self) -> Dict[str, Any]:
        """Load default configuration."""
        return {
            'defaults': {
                'sleep_seconds': 0,
                'exit_code': 0
            },
            'parsing': {
                # Range of a C int
                'int_min': -2 ** 31,
                'int_max': 2 ** 31 - 1
            },
            'usage': USAGE_TEXT
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)."""
        value = self._config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_defaults(self) -> Dict[str, Any]:
        """Get default option values."""
        return self.get('defaults', {})

    def get_usage(self) -> str:
        """Get the usage text printed for -h and -?."""
        return self.get('usage', '')


# Global configuration instance
config = Config()
