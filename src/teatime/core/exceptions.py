"""
Teatime exception hierarchy.

All teatime exceptions inherit from TeatimeError, so the front-end can catch
library-level errors while still distinguishing a malformed period name
from a storage failure.
"""


class TeatimeError(Exception):
    """Base exception class for all teatime errors."""


class ConfigurationError(TeatimeError):
    """Raised for configuration errors (unreadable or malformed config file)."""


class ParseError(TeatimeError, ValueError):
    """Raised when a period name does not match its category's canonical format."""


class StoreError(TeatimeError):
    """Raised for Note Store I/O failures (permissions, disk errors, unsafe names)."""


class StoreKeyError(StoreError, KeyError):
    """Raised when a project or note that must exist does not."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""
