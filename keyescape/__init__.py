"""keyescape - Convert application keys into storage-safe document ids.

The storage backend rejects `\\`, `?`, `/`, `#`, tab, newline, carriage return and `*`
in document ids and limits ids to 255 characters. `escape_key` replaces each such
character with `*` and its hex code point, and shortens overlong ids with a SHA-256 digest.
"""

from .core import (
    ESCAPE_MAP,
    FORBIDDEN_CHARACTERS,
    MAX_KEY_LENGTH,
    describe_key,
    escape_key,
    has_forbidden_characters,
    truncate_key,
)
from .exceptions import InvalidKeyError
from .key_info import KeyInfo

# Dynamic version import
__version__: str
try:
    from importlib.metadata import PackageNotFoundError, version as _version

    __version__ = _version("keyescape")
except PackageNotFoundError:
    # Fallback for development environments where the library package itself is not installed
    __version__ = "0.1.0.dev0"

# module names that are exposed to wildcard imports `from keyescape import *`
__all__ = [
    "__version__",
    "ESCAPE_MAP",
    "FORBIDDEN_CHARACTERS",
    "MAX_KEY_LENGTH",
    "describe_key",
    "escape_key",
    "has_forbidden_characters",
    "truncate_key",
    "InvalidKeyError",
    "KeyInfo",
]
