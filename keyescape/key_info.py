"""Module for KeyInfo class."""

from dataclasses import dataclass
from typing import Any

from .utils.formatters import TwoColumnFormatMixin


@dataclass(frozen=True)
class KeyInfo(TwoColumnFormatMixin):
    """Result of escaping a single key.

    Attributes:
        key: Original application key.
        escaped: Document id produced for the key.
        length: Length of the document id in UTF-16 code units.
        was_escaped: Whether the key contained forbidden characters.
        was_truncated: Whether the id was shortened and suffixed with a digest.
    """

    key: str
    escaped: str
    length: int
    was_escaped: bool = False
    was_truncated: bool = False

    def __post_init__(self) -> None:
        """Require key and escaped to be set."""
        if not self.key or not self.escaped:
            raise ValueError("Key and escaped key cannot be empty")

    @property
    def is_safe(self) -> bool:
        """Whether the original key is already usable as a document id."""
        return self.key == self.escaped

    def to_dict(self) -> dict[str, Any]:
        """Convert the key info to a dictionary."""
        # do not change key names as they are used in the CSV, TSV, and JSON output
        # "key" must be first
        return {
            "key": self.key,
            "escaped": self.escaped,
            "length": self.length,
            "was_escaped": self.was_escaped,
            "was_truncated": self.was_truncated,
        }
