"""Core functionality for the keyescape library.

Converts arbitrary application keys into document ids accepted by a storage
backend that rejects a fixed set of characters and limits ids to 255 characters.
"""

from .exceptions import InvalidKeyError
from .key_info import KeyInfo
from .utils.hash import hash_hexdigest

# Maximum document id length accepted by the storage backend
MAX_KEY_LENGTH = 255

# Characters the storage backend rejects in document ids
FORBIDDEN_CHARACTERS = frozenset(["\\", "?", "/", "#", "\t", "\n", "\r", "*"])

# Each forbidden character is replaced by `*` and its lowercase hex code point, e.g. "/" -> "*2f"
ESCAPE_MAP = {c: f"*{ord(c):x}" for c in sorted(FORBIDDEN_CHARACTERS)}

# str.translate() table keyed by code point
_TRANSLATION_TABLE = str.maketrans(ESCAPE_MAP)


def _astral_count(text: str) -> int:
    """Number of characters outside the BMP, each taking two UTF-16 code units."""
    return sum(1 for char in text if ord(char) > 0xFFFF)


def _utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return len(text) + _astral_count(text)


def _exceeds_max_length(key: str) -> bool:
    """Whether key is longer than `MAX_KEY_LENGTH` UTF-16 code units."""
    if len(key) > MAX_KEY_LENGTH:
        return True
    if len(key) * 2 <= MAX_KEY_LENGTH:
        # fits even if every character were astral
        return False
    return _utf16_length(key) > MAX_KEY_LENGTH


def _utf16_prefix(text: str, units: int) -> str:
    """Longest prefix of text fitting in `units` UTF-16 code units without splitting a character."""
    head = text[:units]
    if not _astral_count(head):
        # no astral characters, code points and code units agree
        return head

    count = 0
    end = 0
    for char in text:
        count += 2 if ord(char) > 0xFFFF else 1
        if count > units:
            break
        end += 1
    return text[:end]


def has_forbidden_characters(key: str) -> bool:
    """Check whether a key contains any character the storage backend rejects.

    Args:
        key: Key to scan.

    Returns:
        True if at least one forbidden character is present.
    """
    return not FORBIDDEN_CHARACTERS.isdisjoint(key)


def truncate_key(key: str, compatibility_mode: bool = True) -> str:
    """Cap a key at `MAX_KEY_LENGTH` characters.

    Overlong keys keep their leading characters and end with the SHA-256 hex digest
    of the full key, so keys sharing a long prefix still map to distinct ids.

    Args:
        key: Already escaped key.
        compatibility_mode: When False, the key is returned unchanged regardless of length.

    Returns:
        The key itself when short enough, otherwise the truncated key with digest.
    """
    if not compatibility_mode or not _exceeds_max_length(key):
        return key

    digest = hash_hexdigest(key)
    return _utf16_prefix(key, MAX_KEY_LENGTH - len(digest)) + digest


def escape_key(key: str, key_suffix: str | None = "", compatibility_mode: bool = True) -> str:
    """Convert a key into a document id that can be used safely with the storage backend.

    Args:
        key: Application key to escape. Any non-empty string is accepted.
        key_suffix: Appended to the escaped key before truncation. Must not contain
            forbidden characters.
        compatibility_mode: When True, ids longer than `MAX_KEY_LENGTH` are truncated.

    Returns:
        A document id free of forbidden characters.

    Raises:
        InvalidKeyError: If key is empty or missing, is not a string, or the suffix
            contains forbidden characters.
    """
    if not key:
        raise InvalidKeyError()
    if not isinstance(key, str):
        raise InvalidKeyError(f"The 'key' parameter must be a string, not {type(key).__name__}.")

    key_suffix = key_suffix or ""
    if not isinstance(key_suffix, str):
        raise InvalidKeyError(
            f"The 'key_suffix' parameter must be a string, not {type(key_suffix).__name__}."
        )
    if has_forbidden_characters(key_suffix):
        raise InvalidKeyError(f"Cannot use invalid key characters in key_suffix: {key_suffix!r}")

    # Scan first so clean keys are passed through without building a copy
    if has_forbidden_characters(key):
        key = key.translate(_TRANSLATION_TABLE)

    return truncate_key(key + key_suffix if key_suffix else key, compatibility_mode)


def describe_key(key: str, key_suffix: str | None = "", compatibility_mode: bool = True) -> KeyInfo:
    """Escape a key and report what the transformation did.

    Args:
        key: Application key to escape.
        key_suffix: See `escape_key`.
        compatibility_mode: See `escape_key`.

    Returns:
        KeyInfo describing the input and the resulting document id.

    Raises:
        InvalidKeyError: Under the same conditions as `escape_key`.
    """
    escaped = escape_key(key, key_suffix, compatibility_mode)
    untruncated = key.translate(_TRANSLATION_TABLE) + (key_suffix or "")
    return KeyInfo(
        key=key,
        escaped=escaped,
        length=_utf16_length(escaped),
        was_escaped=has_forbidden_characters(key),
        was_truncated=escaped != untruncated,
    )
