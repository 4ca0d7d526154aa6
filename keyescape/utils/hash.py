"""Hashing utilities for disambiguating truncated keys."""

from hashlib import sha256


def _to_utf8(text: str) -> bytes:
    """Encode text as UTF-8 the way JavaScript runtimes do.

    Surrogate code points that form a pair are joined into one character, and each
    lone surrogate becomes U+FFFD, so ids match those written by other clients.
    """
    utf16 = text.encode("utf-16-le", "surrogatepass")
    return utf16.decode("utf-16-le", "replace").encode("utf-8")


def hash_hexdigest(data: str | bytes) -> str:
    """Hash data with SHA-256.

    Args:
        data: data to hash. Strings are encoded as UTF-8, with lone surrogates
            replaced by U+FFFD so that every Python string can be hashed.

    Returns:
        The 64 character lowercase hexadecimal digest of the data.

    Raises:
        ValueError: If data is not a string or bytes.
    """
    # validate and convert data
    if isinstance(data, str):
        data = _to_utf8(data)
    elif not isinstance(data, bytes):
        raise ValueError("Data must be a string or bytes.")

    return sha256(data).hexdigest()
