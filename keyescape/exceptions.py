"""Exceptions for the keyescape package."""


class InvalidKeyError(ValueError):
    """Exception raised when a key cannot be escaped."""

    def __init__(self, msg: str = "The 'key' parameter is required.") -> None:
        """Initialize the InvalidKeyError with a message."""
        super().__init__(msg)
