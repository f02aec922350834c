"""Custom exception types."""

from typing import Final


class EmptyViewError(IndexError):
    """Exception raised whenever a byte is requested from an empty StringSlice.

    Raised by StringSlice.tail() on a null or zero-length view. Derives from IndexError so callers
    handling out of range reads catch it as well.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize a new EmptyViewError instance.

        Args:
            message: The exception's error message.
        """
        super().__init__()
        self.message: Final[str] = message

    def __str__(self) -> str:
        """Returns the exception's error message.

        Returns: The exception's error message.
        """
        return self.message
