"""The SliceReader allows the tokenization of a buffer into StringSlices in a stream-like fashion."""

import logging
from collections.abc import Generator
from typing import Final

from .cstr import cstr_length
from .string_slice import Buffer, Char, StringSlice, as_char, as_view

logger: Final[logging.Logger] = logging.getLogger(__name__)


class SliceReader:
    """The SliceReader allows the tokenization of a buffer into StringSlices in a stream-like fashion.

    Every slice handed out views the reader's buffer, nothing is copied.
    """

    def __init__(self, buffer: Buffer, offset: int | None = None) -> None:
        """Initialize a new SliceReader.

        Args:
            buffer: The data to tokenize.
            offset: The offset in the data to start from.
        """
        self._buffer: Final[memoryview] = as_view(buffer)
        self.offset: int = offset if offset is not None else 0

    @property
    def data(self) -> memoryview:
        """Returns the data of the current SliceReader.

        Returns:
            Byte data of the SliceReader.
        """
        return self._buffer

    @property
    def remaining(self) -> int:
        """Returns the number of bytes left to read.

        Returns:
            The number of bytes between the cursor and the end of the data.
        """
        return max(len(self._buffer) - self.offset, 0)

    def at_end(self) -> bool:
        """Test whether all the data was consumed.

        Returns:
            Whether the cursor reached the end of the data.
        """
        return self.offset >= len(self._buffer)

    def skip(self, offset: int) -> None:
        """Skip in the data of the specified offset.

        Args:
            offset: The offset to skip in the data by.
        """
        self.offset = min(max(self.offset + offset, 0), len(self._buffer))

    def _slice_to(self, end: int, consumed: int) -> StringSlice:
        start: Final[int] = min(self.offset, len(self._buffer))
        end = min(max(end, start), len(self._buffer))
        self.offset = min(end + consumed, len(self._buffer))
        return StringSlice.from_range(self._buffer, start, end - start)

    def read_slice(self, size: int, offset: int | None = None) -> StringSlice:
        """Read a slice of the specified size.

        Args:
            size: The size of the slice to read.
            offset: The absolute offset to read from.

        Returns:
            The read slice, shorter than requested when the data ends first.
        """
        if offset is not None:
            self.offset = offset
        return self._slice_to(self.offset + size, 0)

    def read_cstr(self, offset: int | None = None) -> StringSlice:
        """Read a Null terminated string.

        Args:
            offset: The absolute offset to read the string from.

        Returns:
            The string, without its terminator.
        """
        if offset is not None:
            self.offset = offset
        if self.at_end():
            return self._slice_to(self.offset, 0)
        length: Final[int] = cstr_length(self._buffer, self.offset)
        return self._slice_to(self.offset + length, 1)

    def read_until(self, separator: Char, offset: int | None = None) -> StringSlice:
        """Read up to the next separator, consuming it.

        Args:
            separator: The byte ending the token.
            offset: The absolute offset to read from.

        Returns:
            The token, without the separator. The rest of the data when no separator is found.
        """
        if offset is not None:
            self.offset = offset
        position: Final[int | None] = self.walk(separator)
        if position is None:
            return self._slice_to(len(self._buffer), 0)
        return self._slice_to(self.offset + position, 1)

    def read_line(self, offset: int | None = None) -> StringSlice:
        """Read a line, consuming its terminator.

        A trailing carriage return is dropped from the line.

        Args:
            offset: The absolute offset to read from.

        Returns:
            The line.
        """
        line: Final[StringSlice] = self.read_until(b"\n", offset=offset)
        if line.end_with(ord("\r")):
            return line.substr(0, line.size() - 1)
        return line

    def split(self, separator: Char, offset: int | None = None) -> Generator[StringSlice, None, None]:
        """Walk the remaining data, yielding every separated token.

        Adjacent separators yield empty tokens. A trailing separator does not produce a final
        empty token.

        Args:
            separator: The byte separating the tokens.
            offset: The absolute offset to start splitting from.

        Yields:
            The tokens.
        """
        if offset is not None:
            self.offset = offset
        while not self.at_end():
            yield self.read_until(separator)

    def lines(self, offset: int | None = None) -> Generator[StringSlice, None, None]:
        """Walk the remaining data line by line.

        Args:
            offset: The absolute offset to start from.

        Yields:
            The lines, without their terminators.
        """
        if offset is not None:
            self.offset = offset
        while not self.at_end():
            yield self.read_line()

    def walk(self, value: Char, offset: int | None = None, walk_size: int | None = None) -> int | None:
        """Search the data for the specified byte, without moving the cursor.

        Args:
            value: The byte to look for.
            offset: The absolute offset to start walking from.
            walk_size: The max amount of data to walk.

        Returns:
            The position of the found byte relative to the cursor (if any).
        """
        if offset is not None:
            self.offset = offset
        size: Final[int] = self.remaining if walk_size is None else min(max(walk_size, 0), self.remaining)
        position: Final[int] = StringSlice.from_range(self._buffer, min(self.offset, len(self._buffer)), size).find(
            as_char(value)
        )
        if position < 0:
            logger.debug(f"{value!r} not found within {size} bytes of {self.offset:#0x}")
            return None
        return position
