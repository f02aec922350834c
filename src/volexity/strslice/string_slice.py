"""Non-owning view over a range of an existing byte buffer."""

from collections.abc import Callable, Iterator
from typing import Final

from .cstr import cstr_length, render_cstr
from .errors import EmptyViewError
from .hashing import string_hash

type Buffer = bytes | bytearray | memoryview | str
type Char = int | bytes | str

NOT_FOUND: Final[int] = -1
WHITESPACE: Final[frozenset[int]] = frozenset(b" \t\r\n")


def as_view(buffer: Buffer) -> memoryview:
    """Expose a caller supplied buffer as an unsigned byte view without copying it.

    Args:
        buffer: The buffer to view. Text is encoded as UTF-8 first.

    Returns:
        A flat, read-only view of the buffer.
    """
    if isinstance(buffer, str):
        buffer = buffer.encode()
    if not isinstance(buffer, bytes | bytearray | memoryview):
        message: Final[str] = f"Unsupported buffer type: {type(buffer).__name__}"
        raise TypeError(message)
    return memoryview(buffer).cast("B").toreadonly()


def as_char(c: Char) -> int:
    """Normalize a single character argument to its byte value.

    Args:
        c: An integer byte, or a one byte long bytes or str.

    Returns:
        The byte value.
    """
    if isinstance(c, int) and 0 <= c <= 0xFF:  # noqa: PLR2004
        return c
    if isinstance(c, bytes | bytearray) and len(c) == 1:
        return c[0]
    if isinstance(c, str) and len(c) == 1 and ord(c) <= 0xFF:  # noqa: PLR2004
        return ord(c)
    message: Final[str] = f"Expected a single byte, got {c!r}"
    raise ValueError(message)


class StringSlice:
    """Non-owning view over a range of an existing byte buffer.

    A slice never copies the bytes it refers to: narrowing operations only move the offset and
    size of the view. The hash is computed lazily and cached, 0 being the "not computed" sentinel.
    Computing it writes to the instance, so a slice shared between threads needs external locking.
    """

    def __init__(
        self, buffer: "Buffer | StringSlice | None" = None, offset: int = 0, size: int | None = None
    ) -> None:
        """Initialize a new StringSlice.

        Args:
            buffer: The buffer to view, another slice to copy, or None for an empty slice.
            offset: The offset of the view within the buffer.
            size: The size of the view. When omitted, the view stops at the first Null byte.
        """
        self._base: memoryview | None = None
        self._offset: int = 0
        self._size: int = 0
        self._hash: int = 0

        if isinstance(buffer, StringSlice):
            self._base = buffer._base
            self._offset = buffer._offset
            self._size = buffer._size
            self._hash = buffer._hash
        elif buffer is not None:
            self.reset(buffer, offset, size)

    @classmethod
    def empty(cls) -> "StringSlice":
        """Returns a slice without data.

        Returns:
            An empty StringSlice.
        """
        return cls()

    @classmethod
    def from_cstring(cls, buffer: Buffer | None, offset: int = 0) -> "StringSlice":
        """Create a slice over a Null terminated string.

        Args:
            buffer: The buffer holding the string (if any).
            offset: The offset of the string within the buffer.

        Returns:
            A slice ending before the first Null byte, or at the end of the buffer.
        """
        if buffer is None:
            return cls()
        return cls(buffer, offset)

    @classmethod
    def from_range(cls, buffer: Buffer, offset: int, size: int) -> "StringSlice":
        """Create a slice over an explicit range.

        Args:
            buffer: The buffer to view.
            offset: The offset of the range within the buffer.
            size: The size of the range.

        Returns:
            A slice over exactly the given range.
        """
        return cls(buffer, offset, size)

    def _derive(self, offset: int, size: int) -> "StringSlice":
        derived: Final[StringSlice] = StringSlice()
        derived._base = self._base
        derived._offset = self._offset + offset
        derived._size = size
        return derived

    def is_empty(self) -> bool:
        """Test whether the slice is empty or without data.

        Returns:
            Whether the slice has no byte to offer.
        """
        return self._size == 0 or self._base is None

    def size(self) -> int:
        """Returns the number of bytes in the view.

        Returns:
            The size of the view.
        """
        return self._size

    def offset(self) -> int:
        """Returns the position of the view within its backing buffer.

        Returns:
            The offset of the first viewed byte.
        """
        return self._offset

    def data(self) -> memoryview | None:
        """Returns the viewed bytes without copying them.

        Returns:
            A read-only memoryview of the range, or None when the slice has no data.
        """
        if self._base is None:
            return None
        return self._base[self._offset : self._offset + self._size]

    def tail(self) -> int:
        """Returns the last byte of the view.

        Returns:
            The value of the last byte.

        Raises:
            EmptyViewError: The slice is empty.
        """
        if self._base is None or self._size == 0:
            message: Final[str] = "tail() called on an empty StringSlice"
            raise EmptyViewError(message)
        return self._base[self._offset + self._size - 1]

    def hash(self) -> int:
        """Returns the 32-bit hash of the viewed bytes, computing it on first use.

        A slice whose hash is 0 recomputes it on every call.

        Returns:
            The hash of the slice.
        """
        if self._hash == 0 and self._base is not None:
            self._hash = string_hash(self._base[self._offset : self._offset + self._size])
        return self._hash

    def reset(self, buffer: Buffer | None, offset: int = 0, size: int | None = None) -> None:
        """Replace the view.

        Args:
            buffer: The new buffer to view (if any).
            offset: The offset of the view within the buffer.
            size: The size of the view. When omitted, the view stops at the first Null byte.
        """
        self._hash = 0
        if buffer is None:
            self._base = None
            self._offset = 0
            self._size = 0
            return

        base: Final[memoryview] = as_view(buffer)
        if size is None:
            size = cstr_length(base, offset) if 0 <= offset <= len(base) else 0
        if offset < 0 or size < 0 or offset + size > len(base):
            message: Final[str] = f"Range [{offset}, {offset + size}) lies outside a buffer of {len(base)} bytes"
            raise ValueError(message)

        self._base = base
        self._offset = offset
        self._size = size

    def trim(self, c: Char | None = None) -> None:
        """Strip a byte from both ends of the view, in place.

        Trailing bytes are stripped first, then leading ones. The view never shrinks below a single
        byte, so a slice made only of the stripped byte keeps one of them.

        Args:
            c: The byte to strip. Whitespace (space, tab, CR and LF) when omitted.
        """
        if self._base is None or self._size == 0:
            return

        matches: Callable[[int], bool]
        if c is None:
            matches = WHITESPACE.__contains__
        else:
            char: Final[int] = as_char(c)
            matches = char.__eq__

        view: Final[memoryview] = self._base[self._offset : self._offset + self._size]
        end: int = self._size
        while end > 1 and matches(view[end - 1]):
            end -= 1

        start: int = 0
        while end - start > 1 and matches(view[start]):
            start += 1

        self._offset += start
        self._size = end - start
        self._hash = 0

    def _coerce(self, other: "StringSlice | Buffer") -> "StringSlice":
        if isinstance(other, StringSlice):
            return other
        return StringSlice(other, 0, len(as_view(other)))

    def start_with(self, other: "StringSlice | Buffer | int") -> bool:
        """Test whether the view starts with a prefix.

        Args:
            other: The prefix, or a single byte value.

        Returns:
            Whether the prefix matches the beginning of the view.
        """
        if isinstance(other, int):
            return self._size > 0 and self._base is not None and self._base[self._offset] == as_char(other)

        prefix: Final[StringSlice] = self._coerce(other)
        if prefix._size > self._size:
            return False
        if prefix._size == 0:
            return True
        return self._base is not None and self._base[self._offset : self._offset + prefix._size] == prefix.data()

    def end_with(self, other: "StringSlice | Buffer | int") -> bool:
        """Test whether the view ends with a suffix.

        Args:
            other: The suffix, or a single byte value.

        Returns:
            Whether the suffix matches the end of the view.
        """
        if isinstance(other, int):
            return self._size > 0 and self.tail() == as_char(other)

        suffix: Final[StringSlice] = self._coerce(other)
        if suffix._size > self._size:
            return False
        if suffix._size == 0:
            return True
        end: Final[int] = self._offset + self._size
        return self._base is not None and self._base[end - suffix._size : end] == suffix.data()

    def find(self, c: Char) -> int:
        """Search the view for a byte.

        Args:
            c: The byte to look for.

        Returns:
            The offset of its first occurrence, or -1.
        """
        char: Final[int] = as_char(c)
        if self._base is None:
            return NOT_FOUND

        for index, value in enumerate(self._base[self._offset : self._offset + self._size]):
            if value == char:
                return index
        return NOT_FOUND

    def substr(self, start: int, size: int | None = None) -> "StringSlice":
        """Returns a sub-range of the view.

        With only a start, a negative value counts from the end of the view. With a size as well,
        both bounds are normalized independently:

            "hello".substr(1, 3)  => "ell"
            "hello".substr(-1, 3) => "llo"
            "hello".substr(1, -1) => "ello"

        A non-negative size counts bytes from the start. A negative start with a non-negative size
        selects the size bytes ending at (and including) that position. A negative size is an
        inclusive end position counted from the end. Inverted ranges are swapped and bounds are
        clamped to the view.

        Args:
            start: The start of the range.
            size: The size, or the negative end position, of the range.

        Returns:
            A slice over the same buffer.
        """
        if size is None:
            begin: Final[int] = start if start >= 0 else self._size + start
            if begin <= 0:
                return StringSlice(self)
            if begin < self._size:
                return self._derive(begin, self._size - begin)
            return StringSlice()

        s: int
        e: int
        if start >= 0:
            s = start
            e = s + size if size >= 0 else self._size + size + 1
        elif size >= 0:
            e = self._size + start + 1
            s = e - size
        else:
            s = self._size + start
            e = self._size + size + 1

        if s > e:
            s, e = e, s
        s = min(max(s, 0), self._size)
        e = min(max(e, 0), self._size)
        return self._derive(s, e - s)

    def c_str(self) -> bytes:
        """Render the view for display.

        At most 250 bytes are kept, longer views end with a "..." marker. The result is an
        independent copy.

        Returns:
            The rendered bytes.
        """
        return render_cstr(self.data())

    def __copy__(self) -> "StringSlice":
        """Copy the slice, sharing its view and cached hash.

        Returns:
            The copied StringSlice.
        """
        return StringSlice(self)

    def __len__(self) -> int:
        """Returns the size of the view.

        Returns:
            The size of the view.
        """
        return self._size

    def __bool__(self) -> bool:
        """Returns whether the slice is non empty."""
        return not self.is_empty()

    def __iter__(self) -> Iterator[int]:
        """Iterate over the viewed byte values."""
        view: Final[memoryview | None] = self.data()
        return iter(view if view is not None else ())

    def __bytes__(self) -> bytes:
        """Copy the viewed bytes.

        Returns:
            The bytes of the view.
        """
        view: Final[memoryview | None] = self.data()
        return view.tobytes() if view is not None else b""

    def __eq__(self, other: object) -> bool:
        """Compare the viewed bytes of two slices.

        Args:
            other: StringSlice to compare to.

        Returns:
            Whether both views hold the same bytes.
        """
        if not isinstance(other, StringSlice):
            return NotImplemented

        if self._size != other._size:
            return False
        if self._base is other._base and self._offset == other._offset:
            return True
        if self._base is None or other._base is None:
            return self._size == 0
        return self.data() == other.data()

    def __ne__(self, other: object) -> bool:
        """Tests the inequality between this and another StringSlice.

        Args:
            other: StringSlice to compare to.

        Returns:
            Whether the views differ.
        """
        if not isinstance(other, StringSlice):
            return NotImplemented

        return not self.__eq__(other)

    def __hash__(self) -> int:
        """Returns the hash of the StringSlice.

        Returns:
            The 32-bit hash of the viewed bytes.
        """
        return self.hash()

    def __str__(self) -> str:
        """String representation."""
        return self.c_str().decode("latin-1")

    def __repr__(self) -> str:
        """StringSlice representation."""
        return f"StringSlice({self.c_str()!r})"
