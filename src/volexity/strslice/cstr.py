"""Allow the scanning and rendering of C-like Null terminated strings."""

from typing import Final

CSTR_BUFFER_SIZE: Final[int] = 256
CSTR_MAX_COPY: Final[int] = 250
CSTR_ELLIPSIS: Final[bytes] = b"..."


def cstr_length(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Count the bytes preceding the first Null byte.

    Args:
        data: The data to scan.
        offset: The offset in the data to start scanning from.

    Returns:
        The length of the string, up to the end of the data when no terminator is found.
    """
    length: int = 0
    for c in memoryview(data)[offset:]:
        if c == 0:
            break
        length += 1
    return length


def render_cstr(data: bytes | bytearray | memoryview | None) -> bytes:
    """Render a byte view the way a bounded C string buffer would hold it.

    At most 250 bytes are copied. Longer views are cut and the "..." marker is appended.

    Args:
        data: The bytes to render (if any).

    Returns:
        The rendered bytes, without the Null terminator.
    """
    if data is None:
        return b""
    view: Final[memoryview] = memoryview(data)
    if len(view) <= CSTR_MAX_COPY:
        return bytes(view)
    return bytes(view[:CSTR_MAX_COPY]) + CSTR_ELLIPSIS


class CStrBuffer:
    """Fixed size, Null terminated rendering buffer."""

    def __init__(self) -> None:
        """Initialize a new, empty CStrBuffer."""
        self._buffer: Final[bytearray] = bytearray(CSTR_BUFFER_SIZE)

    def render(self, data: bytes | bytearray | memoryview | None) -> memoryview:
        """Render data into the buffer, overwriting the previous rendering.

        Args:
            data: The bytes to render (if any).

        Returns:
            A read-only view of the whole buffer.
        """
        rendered: Final[bytes] = render_cstr(data)
        self._buffer[: len(rendered)] = rendered
        self._buffer[len(rendered)] = 0
        return memoryview(self._buffer).toreadonly()

    @property
    def raw(self) -> bytes:
        """Returns a copy of the whole buffer.

        Returns:
            The CSTR_BUFFER_SIZE bytes of the buffer.
        """
        return bytes(self._buffer)

    def __bytes__(self) -> bytes:
        """Returns the current rendering up to its terminator.

        Returns:
            The rendered bytes.
        """
        return bytes(self._buffer[: self._buffer.index(0)])

    def __str__(self) -> str:
        """String representation."""
        return bytes(self).decode("latin-1")

    def __repr__(self) -> str:
        """CStrBuffer representation."""
        return f'"{self}"'
