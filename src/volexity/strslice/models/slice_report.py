"""Slice report of a tokenized file."""

import json
from hashlib import md5, sha1, sha256
from pathlib import Path
from typing import Any, Final, override

from ..string_slice import StringSlice


class SliceEntry:
    """A single token of the report."""

    def __init__(self, offset: int, token: StringSlice, find: int | None = None) -> None:
        """Initialize a new SliceEntry.

        Args:
            offset: Offset of the token within the source data.
            token: The token itself.
            find: Byte searched for in the token (if any).
        """
        self._offset: Final[int] = offset
        self._token: Final[StringSlice] = token
        self._find: Final[int | None] = token.find(find) if find is not None else None

    @property
    def offset(self) -> int:
        """Returns the offset of the token within the source data.

        Returns:
            Offset of the token.
        """
        return self._offset

    @property
    def token(self) -> StringSlice:
        """Returns the token.

        Returns:
            The token's StringSlice.
        """
        return self._token

    def to_dict(self) -> dict:
        """Returns the dictionary representation of the SliceEntry.

        Returns:
            The dictionary representation of the SliceEntry.
        """
        entry: dict[str, Any] = {
            "Offset": self._offset,
            "Size": self._token.size(),
            "Hash": f"{self._token.hash():#010x}",
            "Text": str(self._token),
        }
        if self._find is not None:
            entry["Find"] = self._find
        return entry


class SliceReportEncoder(json.JSONEncoder):
    """SliceReport JSON encoder."""

    @override
    def default(self, o: Any) -> Any:
        """Add support for serializing SliceEntry classes."""
        if isinstance(o, SliceEntry):
            return o.to_dict()
        return super().default(o)


class SliceReport:
    """Slice report of a tokenized file."""

    def __init__(self, source_path: Path, source_data: bytes, entries: list[SliceEntry]) -> None:
        """Initialize a new SliceReport.

        Args:
            source_path: Path to the file related to the report.
            source_data: Content of the file.
            entries: Tokens of the file.
        """
        self._source_name: Final[str] = source_path.name
        self._source_size: Final[int] = len(source_data)
        self._entries: Final[list[SliceEntry]] = entries
        self._hash: Final[dict[str, str]] = {
            "SHA256": sha256(source_data).hexdigest(),
            "SHA1": sha1(source_data).hexdigest(),  # noqa: S324
            "MD5": md5(source_data).hexdigest(),  # noqa: S324
        }

    @property
    def entries(self) -> list[SliceEntry]:
        """Returns the tokens of the report.

        Returns:
            The SliceEntries of the report.
        """
        return self._entries.copy()

    def to_dict(self) -> dict:
        """Returns the dictionary representation of the SliceReport.

        Returns:
            The dictionary representation of the SliceReport.
        """
        return {
            "Source": {"Name": self._source_name, "Size": self._source_size, "Hash": self._hash},
            "Tokens": self._entries,
        }

    def to_json(self, pretty: bool = False) -> str:
        """Returns the JSON representation of the SliceReport.

        Args:
            pretty: Wheter to prettify the output or not.

        Returns:
            JSON text data.
        """
        return json.dumps(self.to_dict(), cls=SliceReportEncoder, indent=4 if pretty else None)
