"""CLI Arguments data model."""

# Builtins.
import sys

# Installables.
from argparse import ArgumentParser, Namespace

# Builtins.
from pathlib import Path
from typing import Final

from ..string_slice import as_char


class CLIArguments:
    """CLI Arguments data model."""

    def __init__(self, argv: list[str]) -> None:
        """Initialize a new instance of the CLI Arguments data model.

        Args:
            argv: Raw CLI arguments.
        """
        parser: Final[ArgumentParser] = ArgumentParser(prog=Path(argv[0]).name)

        parser.add_argument("input_path", help="Path to the file to split into slices.")
        parser.add_argument("-s", "--separator", default="\n", help="Byte separating the tokens (default: newline).")
        parser.add_argument("-w", "--trim-whitespace", action="store_true", help="Trim whitespace around each token.")
        parser.add_argument("-c", "--trim-char", metavar="CHAR", help="Trim this byte around each token.")
        parser.add_argument("-k", "--skip-empty", action="store_true", help="Leave empty tokens out of the report.")
        parser.add_argument("-f", "--find", metavar="CHAR", help="Report the offset of this byte in each token.")
        parser.add_argument("-o", "--output", help="Path of the output JSON report.")
        parser.add_argument("-q", "--quiet", action="store_true", help="Reduce the amount of logs.")

        if len(argv) <= 1:
            parser.print_usage()
            sys.exit()

        parsed_args: Final[Namespace] = parser.parse_args(argv[1:])

        try:
            self._separator: Final[int] = as_char(parsed_args.separator)
            self._trim_char: Final[int | None] = (
                as_char(parsed_args.trim_char) if parsed_args.trim_char is not None else None
            )
            self._find: Final[int | None] = as_char(parsed_args.find) if parsed_args.find is not None else None
        except ValueError as e:
            parser.error(str(e))

        self._input_path: Final[Path] = Path(parsed_args.input_path).resolve()
        self._trim_whitespace: Final[bool] = parsed_args.trim_whitespace
        self._skip_empty: Final[bool] = parsed_args.skip_empty
        self._output: Final[Path | None] = Path(parsed_args.output).resolve() if parsed_args.output else None
        self._quiet: Final[bool] = parsed_args.quiet

    @property
    def input_path(self) -> Path:
        """Returns the path to the file to split.

        Returns:
            Path to the file to split.
        """
        return self._input_path

    @property
    def separator(self) -> int:
        """Returns the byte separating the tokens.

        Returns:
            The separator byte.
        """
        return self._separator

    @property
    def trim_whitespace(self) -> bool:
        """Returns whether to trim whitespace around each token.

        Returns:
            Whether to trim whitespace around each token.
        """
        return self._trim_whitespace

    @property
    def trim_char(self) -> int | None:
        """Returns the byte to trim around each token (if any).

        Returns:
            The byte to trim (if any).
        """
        return self._trim_char

    @property
    def skip_empty(self) -> bool:
        """Returns whether empty tokens are left out.

        Returns:
            Whether empty tokens are left out.
        """
        return self._skip_empty

    @property
    def find(self) -> int | None:
        """Returns the byte to look for in each token (if any).

        Returns:
            The byte to look for (if any).
        """
        return self._find

    @property
    def output(self) -> Path | None:
        """Returns the path of the output JSON report.

        Returns:
            The path of the output JSON report.
        """
        return self._output

    @property
    def quiet(self) -> bool:
        """Returns whether to reduce logging.

        Returns:
            Whether to reduce logging.
        """
        return self._quiet
