"""Input source selection: a named log file or standard input."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .errors import InputOutputError

STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class InputSource:
    """Where the status log is read from.

    A ``path`` of None stands for standard input.
    """

    path: Path | None = None

    @classmethod
    def from_arg(cls, value: str | Path | None) -> "InputSource":
        """Build a source from an optional command line argument ("-" is stdin)."""
        if value is None or str(value) == "-":
            return cls()
        return cls(Path(value))

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    def describe(self) -> str:
        """Human-readable name used in warnings and errors."""
        return STDIN_NAME if self.path is None else str(self.path)

    def read_text(self, stdin: BinaryIO | None = None) -> str:
        """Read the whole source into memory and decode it as UTF-8.

        Args:
            stdin: Binary stream used for standard input (defaults to
                sys.stdin.buffer), so the locale encoding is never applied.

        Raises:
            InputOutputError: If the file cannot be opened, read or decoded.
        """
        try:
            if self.path is None:
                data = (stdin if stdin is not None else sys.stdin.buffer).read()
            else:
                with open(self.path, "rb") as f:
                    data = f.read()
            return data.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputOutputError(e, self.describe()) from e
