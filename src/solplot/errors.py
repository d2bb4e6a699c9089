"""Error types raised while loading status logs and rendering charts."""

from pathlib import Path


class SolplotError(Exception):
    """Base class for every error reported by solplot."""


class ParseError(SolplotError):
    """A record of the status log could not be converted.

    Attributes:
        column: Field position within the line (0 payload, 1 status).
        line_number: 1-based line of the failing record, once known.
    """

    def __init__(self, column: int, line_number: int | None = None) -> None:
        self.column = column
        self.line_number = line_number
        super().__init__(self.describe())

    def describe(self) -> str:
        """Describe the failure without positional context."""
        return f"Malformed record on column {self.column}"

    def at_line(self, line_number: int) -> "ParseError":
        """Attach the line number of the failing record and return self."""
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        message = self.describe()
        if self.line_number is None:
            return f"Parse Error: {message}"
        return f"Parse Error on line {self.line_number}: {message}"


class MissingTokenError(ParseError):
    """Fewer fields than expected on a line."""

    def describe(self) -> str:
        return f"Missing Value on column {self.column}"


class FloatParseError(ParseError):
    """Payload field is not a floating-point number."""

    def __init__(self, text: str, column: int = 0, line_number: int | None = None) -> None:
        self.text = text
        super().__init__(column, line_number)

    def describe(self) -> str:
        return f"invalid float literal {self.text!r} on column {self.column}"


class IntParseError(ParseError):
    """Status field is neither empty nor a non-negative integer."""

    def __init__(self, text: str, column: int = 1, line_number: int | None = None) -> None:
        self.text = text
        super().__init__(column, line_number)

    def describe(self) -> str:
        return f"invalid digit in {self.text!r} on column {self.column}"


class UnknownStatusError(ParseError):
    """Status field holds a code outside the known set."""

    def __init__(self, code: int, line_number: int | None = None) -> None:
        self.code = code
        super().__init__(1, line_number)

    def describe(self) -> str:
        return f"Read Unknown Status Value: {self.code}\nExpect: ``, `0`, `1`, `2`"


class InputOutputError(SolplotError):
    """Reading the log or writing the image failed."""

    def __init__(
        self, cause: OSError | UnicodeDecodeError, path: Path | str | None = None
    ) -> None:
        self.cause = cause
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path is None or (isinstance(self.cause, OSError) and self.cause.filename):
            return f"IO Error: {self.cause}"
        return f"IO Error: {self.path}: {self.cause}"


class FormatError(SolplotError):
    """The output path does not name a supported image format."""


class MissingFormatError(FormatError):
    """Output path has no extension."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Given file:`{path}`\ndoes not have an extension\ncannot understand output format"
        )


class UnknownExtensionError(FormatError):
    """Output path has an extension no backend handles."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"Given extension: `{extension}` is unknown\ncannot understand output format"
        )


class RenderError(SolplotError):
    """The charting library failed to draw the chart."""

    def __str__(self) -> str:
        return f"Plot Error: {self.args[0] if self.args else ''}"


class ConfigError(SolplotError):
    """The render configuration file is malformed."""
