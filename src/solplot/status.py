"""Solver run status records and the single-record CSV parser.

Each line of a status log holds a size/ratio payload and an optional status
code::

    0.76,0      linear solution
    0.56,1      integer solution
    0.12,       no status recorded (infeasible)
    0.56,2      timeout
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import FloatParseError, IntParseError, MissingTokenError, UnknownStatusError

PAYLOAD_COLUMN = 0
STATUS_COLUMN = 1

# Unsigned integer literal accepted for the status column
_STATUS_CODE_RE = re.compile(r"\+?[0-9]+")
# Decimal float literal for the payload column, ASCII digits only
_PAYLOAD_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class Status(Enum):
    """Outcome of a solver run, keyed by its status code."""

    INFEASIBLE = None
    LINEAR = 0
    INTEGER = 1
    TIMEOUT = 2

    @property
    def code(self) -> int | None:
        """Status code as written in the log (None for an empty field)."""
        return self.value

    @classmethod
    def from_code(cls, code: int | None) -> "Status":
        """Map a parsed status code to its status.

        Raises:
            UnknownStatusError: If the code is not one of 0, 1, 2.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnknownStatusError(code) from None


@dataclass(frozen=True)
class StatusValue:
    """One record of a status log: a payload tagged with its run status."""

    status: Status
    value: float

    def to_record(self) -> str:
        """Serialize back to a ``value,code`` log line."""
        code = self.status.code
        return f"{self.value!r},{'' if code is None else code}"


def parse_record(line: str) -> StatusValue:
    """Parse a single ``<float>,<optional-int>`` log line.

    Args:
        line: Raw line, surrounding whitespace on each field is ignored.

    Returns:
        The parsed StatusValue.

    Raises:
        MissingTokenError: If the line has fewer than two fields.
        FloatParseError: If the payload is not a number.
        IntParseError: If the status is neither empty nor an unsigned integer.
        UnknownStatusError: If the status code is not 0, 1 or 2.
    """
    tokens = line.split(",")
    value = _convert_float_token(_get_token(tokens, PAYLOAD_COLUMN), PAYLOAD_COLUMN)
    code = _convert_code_token(_get_token(tokens, STATUS_COLUMN), STATUS_COLUMN)
    return StatusValue(Status.from_code(code), value)


def _get_token(tokens: list[str], column: int) -> str:
    if column >= len(tokens):
        raise MissingTokenError(column)
    return tokens[column].strip()


def _convert_float_token(token: str, column: int) -> float:
    if not _PAYLOAD_RE.fullmatch(token):
        raise FloatParseError(token, column)
    return float(token)


def _convert_code_token(token: str, column: int) -> int | None:
    if not token:
        return None
    if not _STATUS_CODE_RE.fullmatch(token):
        raise IntParseError(token, column)
    return int(token)
