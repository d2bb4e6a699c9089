"""Status log parsing."""

from .errors import ParseError
from .source import InputSource
from .status import StatusValue, parse_record


def parse_log(text: str) -> list[StatusValue]:
    """Parse a whole status log, one record per line.

    Records keep their line order, which later becomes the x index of the
    chart. The first bad line aborts the parse.

    Args:
        text: Log contents. Empty text yields an empty list.

    Returns:
        Parsed records in input order.

    Raises:
        ParseError: For the first line that fails to parse, with its
            ``line_number`` set.
    """
    records = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            records.append(parse_record(line))
        except ParseError as e:
            e.at_line(line_number)
            raise
    return records


def load_status_file(source: InputSource) -> list[StatusValue]:
    """Read and parse a status log from a file or standard input.

    Raises:
        InputOutputError: If the source cannot be read.
        ParseError: If any record is malformed.
    """
    return parse_log(source.read_text())
