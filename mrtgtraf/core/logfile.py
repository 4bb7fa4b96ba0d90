"""MRTG log file reading.

An MRTG log starts with a header line holding the running byte counters,
followed by one line per sample, newest first:

    <timestamp> <avg_in> <avg_out> <max_in> <max_out>

Only the first sample line (line 2 of the file) is consulted.
"""

import re
from dataclasses import dataclass
from itertools import islice
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from mrtgtraf.core.context import Context


FIELD_NAMES = ("timestamp", "average_in", "average_out", "maximum_in", "maximum_out")

UNSIGNED_PATTERN = re.compile(r"^[0-9]+$")


class LogReadError(Exception):
    """Error reading the MRTG log."""

    pass


class LogFileError(LogReadError):
    """The log file could not be opened."""

    pass


class LogParseError(LogReadError):
    """The log file content is too short or malformed."""

    pass


@dataclass(frozen=True)
class LogRecord:
    """The newest sample recorded in an MRTG log."""

    timestamp: int
    average_in: int
    average_out: int
    maximum_in: int
    maximum_out: int


def parse_record(line: str) -> LogRecord:
    """
    Parse a sample line into a LogRecord.

    Args:
        line: Raw sample line

    Returns:
        LogRecord built from the first five fields

    Raises:
        LogParseError: If fewer than five fields are present or any of
            them is not an unsigned integer
    """
    fields = line.split()[: len(FIELD_NAMES)]
    if len(fields) < len(FIELD_NAMES):
        raise LogParseError(
            f"Expected {len(FIELD_NAMES)} fields, found {len(fields)}"
        )

    values = {}
    for name, field in zip(FIELD_NAMES, fields):
        if not UNSIGNED_PATTERN.match(field):
            raise LogParseError(f"Field '{name}' is not an unsigned integer: {field!r}")
        values[name] = int(field)

    return LogRecord(**values)


def first_sample(lines: Iterable[str]) -> LogRecord:
    """Skip the header and parse the line after it; later lines are never read."""
    head = list(islice(lines, 2))
    if len(head) < 2:
        raise LogParseError(f"Expected at least 2 lines, found {len(head)}")
    return parse_record(head[1])


def read_log_record(path: str, context: "Context | None" = None) -> LogRecord:
    """
    Read the newest sample from an MRTG log file.

    Args:
        path: Path to the log file
        context: Execution context (for testing)

    Returns:
        LogRecord for the second line of the file

    Raises:
        LogFileError: If the file cannot be opened or read
        LogParseError: If the file is too short or the sample is malformed
    """
    if context is None:
        from mrtgtraf.core.context import Context
        context = Context()

    try:
        f = context.open_file(path)
    except OSError as e:
        raise LogFileError(f"Unable to open {path}: {e}") from e

    with f:
        try:
            return first_sample(f)
        except OSError as e:
            raise LogFileError(f"Unable to read {path}: {e}") from e
