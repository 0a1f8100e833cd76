# src/snapprune/core/sources.py
"""Entry sources: turn date-stamped lines or names into timestamped entries.

Two sources are supported:
- read_lines(): one date stamp per line of a text stream (usually stdin)
- read_directory(): one entry per name in a directory listing

Entries whose text does not match the date format are logged as warnings
and excluded; they never abort collection. The payload of each entry is the
original text, so the CLI can print dropped entries back verbatim.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from snapprune.contracts.errors import EntryParseError, SourceError
from snapprune.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CollectedEntries:
    """Result of reading an entry source.

    Attributes:
        entries: Epoch-second timestamp -> original text
        rejected: Texts that could not be parsed, in input order
    """

    entries: dict[int, str] = field(default_factory=dict)
    rejected: list[str] = field(default_factory=list)


def parse_timestamp(text: str, date_format: str) -> int:
    """Parse a date stamp into integer seconds since the epoch.

    Naive date stamps (no %z directive) are interpreted as UTC.

    Args:
        text: Date stamp, e.g. "20200131-20:30"
        date_format: strptime format, e.g. "%Y%m%d-%H:%M"

    Returns:
        Non-negative integer timestamp

    Raises:
        EntryParseError: If text does not match or lies before the epoch
    """
    try:
        parsed = datetime.strptime(text, date_format)
    except ValueError as e:
        raise EntryParseError(text, date_format, str(e)) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    timestamp = int(parsed.timestamp())
    if timestamp < 0:
        raise EntryParseError(text, date_format, "date is before 1970-01-01T00:00:00Z")
    return timestamp


def _collect(texts: Iterable[str], date_format: str, *, source: str) -> CollectedEntries:
    collected = CollectedEntries()
    for text in texts:
        try:
            timestamp = parse_timestamp(text, date_format)
        except EntryParseError as e:
            logger.warning("Could not parse entry", entry=text, date_format=date_format, source=source, error=str(e))
            collected.rejected.append(text)
            continue

        previous = collected.entries.get(timestamp)
        if previous is not None:
            logger.debug("Duplicate timestamp, later entry replaces earlier", timestamp=timestamp, replaced=previous, entry=text)
        collected.entries[timestamp] = text

    logger.debug("Collected entries", source=source, parsed=len(collected.entries), rejected=len(collected.rejected))
    return collected


def _non_blank_lines(lines: Iterable[str]) -> Iterator[str]:
    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip()
        if text:
            yield text
        else:
            logger.debug("Skipping blank line", line_number=line_number)


def read_lines(lines: Iterable[str], date_format: str) -> CollectedEntries:
    """Collect entries from line-oriented text, one date stamp per line.

    Trailing whitespace (including the newline) is stripped. Blank lines are
    skipped with a debug log line rather than reported as unparseable
    entries, so a trailing empty line never produces a warning.

    Args:
        lines: Any iterable of lines, e.g. sys.stdin or an open file
        date_format: strptime format of each line
    """
    return _collect(_non_blank_lines(lines), date_format, source="lines")


def read_directory(path: Path, date_format: str, *, include_hidden: bool = False) -> CollectedEntries:
    """Collect entries from the names in a directory listing.

    Files and subdirectories are both considered; snapshots are frequently
    directories themselves.

    Args:
        path: Directory to list (not recursed into)
        date_format: strptime format of each name
        include_hidden: Also consider names starting with '.'

    Raises:
        SourceError: If path does not exist or is not a directory
    """
    if not path.exists():
        raise SourceError(f"Directory not found: {path}")
    if not path.is_dir():
        raise SourceError(f"Not a directory: {path}")

    try:
        names = sorted(child.name for child in path.iterdir())
    except OSError as e:
        raise SourceError(f"Cannot list directory {path}: {e}") from e

    if not include_hidden:
        names = [name for name in names if not name.startswith(".")]
    return _collect(names, date_format, source=str(path))
