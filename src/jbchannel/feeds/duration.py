"""Parsing of free-form episode durations.

Feeds publish ``itunes:duration`` as either ``MM:SS`` or ``HH:MM:SS``.
Runtimes are handed to the host in ticks (10,000,000 per second).
"""

from datetime import timedelta

TICKS_PER_SECOND = 10_000_000


def _parse_segment(segment: str) -> int:
    """Best-effort integer parse; anything unparsable counts as zero."""
    try:
        return int(segment)
    except ValueError:
        return 0


def parse_duration(duration: str) -> timedelta | None:
    """Parse a ``MM:SS`` or ``HH:MM:SS`` duration.

    Each segment is parsed independently, so ``"abc:02:03"`` yields two
    minutes and three seconds.

    Args:
        duration: Raw duration string from the feed

    Returns:
        Elapsed time, or None when the string does not have two or three
        colon-separated segments

    Example:
        >>> parse_duration("1:02:03")
        datetime.timedelta(seconds=3723)
        >>> parse_duration("2:03")
        datetime.timedelta(seconds=123)
    """
    segments = duration.split(":")

    if len(segments) == 3:
        hours, minutes, seconds = (_parse_segment(s) for s in segments)
    elif len(segments) == 2:
        hours = 0
        minutes, seconds = (_parse_segment(s) for s in segments)
    else:
        return None

    return timedelta(seconds=hours * 3600 + minutes * 60 + seconds)


def to_ticks(value: timedelta) -> int:
    """Convert a timedelta to ticks."""
    return (value.days * 86400 + value.seconds) * TICKS_PER_SECOND + value.microseconds * 10


def from_ticks(ticks: int) -> timedelta:
    """Convert ticks back to a timedelta."""
    return timedelta(microseconds=ticks // 10)


def parse_duration_ticks(duration: str) -> int | None:
    """Parse a duration straight to ticks, or None when unparseable."""
    parsed = parse_duration(duration)
    if parsed is None:
        return None
    return to_ticks(parsed)
