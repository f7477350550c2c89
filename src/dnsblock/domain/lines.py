"""Line rules shared by the blocklist loader and the stdin querier.

Only ``\n`` terminates a line; ``\r`` and surrounding whitespace are part
of the name. The load phase skips blank and ``#`` lines, the query phase
does not.
"""

from __future__ import annotations

COMMENT_PREFIX = "#"


def decode_line(raw: bytes) -> str:
    """Decode a raw line without losing undecodable bytes."""
    return raw.decode("utf-8", "surrogateescape")


def strip_terminator(line: str) -> str:
    """Remove exactly one trailing newline, if present."""
    if line.endswith("\n"):
        return line[:-1]
    return line


def is_loadable(line: str) -> bool:
    """Whether a stripped blocklist line names an entry."""
    return bool(line) and not line.startswith(COMMENT_PREFIX)


def display_name(name: str) -> str:
    """Name safe for text output, undecodable bytes shown as U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
