"""Rich Console factory and theme for dnsblock output.

Consoles render into a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DNSBLOCK_THEME = Theme(
    {
        "dnsblock.ok": "bold green",
        "dnsblock.error": "bold red",
        "dnsblock.op": "bold cyan",
        "dnsblock.key": "dim",
        "dnsblock.count": "magenta",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DNSBLOCK_THEME,
        highlight=False,
        width=100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
