"""Numbered theme menu and index selection."""

import re
import sys
from typing import TextIO

from .errors import SelectionError
from .themes import Theme

COLUMN_WIDTH = 40
COLUMNS = 5
PROMPT = "Please choose a theme > "

_INDEX = re.compile(r"\+?[0-9]+")


def format_menu(themes: list[Theme]) -> str:
    """Render themes as ``idx: name`` cells, COLUMNS per row.

    Each cell is padded so the name plus the index digits fill COLUMN_WIDTH.
    """
    out = []
    for idx, theme in enumerate(themes):
        width = COLUMN_WIDTH - len(str(idx))
        out.append(f"{idx}: {theme.name:<{width}}")
        if (idx + 1) % COLUMNS == 0:
            out.append("\n")
    return "".join(out)


def parse_selection(raw: str, count: int) -> int:
    """Parse a menu answer into an index in ``range(count)``."""
    answer = raw.strip()
    if not _INDEX.fullmatch(answer):
        raise SelectionError(f"Invalid theme index: {answer!r}")

    idx = int(answer)
    if idx >= count:
        raise SelectionError(f"Theme index {idx} out of range (0-{count - 1})")
    return idx


def select_theme(themes: list[Theme], stdin: TextIO | None = None, stdout: TextIO | None = None) -> Theme:
    """Print the menu, read one line and return the chosen theme.

    Raises:
        SelectionError: On an empty theme list, end of input, or an answer
            that is not an index of ``themes``
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if not themes:
        raise SelectionError("No themes to choose from")

    stdout.write(format_menu(themes))
    stdout.write("\n")
    stdout.write(PROMPT)
    stdout.flush()

    raw = stdin.readline()
    if not raw:
        raise SelectionError("No theme selected (end of input)")

    return themes[parse_selection(raw, len(themes))]
