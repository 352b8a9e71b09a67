"""Rewrite the import line of alacritty.toml."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .themes import Theme

logger = logging.getLogger("alacritty-theme")

IMPORT_TOKEN = "import"


def format_import_line(import_base: str, theme_name: str) -> str:
    return f'import = ["{import_base}{theme_name}"]'


def patch_import_line(lines: list[str], theme_name: str, import_base: str) -> list[str]:
    """Return a copy of ``lines`` with the first import line pointing at ``theme_name``.

    If no line contains the import token the copy is unchanged.
    """
    patched = list(lines)
    for i, line in enumerate(patched):
        if IMPORT_TOKEN in line:
            patched[i] = format_import_line(import_base, theme_name)
            logger.debug("Replaced line %d: %s -> %s", i + 1, line, patched[i])
            break
    else:
        logger.warning("No import line found, config left unchanged")
    return patched


def read_lines(path: Path) -> list[str]:
    """Read ``path`` as lines split on LF only, dropping a trailing CR.

    Unlike str.splitlines this keeps form feeds and Unicode line separators
    inside the line they appear in.
    """
    with open(path, encoding="utf-8", newline="") as f:
        lines = f.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_lines(path: Path, lines: list[str]) -> None:
    """Atomically replace ``path`` with ``lines``, one newline after each.

    Writes to a temporary file next to the resolved ``path`` and renames it
    over the target, keeping its permissions. A symlinked config keeps its
    link; the file it points to is replaced.
    """
    path = path.resolve()
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


def apply_theme(theme: Theme, config_file: Path, import_base: str) -> None:
    """Point the import line of ``config_file`` at ``theme``.

    Raises:
        FileNotFoundError: If the config file doesn't exist
    """
    logger.info("Applying theme %s to %s", theme.name, config_file)
    lines = read_lines(config_file)
    write_lines(config_file, patch_import_line(lines, theme.name, import_base))
    logger.info("Alacritty theme updated successfully")
