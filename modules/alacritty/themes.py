"""Theme discovery."""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("alacritty-theme")


@dataclass(frozen=True)
class Theme:
    name: str
    path: Path


def get_themes(theme_dir: Path) -> list[Theme]:
    """List the theme files in ``theme_dir``, sorted by name.

    Entries that cannot be stat'ed are logged and skipped. If the directory
    itself cannot be opened the error is logged and an empty list returned.
    """
    themes = []
    try:
        with os.scandir(theme_dir) as entries:
            for entry in entries:
                try:
                    mode = entry.stat().st_mode
                except OSError as e:
                    logger.warning("Skipping unreadable theme entry %s: %s", entry.path, e)
                    continue

                if not stat.S_ISREG(mode):
                    logger.debug("Skipping non-file entry %s", entry.path)
                    continue

                themes.append(Theme(name=entry.name, path=Path(entry.path)))
    except OSError as e:
        logger.error("Could not read themes directory %s: %s", theme_dir, e)
        return []

    themes.sort(key=lambda theme: theme.name)
    logger.debug("Found %d themes in %s", len(themes), theme_dir)
    return themes


def find_theme(themes: list[Theme], name: str) -> Theme | None:
    """Return the theme whose file name is ``name``, if any."""
    for theme in themes:
        if theme.name == name:
            return theme
    return None
