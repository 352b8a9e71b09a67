#!/usr/bin/env python3
"""Background color extraction and contrast color calculation."""

import logging
import math
import re
from pathlib import Path
from typing import Iterable, NamedTuple

from .config_patcher import read_lines
from .errors import ParseError

logger = logging.getLogger("alacritty-theme")

COMMENT_MARKER = "#"
BACKGROUND_TOKEN = "background"

# Alacritty renders the background at 80% opacity over a dark surface.
# TODO: read window.opacity from alacritty.toml instead of assuming 0.8
ALPHA_COMPENSATION = 0.8

# Same threshold as tinycolor's isLight()
LUMINANCE_THRESHOLD = 128.0
LIGHT_TARGET = 64.0
DARK_TARGET = 128.0

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")

# (name, start offset) of each channel inside a literal like '#rrggbb'.
# The first two characters are the quote and hash.
_CHANNEL_OFFSETS = (("red", 2), ("green", 4), ("blue", 6))


class Color(NamedTuple):
    red: int
    green: int
    blue: int


def format_hex(color: Color) -> str:
    """Render a color as ``#RRGGBB``."""
    return "#{:02X}{:02X}{:02X}".format(*color)


def find_color_literal(lines: Iterable[str]) -> str:
    """Return the right-hand side of the first background assignment.

    Comment lines are skipped. Raises ParseError when no line assigns the
    background.
    """
    for line in lines:
        if line.lstrip().startswith(COMMENT_MARKER):
            continue
        if BACKGROUND_TOKEN in line:
            parts = [part.strip() for part in line.split("=")]
            if len(parts) < 2:
                raise ParseError()
            logger.debug("Background line: %s", line.strip())
            return parts[1]

    raise ParseError()


def parse_color_literal(literal: str) -> Color:
    """Parse the three hex channels at their fixed offsets in ``literal``."""
    values = []
    bad = []
    for name, start in _CHANNEL_OFFSETS:
        pair = literal[start:start + 2]
        if _HEX_PAIR.fullmatch(pair):
            values.append(int(pair, 16))
        else:
            bad.append(name)

    if bad:
        raise ParseError(channels=tuple(bad))

    return Color(*values)


def extract_color(lines: Iterable[str]) -> Color:
    """Extract the background color from the lines of a theme file."""
    return parse_color_literal(find_color_literal(lines))


def read_theme_color(path: Path) -> Color:
    """Read a theme file and extract its background color.

    Raises:
        OSError: If the theme file cannot be read
        ParseError: If no valid background color is found
    """
    return extract_color(read_lines(path))


def calc_luminance(color: Color) -> float:
    red, green, blue = color
    return ALPHA_COMPENSATION * (0.299 * red + 0.587 * green + 0.114 * blue)


def _clamp_channel(value: float) -> int:
    # round half away from zero; channels are never negative
    return max(0, min(255, math.floor(value + 0.5)))


def calc_contrast_color(color: Color) -> Color:
    """Derive a foreground color that stays legible on ``color``.

    Light backgrounds are scaled down toward LIGHT_TARGET, dark ones scaled
    up toward DARK_TARGET. A black background cannot be scaled, so it gets the
    gray that reaches DARK_TARGET.
    """
    luminance = calc_luminance(color)

    if luminance <= 0.0:
        gray = _clamp_channel(DARK_TARGET / ALPHA_COMPENSATION)
        return Color(gray, gray, gray)

    target = LIGHT_TARGET if luminance >= LUMINANCE_THRESHOLD else DARK_TARGET
    scale = target / luminance

    return Color(*(_clamp_channel(channel * scale) for channel in color))
