"""Alacritty module: theme selection and contrast color calculation."""

from .colors import Color, calc_contrast_color, calc_luminance, extract_color, format_hex
from .config_patcher import apply_theme, patch_import_line
from .errors import ParseError, SelectionError, ThemeError
from .selector import select_theme
from .themes import Theme, get_themes

__all__ = [
    "Color",
    "Theme",
    "ThemeError",
    "ParseError",
    "SelectionError",
    "apply_theme",
    "calc_contrast_color",
    "calc_luminance",
    "extract_color",
    "format_hex",
    "get_themes",
    "patch_import_line",
    "select_theme",
]
