#!/usr/bin/env python3
"""Alacritty theme module main entry point - pick a theme and apply it."""

import logging
import sys
from pathlib import Path

from helpers import ScriptConfig, create_module_parser, debug_requested, get_module_directory
from .colors import calc_contrast_color, format_hex, read_theme_color
from .config_patcher import apply_theme
from .errors import ThemeError
from .selector import format_menu, select_theme
from .settings import ThemeSettings
from .themes import Theme, find_theme, get_themes

logger = logging.getLogger("alacritty-theme")


def create_parser():
    return create_module_parser(
        "alacritty-theme",
        "Choose an Alacritty theme and derive a contrasting text color",
        {
            "select": {
                "help": "Pick a theme from a numbered menu and apply it",
            },
            "list": {
                "help": "Print the numbered theme menu",
            },
            "apply": {
                "help": "Apply a theme by file name",
                "arguments": [
                    (["name"], {"help": "Theme file name, e.g. gruvbox_dark.toml"}),
                ],
            },
            "contrast": {
                "help": "Print a theme's background and contrast colors",
                "arguments": [
                    (["name"], {"help": "Theme file name"}),
                ],
            },
        },
        global_arguments=[
            (["-v", "--verbose"], {"action": "store_true", "help": "Enable verbose output"}),
            (["--themes-dir"], {"type": Path, "help": "Directory holding theme files"}),
            (["--config-file"], {"type": Path, "help": "Path to alacritty.toml"}),
        ],
    )


def load_themes(settings: ThemeSettings) -> list[Theme]:
    themes = get_themes(settings.themes_dir)
    if not themes:
        raise ThemeError(f"No themes found in {settings.themes_dir}")
    return themes


def lookup_theme(settings: ThemeSettings, name: str) -> Theme:
    theme = find_theme(load_themes(settings), name)
    if theme is None:
        raise ThemeError(f"Unknown theme: {name}")
    return theme


def print_colors(theme: Theme) -> None:
    background = read_theme_color(theme.path)
    contrast = calc_contrast_color(background)
    logger.debug("%s: background %s, contrast %s", theme.name, background, contrast)
    print(f"background: {format_hex(background)}")
    print(f"contrast: {format_hex(contrast)}")


def dispatch_command(command: str, settings: ThemeSettings, name: str | None = None) -> None:
    if command == "list":
        print(format_menu(load_themes(settings)))
        return

    if command == "select":
        theme = select_theme(load_themes(settings))
    else:
        theme = lookup_theme(settings, name)

    if command != "contrast":
        apply_theme(theme, settings.config_file, settings.import_base)
    print_colors(theme)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the alacritty theme module."""
    parser = create_parser()
    args = parser.parse_args(argv)

    verbose = args.verbose or debug_requested()
    config = ScriptConfig(
        module_name="alacritty",
        script_name="alacritty-theme",
        load_config=True,
        module_dir=get_module_directory(__file__),
    )
    config.setup_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        include_console=verbose,
    )

    try:
        settings = ThemeSettings.from_script_config(
            config, themes_dir=args.themes_dir, config_file=args.config_file
        )
        dispatch_command(args.command, settings, getattr(args, "name", None))
        return 0
    except ThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: File is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
