#!/usr/bin/env python3
"""Common utilities for module scripts."""

import argparse
from pathlib import Path


def get_module_directory(module_file: str) -> Path:
    """Get the directory of the calling module.

    Args:
        module_file: Should be __file__ from the calling module

    Returns:
        Path to the module directory
    """
    return Path(module_file).resolve().parent


def create_module_parser(
    prog: str,
    description: str,
    subcommands: dict[str, dict],
    global_arguments: list[tuple[list[str], dict]] | None = None,
) -> argparse.ArgumentParser:
    """Create a standardized argument parser for a module.

    Args:
        prog: Program name
        description: Module description
        subcommands: Dictionary mapping command names to their config:
            - 'help': Help text for the subcommand
            - 'arguments': Optional list of argument configs as tuples:
                (args, kwargs) where args are positional arguments to add_argument
                and kwargs are keyword arguments
        global_arguments: Optional (args, kwargs) tuples added to the top-level
            parser, before the subcommand

    Example:
        parser = create_module_parser(
            "alacritty-theme",
            "Alacritty theme switcher",
            {
                "apply": {
                    "help": "Apply a theme by file name",
                    "arguments": [
                        (["name"], {"help": "Theme file name"}),
                    ]
                }
            },
            global_arguments=[
                (["-v", "--verbose"], {"action": "store_true", "help": "Verbose output"}),
            ],
        )

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(prog=prog, description=description)

    for args, kwargs in global_arguments or []:
        parser.add_argument(*args, **kwargs)

    subparsers = parser.add_subparsers(dest="command", required=True)

    for cmd_name, cmd_config in subcommands.items():
        subparser = subparsers.add_parser(cmd_name, help=cmd_config.get("help", ""))

        for args, kwargs in cmd_config.get("arguments", []):
            subparser.add_argument(*args, **kwargs)

    return parser
