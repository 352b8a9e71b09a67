"""Helper utilities for custom-scripts modules."""

from .general_helpers import ScriptConfig, SUITE_NAME, debug_requested
from .module_helpers import (
    get_module_directory,
    create_module_parser,
)
from .xdg_helpers import get_xdg_config_dir, get_xdg_config_file

__all__ = [
    "ScriptConfig",
    "SUITE_NAME",
    "debug_requested",
    "get_module_directory",
    "create_module_parser",
    "get_xdg_config_dir",
    "get_xdg_config_file",
]
