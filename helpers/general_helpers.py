"""
General helpers for script configuration (XDG) and logging.

Provides XDG-compliant config/state directories, TOML configuration loading
and logging setup shared by every module of the suite.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any
from xdg import BaseDirectory


# Suite name for all scripts in this repository
SUITE_NAME = "custom-scripts"

# Any non-empty value other than "0" turns on debug logging
DEBUG_ENV_VAR = "CUSTOM_SCRIPTS_DEBUG"


def debug_requested() -> bool:
    """Return True when the diagnostic environment toggle is set."""
    value = os.environ.get(DEBUG_ENV_VAR, "").strip()
    return value not in ("", "0")


class ScriptConfig:
    """Manages XDG-compliant configuration and logging for a script.

    Configuration is read from the suite file
    ``$XDG_CONFIG_HOME/custom-scripts/config.toml`` and then the module file
    ``$XDG_CONFIG_HOME/custom-scripts/<module>/<script>.toml``; keys in the
    module file win.
    """

    def __init__(self, module_name: str, script_name: str, load_config: bool = True, module_dir: Path | None = None):
        if not isinstance(script_name, str) or not script_name.strip():
            raise ValueError("script_name must be a non-empty string")
        if not isinstance(module_name, str) or not module_name.strip():
            raise ValueError("module_name must be a non-empty string")

        self.module_name = module_name
        self.script_name = script_name
        self.module_dir = module_dir

        self.config_dir = Path(BaseDirectory.save_config_path(SUITE_NAME)) / module_name
        self.state_dir = Path(BaseDirectory.save_state_path(SUITE_NAME)) / module_name
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.state_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.state_dir / f"{script_name}.log"
        self.config_file = self.config_dir / f"{script_name}.toml"

        self.config: dict[str, Any] = {}
        if load_config:
            general_config_path = Path(BaseDirectory.save_config_path(SUITE_NAME)) / "config.toml"
            if general_config_path.exists():
                with open(general_config_path, "rb") as f:
                    self.config = tomllib.load(f)

            if self.config_file.exists():
                with open(self.config_file, "rb") as f:
                    self.config.update(tomllib.load(f))

    def get_config_value(self, key: str, default: Any | None = None) -> Any:
        """Return a possibly expanded configuration value or default."""
        return self.get_config_value_checked(key, default=default, require_str=False)

    def get_config_value_checked(
        self,
        key: str,
        default: Any | None = None,
        *,
        require_str: bool = False,
        allow_empty: bool = False,
        expand: bool = True,
    ) -> Any:
        value = self.config.get(key, default)

        if expand and isinstance(value, str):
            value = os.path.expandvars(value)
            value = os.path.expanduser(value)

        if require_str:
            if value is None:
                raise ValueError(f"Configuration value for '{key}' is required and not set")
            if not isinstance(value, str):
                if isinstance(value, (int, float, bool)):
                    value = str(value)
                else:
                    raise ValueError(
                        f"Configuration value for '{key}' must be a string; got {type(value).__name__}"
                    )
            if not allow_empty and value.strip() == "":
                raise ValueError(f"Configuration value for '{key}' must not be empty")

        return value

    def setup_logging(self, level=logging.INFO, include_console=True):
        """Setup logging to file and optionally console."""
        handlers: list[logging.Handler] = [logging.FileHandler(self.log_file)]
        if include_console:
            handlers.append(logging.StreamHandler())

        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=handlers,
            force=True,
        )

        log = logging.getLogger(self.script_name)
        log.debug("Logging initialized. Log file: %s", self.log_file)
        return log
