"""XDG Base Directory lookups for other applications' config files."""

from pathlib import Path
from xdg import BaseDirectory


def get_xdg_config_dir(application: str) -> Path:
    """Return ``$XDG_CONFIG_HOME/<application>`` (may not exist)."""
    if not isinstance(application, str) or not application.strip():
        raise ValueError("application must be a non-empty string")
    return Path(BaseDirectory.xdg_config_home) / application


def get_xdg_config_file(application: str, *parts: str) -> Path:
    """Return a path inside an application's XDG config directory.

    ``parts`` are joined below the directory, so nested entries such as the
    themes checkout (``'alacritty', 'themes', 'themes'``) can be addressed.

        >>> get_xdg_config_file('alacritty', 'alacritty.toml')
        PosixPath('/home/user/.config/alacritty/alacritty.toml')
    """
    return get_xdg_config_dir(application).joinpath(*parts)
