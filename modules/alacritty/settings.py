"""Resolve the paths the theme switcher works on."""

from dataclasses import dataclass
from pathlib import Path

from helpers import ScriptConfig, get_xdg_config_file

# Alacritty expands "~" itself, so the base is written to the config verbatim
DEFAULT_IMPORT_BASE = "~/.config/alacritty/themes/"


@dataclass(frozen=True)
class ThemeSettings:
    themes_dir: Path
    config_file: Path
    import_base: str

    @classmethod
    def from_script_config(
        cls,
        config: ScriptConfig,
        themes_dir: Path | None = None,
        config_file: Path | None = None,
    ) -> "ThemeSettings":
        """Build settings from config values; explicit arguments take precedence."""
        if themes_dir is None:
            themes_dir = Path(config.get_config_value_checked(
                "themes_dir",
                default=str(get_xdg_config_file("alacritty", "themes")),
                require_str=True,
            ))
        if config_file is None:
            config_file = Path(config.get_config_value_checked(
                "config_file",
                default=str(get_xdg_config_file("alacritty", "alacritty.toml")),
                require_str=True,
            ))
        import_base = config.get_config_value_checked(
            "import_base",
            default=DEFAULT_IMPORT_BASE,
            require_str=True,
            expand=False,
        )

        return cls(
            themes_dir=themes_dir.expanduser(),
            config_file=config_file.expanduser(),
            import_base=import_base,
        )
