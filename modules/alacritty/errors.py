"""Error types raised by the alacritty theme module."""


class ThemeError(Exception):
    """Base class for theme selection and parsing failures."""


class ParseError(ThemeError):
    """A theme file did not contain a usable background color.

    ``channels`` names the channels ("red", "green", "blue") whose hex digits
    were invalid; it is empty when no color literal could be located at all.
    """

    def __init__(self, message: str = "Failed to parse hex color", channels: tuple[str, ...] = ()):
        self.channels = channels
        if channels:
            message = f"{message} (bad {', '.join(channels)} channel)"
        super().__init__(message)


class SelectionError(ThemeError):
    """The menu selection was not a valid theme index."""
