"""TermColors adapters: rich-backed and plain text."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

# Semantic color → rich style
BRIGHT_GREEN = "bright_green"
BRIGHT_RED = "bright_red"
RED = "red"
GRAY = "bright_black"
BRIGHT_YELLOW = "bright_yellow"
BRIGHT_WHITE = "bright_white"


class RichTermColors:
    """TermColors backed by a rich Console.

    Color capability (terminal detection, NO_COLOR, color system) is
    decided by the Console. Styling is rendered to a string, never printed:
    caller decides destination.
    """

    __slots__ = ("_console",)

    def __init__(self, console: Console | None = None) -> None:
        """Initialize adapter.

        Args:
            console: Console used for capability detection and rendering.
                     Uses a default stdout Console if None.
        """
        self._console = console if console is not None else Console(highlight=False)

    @property
    def enabled(self) -> bool:
        """True if the console emits color codes."""
        return self._console.color_system is not None and not self._console.no_color

    def _paint(self, text: str, style: str) -> str:
        if not self.enabled or not text:
            return text
        with self._console.capture() as capture:
            self._console.print(Text(text, style=style), end="", soft_wrap=True, crop=False)
        return capture.get()

    def bright_green(self, text: str) -> str:
        return self._paint(text, BRIGHT_GREEN)

    def bright_red(self, text: str) -> str:
        return self._paint(text, BRIGHT_RED)

    def red(self, text: str) -> str:
        return self._paint(text, RED)

    def gray(self, text: str) -> str:
        return self._paint(text, GRAY)

    def bright_yellow(self, text: str) -> str:
        return self._paint(text, BRIGHT_YELLOW)

    def bright_white(self, text: str) -> str:
        return self._paint(text, BRIGHT_WHITE)


class PlainTermColors:
    """No-op TermColors: returns text unchanged.

    For non-terminal output and for tests asserting on uncolored text.
    """

    __slots__ = ()

    @property
    def enabled(self) -> bool:
        """Never styled."""
        return False

    def bright_green(self, text: str) -> str:
        return text

    def bright_red(self, text: str) -> str:
        return text

    def red(self, text: str) -> str:
        return text

    def gray(self, text: str) -> str:
        return text

    def bright_yellow(self, text: str) -> str:
        return text

    def bright_white(self, text: str) -> str:
        return text
