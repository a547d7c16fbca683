"""Themed console with dark/light detection for job logs and terminals."""

import os
from typing import Dict

from rich.console import Console as RichConsole

THEMES: Dict[str, Dict[str, str]] = {
    "dark": {"success": "green", "error": "red", "warning": "yellow", "info": "cyan", "dim": "dim"},
    "light": {"success": "green", "error": "red", "warning": "dark_orange3", "info": "blue", "dim": "dim"},
}


class ThemedConsole(RichConsole):
    """Console with theme support and semantic color methods."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.themes = THEMES
        self.current_theme_name = os.environ.get("COMPOSE_ACTION_THEME", "auto").lower()
        self.theme = self._resolve_theme()

    def _resolve_theme(self) -> Dict[str, str]:
        """Resolve theme name to actual theme dict."""
        if self.current_theme_name == "auto":
            detected = "dark" if self._is_dark_terminal() else "light"
            return self.themes[detected]
        return self.themes.get(self.current_theme_name, self.themes["dark"])

    def _is_dark_terminal(self) -> bool:
        """Detect if the output has a dark background."""
        # Hosted runner logs are rendered on a dark background
        if os.environ.get("GITHUB_ACTIONS") == "true":
            return True

        colorfgbg = os.environ.get("COLORFGBG", "")
        if colorfgbg and ";" in colorfgbg:
            bg = colorfgbg.split(";")[-1]
            if bg.isdigit():
                return int(bg) <= 7

        if os.environ.get("THEME", "").lower() in ["dark", "dracula", "monokai", "nord"]:
            return True

        return False

    def _colorized_print(self, text: str, style_key: str) -> None:
        """Print text with color from current theme."""
        self.print(text, style=self.theme.get(style_key, "dim"), markup=False, highlight=False)

    # Semantic color methods
    def success(self, text: str) -> None:
        """Print success message."""
        self._colorized_print(text, "success")

    def error(self, text: str) -> None:
        """Print error message."""
        self._colorized_print(text, "error")

    def warning(self, text: str) -> None:
        """Print warning message."""
        self._colorized_print(text, "warning")

    def info(self, text: str) -> None:
        """Print info message."""
        self._colorized_print(text, "info")

    def dim(self, text: str) -> None:
        """Print dimmed text."""
        self._colorized_print(text, "dim")

    def plain(self, text: str) -> None:
        """Print text exactly as given, without markup or styling."""
        self.print(text, markup=False, highlight=False, soft_wrap=True)

