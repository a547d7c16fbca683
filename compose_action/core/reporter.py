"""Reporter classes for controlling command output."""

from contextlib import contextmanager
from typing import Generator, Optional

from ..themed_console import ThemedConsole
from ..workflow import format_command, in_github_actions


class Reporter:
    """Default reporter writing to the job log.

    On a GitHub Actions runner warnings and errors become workflow annotations
    and steps become collapsible log groups; elsewhere they are themed console
    output.
    """

    def __init__(
        self,
        console: Optional[ThemedConsole] = None,
        debug: bool = False,
        annotations: Optional[bool] = None,
    ):
        self.console = console or ThemedConsole()
        self.debug_enabled = debug
        self.annotations = in_github_actions() if annotations is None else annotations
        self.current_step = 0
        self.total_steps = 0

    def set_total_steps(self, total: int) -> None:
        """Set the total number of steps for progress tracking."""
        self.total_steps = total
        self.current_step = 0

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """Wrap the output of one step under a titled header.

        Args:
            title: Step description (e.g., "Pulling images")
        """
        if self.total_steps > 0:
            self.current_step += 1
            title = f"[{self.current_step}/{self.total_steps}] {title}"

        if self.annotations:
            self.console.plain(f"::group::{title}")
            try:
                yield
            finally:
                self.console.plain("::endgroup::")
        else:
            self.console.rule(title, style=self.console.theme.get("info", "cyan"))
            yield

    def info(self, message: str) -> None:
        """Display an info message."""
        self.console.info(message)

    def success(self, message: str) -> None:
        """Display a success message."""
        self.console.success(message)

    def warning(self, message: str) -> None:
        """Display a warning, as an annotation when running in a workflow."""
        if self.annotations:
            self.console.plain(format_command("warning", message))
        else:
            self.console.warning(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Display an error, as an annotation when running in a workflow."""
        if self.annotations:
            self.console.plain(format_command("error", message))
        else:
            self.console.error(f"Error: {message}")

    def dim(self, message: str) -> None:
        """Display a dimmed/secondary message."""
        self.console.dim(message)

    def debug(self, message: str) -> None:
        """Display a message only when debug output is enabled."""
        if not self.debug_enabled:
            return
        if self.annotations:
            self.console.plain(format_command("debug", message))
        else:
            self.console.dim(f"[DEBUG] {message}")


class NullReporter:
    """No-op reporter for testing."""

    def set_total_steps(self, total: int) -> None:
        """No-op."""
        pass

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """No-op context manager."""
        yield

    def info(self, message: str) -> None:
        """No-op."""
        pass

    def success(self, message: str) -> None:
        """No-op."""
        pass

    def warning(self, message: str) -> None:
        """No-op."""
        pass

    def error(self, message: str) -> None:
        """No-op."""
        pass

    def dim(self, message: str) -> None:
        """No-op."""
        pass

    def debug(self, message: str) -> None:
        """No-op."""
        pass
