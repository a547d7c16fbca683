"""CLI utilities and decorators."""
import sys
from functools import wraps

from .core.compose import Compose, ComposeToolSelector
from .core.context import ActionContext, Context
from .core.reporter import Reporter
from .config import Config
from .errors import ComposeActionError
from .runner import CommandRunner
from .themed_console import ThemedConsole

console = ThemedConsole()


def make_reporter(config: Config) -> Reporter:
    return Reporter(console=console, debug=config.debug)


def build_action_context(context: Context, config: Config, reporter: Reporter) -> ActionContext:
    """Wire the runner, tool selector and compose client for one phase."""
    runner = CommandRunner(printer=console.plain, echo_commands=config.debug)
    selector = ComposeToolSelector(
        runner,
        reporter,
        legacy=config.legacy_command,
        fallback=config.plugin_command,
    )
    compose = Compose(runner, selector, reporter)
    return ActionContext(context, compose, reporter, config)


def handle_errors(func):
    """Decorator reporting errors and turning them into a failing exit status."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ComposeActionError as e:
            Reporter(console=console).error(str(e))
        except Exception as e:
            Reporter(console=console).error(f"Unexpected error: {e}")
        sys.exit(1)
    return wrapper
