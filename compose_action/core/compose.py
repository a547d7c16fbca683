"""Compose tool invocation: argument building, tool selection and inspection."""

from typing import Callable, List, Optional, Sequence, Union

from ..config import Defaults
from ..errors import CommandFailedError
from ..runner import CommandRunner
from .context import Context
from .reporter import NullReporter, Reporter


def build_compose_args(command: str, args: Sequence[str], context: Context) -> List[str]:
    """Assemble the argument vector for one compose invocation.

    ``command`` may hold several whitespace separated words, so
    ``"down --remove-orphans --volumes"`` and ``"down"`` with
    ``["--remove-orphans", "--volumes"]`` produce the same vector.

    Args:
        command: Compose subcommand, optionally followed by its options
        args: Extra arguments, appended verbatim
        context: Job context supplying compose files and project name

    Returns:
        ``-f`` pairs for every compose file, the ``-p`` pair, the command
        tokens, then ``args``
    """
    compose_args: List[str] = []
    for compose_file in context.compose_files:
        compose_args.extend(["-f", compose_file])
    compose_args.extend(["-p", context.project_name])
    compose_args.extend(command.split())
    compose_args.extend(args)
    return compose_args


class ComposeToolSelector:
    """Chooses between the standalone ``docker-compose`` and the ``docker compose`` plugin.

    The legacy name is probed once with ``--version``; if that fails the
    plugin name is used for the rest of the selector's lifetime.
    """

    def __init__(
        self,
        runner: CommandRunner,
        reporter: Union[Reporter, NullReporter, None] = None,
        legacy: str = Defaults.compose.legacy_command,
        fallback: str = Defaults.compose.plugin_command,
    ):
        self.runner = runner
        self.reporter = reporter or NullReporter()
        self.legacy = legacy
        self.fallback = fallback
        self._resolved: Optional[str] = None

    @property
    def resolved(self) -> Optional[str]:
        return self._resolved

    def resolve(self) -> str:
        """Return the compose command name, probing on first use."""
        if self._resolved is None:
            self._resolved = self.legacy if self._probe() else self.fallback
            if self._resolved != self.legacy:
                self.reporter.warning(f"{self.legacy} not available, falling back to {self.fallback}")
        return self._resolved

    def _probe(self) -> bool:
        try:
            return self.runner.run(self.legacy, ["--version"]) == 0
        except Exception as e:
            self.reporter.debug(f"{self.legacy} --version failed: {e}")
            return False

    def reset(self) -> None:
        """Forget the resolved name; the next call probes again."""
        self._resolved = None

    def use_legacy(self) -> None:
        """Resolve to the legacy name without probing."""
        self._resolved = self.legacy


class Compose:
    """Runs compose commands for a job context."""

    def __init__(
        self,
        runner: CommandRunner,
        selector: ComposeToolSelector,
        reporter: Union[Reporter, NullReporter, None] = None,
    ):
        self.runner = runner
        self.selector = selector
        self.reporter = reporter or NullReporter()

    @property
    def tool(self) -> str:
        return self.selector.resolve()

    def run(
        self,
        command: str,
        args: Sequence[str],
        context: Context,
        on_stdout: Optional[Callable[[str], None]] = None,
    ) -> int:
        """Run one compose command, raising ``CommandFailedError`` on a non-zero exit."""
        tool = self.tool
        compose_args = build_compose_args(command, args, context)
        returncode = self.runner.run(tool, compose_args, on_stdout=on_stdout)
        if returncode != 0:
            raise CommandFailedError(tool, returncode)
        return returncode

    def container_id(self, context: Context) -> Optional[str]:
        """Best-effort lookup of the container id(s) of the project or service.

        Returns:
            The trimmed ``ps -aq`` output (possibly empty), or None when the
            query itself failed
        """
        chunks: List[str] = []
        try:
            self.run("ps", ["-aq", *context.service_args()], context, on_stdout=chunks.append)
        except Exception as e:
            self.reporter.warning(f"Error running `{self.tool} ps`, not returning a container ID")
            self.reporter.debug(str(e))
            return None
        return "".join(chunks).strip()
