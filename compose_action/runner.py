"""Subprocess execution for compose, yq and find invocations."""

import shlex
import subprocess
from typing import Callable, Optional, Sequence

from .errors import ComposeActionError


class RunnerError(ComposeActionError):
    """Raised when a command cannot be launched."""


class CommandRunner:
    """Thin subprocess wrapper that streams output into the job log.

    ``run`` returns the exit code of the process. A non-zero exit is not an
    exception here; callers decide what a failure means. Only a process that
    cannot be started at all raises ``RunnerError``.
    """

    def __init__(
        self,
        *,
        printer: Optional[Callable[[str], None]] = None,
        echo_commands: bool = False,
    ) -> None:
        self.echo_commands = echo_commands
        self._printer = printer or print

    def format_cmd(self, cmd: Sequence[str]) -> str:
        return "$ " + " ".join(shlex.quote(str(token)) for token in cmd)

    def emit(self, message: str) -> None:
        self._printer(message)

    def run(
        self,
        command: str,
        args: Sequence[str],
        on_stdout: Optional[Callable[[str], None]] = None,
    ) -> int:
        """Run ``command`` (which may hold several words) with ``args``.

        Args:
            command: Executable, e.g. ``"docker-compose"`` or ``"docker compose"``
            args: Arguments passed verbatim
            on_stdout: Optional listener; when given, stdout is piped and every
                chunk is handed to it before being echoed

        Returns:
            The process exit code
        """
        cmd = shlex.split(command) + [str(token) for token in args]
        rendered = self.format_cmd(cmd)
        if self.echo_commands:
            self.emit(rendered)

        try:
            if on_stdout is None:
                completed = subprocess.run(cmd, stdin=subprocess.DEVNULL, check=False)
                return completed.returncode

            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                text=True,
                bufsize=1,
                errors="replace",
            )
        except OSError as e:
            raise RunnerError(f"Unable to start {rendered}: {e}") from e

        assert proc.stdout is not None
        try:
            with proc.stdout:
                for chunk in proc.stdout:
                    on_stdout(chunk)
                    self.emit(chunk.rstrip("\n"))
        except BaseException:
            proc.kill()
            proc.wait()
            raise
        return proc.wait()
