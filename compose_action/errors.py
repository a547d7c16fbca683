"""Exceptions raised by compose-action."""

from typing import Optional


class ComposeActionError(Exception):
    """Base class for all compose-action errors."""


class InputError(ComposeActionError):
    """Job inputs or workflow environment are missing or invalid."""


class CommandFailedError(ComposeActionError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, detail: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        message = f"{command} exited with code {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
