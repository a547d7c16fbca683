"""Context object describing one compose-action job run."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..actions import ComposeError
from ..config import Config
from ..errors import InputError
from .reporter import NullReporter, Reporter

if TYPE_CHECKING:
    from .compose import Compose

COMPOSE_COMMANDS = ("up", "run")


@dataclass(frozen=True)
class Context:
    """Validated job inputs shared by the main and the post phase.

    The same project name must be used by both phases so that cleanup
    addresses the containers created by the main run.
    """

    compose_files: Tuple[str, ...]
    service_name: Optional[str]
    compose_command: str
    project_name: str
    compose_arguments: Tuple[str, ...] = ()
    run_command: Tuple[str, ...] = ()
    build: bool = False
    build_args: Tuple[str, ...] = ()
    registry_cache: Optional[str] = None
    push: bool = False
    post_command: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but keep the record immutable
        for name in ("compose_files", "compose_arguments", "run_command", "build_args", "post_command"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if not self.service_name:
            object.__setattr__(self, "service_name", None)
        if not self.registry_cache:
            object.__setattr__(self, "registry_cache", None)

        if not self.compose_files:
            raise InputError("At least one compose file is required")
        if self.compose_command not in COMPOSE_COMMANDS:
            raise InputError(
                f"composeCommand not in {', '.join(COMPOSE_COMMANDS)}: {self.compose_command!r}"
            )
        if self.compose_command == "run" and self.service_name is None:
            raise InputError('serviceName must be provided when composeCommand is "run"')

    def service_args(self) -> Tuple[str, ...]:
        """The service selector: one token, or nothing for the whole project."""
        return (self.service_name,) if self.service_name else ()


class ActionContext:
    """Shared state for the main and post phase actions.

    Passed through all steps; accumulates the container id and, once a
    step fails, the error to report.
    """

    def __init__(
        self,
        context: Context,
        compose: "Compose",
        reporter: Union[Reporter, NullReporter],
        config: Optional[Config] = None,
    ):
        self.context = context
        self.compose = compose
        self.reporter = reporter
        self.config = config or Config()

        # State accumulated during pipeline execution
        self.container_id: Optional[str] = None
        self.error: Optional[ComposeError] = None
