"""Primary command and container inspection steps."""

from typing import List, Optional

from ...actions import ComposeError
from ..context import ActionContext, Context
from .base import BaseAction


def primary_args(context: Context) -> List[str]:
    """Arguments following the primary compose command."""
    args = [*context.compose_arguments, *context.service_args()]
    if context.compose_command == "run":
        args.extend(context.run_command)
    return args


class RunPrimaryCommand(BaseAction):
    """Run ``up`` or ``run`` for the service.

    On failure the container id is still looked up, so it can be reported
    alongside the error.
    """

    def execute(self, ctx: ActionContext) -> Optional[bool]:
        context = ctx.context
        with ctx.reporter.step(f"Running {context.compose_command}"):
            try:
                ctx.compose.run(context.compose_command, primary_args(context), context)
            except Exception as e:
                ctx.container_id = ctx.compose.container_id(context)
                ctx.error = ComposeError(str(e), ctx.container_id)
                return False
        return True


class InspectContainer(BaseAction):
    """Record the container id of the finished run."""

    title = "Inspecting containers"

    def execute(self, ctx: ActionContext) -> Optional[bool]:
        with ctx.reporter.step(self.title):
            ctx.container_id = ctx.compose.container_id(ctx.context)
        return True
