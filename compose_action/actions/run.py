from typing import List

from compose_action.actions import Action, ActionResult, ComposeError
from compose_action.core.actions import (
    BaseAction,
    BuildImages,
    InspectContainer,
    PullImages,
    RewriteRegistry,
    RunPrimaryCommand,
)
from compose_action.core.context import ActionContext
from compose_action.core.pipeline import run_pipeline
from compose_action.errors import ComposeActionError


class RunComposeAction(Action):
    """Main phase: rewrite, pull, build, run the primary command, inspect."""

    name = "run"

    def steps(self) -> List[BaseAction]:
        return [
            RewriteRegistry(),
            PullImages(),
            BuildImages(),
            RunPrimaryCommand(),
            InspectContainer(),
        ]

    def run(self, ctx: ActionContext) -> ActionResult:
        try:
            run_pipeline(ctx, self.steps())
        except ComposeActionError as e:
            return ActionResult(ok=False, error=ComposeError(str(e)))

        if ctx.error is not None:
            return ActionResult(ok=False, error=ctx.error)
        return ActionResult(ok=True, container_id=ctx.container_id)
