from typing import List

from compose_action.actions import Action, CleanupResult
from compose_action.core.context import ActionContext


class CleanupAction(Action):
    """Post phase: push, then every teardown command.

    Every step is attempted even when an earlier one failed; the failures
    are returned together.
    """

    name = "cleanup"

    def run(self, ctx: ActionContext) -> CleanupResult:
        context = ctx.context
        errors: List[str] = []
        ctx.reporter.set_total_steps(int(context.push) + len(context.post_command))

        if context.push:
            with ctx.reporter.step("Pushing images"):
                try:
                    ctx.compose.run("push", context.service_args(), context)
                except Exception as e:
                    errors.append(f"push: {e}")

        for command in context.post_command:
            with ctx.reporter.step(f"Running {' '.join(command.split())}"):
                try:
                    ctx.compose.run(command, [], context)
                except Exception as e:
                    errors.append(f"{command.strip()}: {e}")

        return CleanupResult(errors=tuple(errors))
