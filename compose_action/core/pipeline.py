"""Pipeline orchestrator for executing steps in sequence."""

from typing import List

from .context import ActionContext
from .actions.base import BaseAction


def run_pipeline(ctx: ActionContext, actions: List[BaseAction]) -> bool:
    """Execute a sequence of steps with the given context.

    Args:
        ctx: The context object containing state and dependencies
        actions: List of steps to execute in order

    Returns:
        True if every step ran, False if a step stopped the pipeline

    Steps run strictly one after another; a step returning False stops the
    pipeline and exceptions propagate to the caller.
    """
    total_steps = sum(1 for action in actions if action.should_run(ctx))
    ctx.reporter.set_total_steps(total_steps)

    for action in actions:
        if not action.should_run(ctx):
            continue

        try:
            result = action.execute(ctx)
        except Exception as e:
            ctx.reporter.debug(f"Step {action.__class__.__name__} failed: {e}")
            raise
        if result is False:
            return False

    return True
