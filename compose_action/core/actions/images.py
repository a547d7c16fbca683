"""Image preparation steps: registry rewrite, pull and build."""

from typing import Optional

from ...actions import ComposeError
from ..context import ActionContext
from ..transform import apply_registry_rewrite
from .base import BaseAction


class RewriteRegistry(BaseAction):
    """Point Docker Hub images at the configured registry mirror."""

    title = "Rewriting image registry"

    def should_run(self, ctx: ActionContext) -> bool:
        """Only run if a registry cache is configured."""
        return ctx.context.registry_cache is not None

    def execute(self, ctx: ActionContext) -> Optional[bool]:
        with ctx.reporter.step(f"{self.title} to {ctx.context.registry_cache}"):
            apply_registry_rewrite(
                ctx.context,
                ctx.compose.runner,
                yq=ctx.config.yq_command,
                find=ctx.config.find_command,
            )
        return True


class PullImages(BaseAction):
    """Pull images for the service, or the whole project.

    A failed pull is tolerated when the images are built afterwards;
    without a build there is nothing to run, so the pipeline stops.
    """

    title = "Pulling images"

    def execute(self, ctx: ActionContext) -> Optional[bool]:
        with ctx.reporter.step(self.title):
            try:
                ctx.compose.run("pull", ctx.context.service_args(), ctx.context)
            except Exception as e:
                if ctx.context.build:
                    ctx.reporter.warning(f"Pull failed, continuing with build: {e}")
                    return True
                ctx.reporter.debug(f"{ctx.compose.tool} pull failed: {e}")
                ctx.error = ComposeError(f"{ctx.compose.tool} pull failed and not allowed to build")
                return False
        return True


class BuildImages(BaseAction):
    """Build images, passing the configured build arguments."""

    title = "Building images"

    def should_run(self, ctx: ActionContext) -> bool:
        return ctx.context.build

    def execute(self, ctx: ActionContext) -> Optional[bool]:
        with ctx.reporter.step(self.title):
            args = [*ctx.context.build_args, *ctx.context.service_args()]
            ctx.compose.run("build", args, ctx.context)
        return True
