"""compose-action command line entry point."""

import sys

import click

from . import __version__, workflow
from .actions.cleanup import CleanupAction
from .actions.run import RunComposeAction
from .config import Config
from .core.inputs import get_context, load_state
from .utils import build_action_context, handle_errors, make_reporter


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="compose-action")
@click.pass_context
def cli(ctx: click.Context):
    """Run a docker compose service as a CI step and tear it down afterwards."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("run")
@handle_errors
def run_command():
    """Main phase: pull, build and run the service.

    \b
    Publishes the `containerId` output, also when the run fails.
    """
    config = Config.load()
    reporter = make_reporter(config)

    context = get_context(config, reporter)
    result = RunComposeAction().run(build_action_context(context, config, reporter))

    if result.ok:
        workflow.set_output("containerId", result.container_id or "")
        reporter.success(f"Compose {context.compose_command} finished")
        return

    error = result.error
    if error.container_id:
        workflow.set_output("containerId", error.container_id)
    reporter.error(error.message)
    sys.exit(1)


@cli.command("cleanup")
@handle_errors
def cleanup_command():
    """Post phase: push images and tear the project down."""
    config = Config.load()
    reporter = make_reporter(config)

    context = load_state()
    result = CleanupAction().run(build_action_context(context, config, reporter))

    if not result.ok:
        reporter.error(result.message)
        sys.exit(1)
    reporter.success(f"Cleaned up project {context.project_name}")


@cli.command("auto")
@click.pass_context
def auto_command(ctx: click.Context):
    """Run the main or the post phase, whichever this invocation is."""
    if workflow.is_post():
        ctx.invoke(cleanup_command)
    else:
        ctx.invoke(run_command)


def main():
    cli()


if __name__ == "__main__":
    main()
