"""Build a Context from action inputs, and persist it for the post phase."""

import json
import os
import re
import uuid
from typing import Iterable, List, Optional, Union

from .. import workflow
from ..config import Config, Defaults
from ..errors import InputError
from .context import Context
from .reporter import NullReporter, Reporter

TRUE_VALUES = re.compile(r"^(true|1|on|yes)$", re.IGNORECASE)


def to_boolean(value: str) -> bool:
    return bool(TRUE_VALUES.match(value.strip()))


def parse_array(value: str) -> List[str]:
    """Split an input on runs of whitespace; a blank input is an empty list."""
    return value.split()


def parse_push_option(push_option: str, build: bool) -> bool:
    """Decide whether to push; pushing is only possible for images built here.

    ``on:push`` pushes only for workflows triggered by a push event.
    """
    if not build:
        return False
    if to_boolean(push_option):
        return True
    return push_option.strip() == "on:push" and os.environ.get("GITHUB_EVENT_NAME") == "push"


def parse_build_args(lines: Iterable[str]) -> List[str]:
    build_args: List[str] = []
    for line in lines:
        if line.strip():
            build_args.extend(["--build-arg", line.strip()])
    return build_args


def create_project_name(reporter: Union[Reporter, NullReporter, None] = None) -> str:
    """Unique compose project name for this job run.

    Combines the repository, job and run id with a random suffix so that
    concurrent runs on a shared Docker host never collide.
    """
    names = ("GITHUB_REPOSITORY", "GITHUB_JOB", "GITHUB_RUN_ID")
    missing = [name for name in names if not os.environ.get(name)]
    if missing:
        raise InputError(f"Unexpectedly missing environment variable(s): {', '.join(missing)}")

    repository = os.environ["GITHUB_REPOSITORY"].replace("/", "-")
    job = os.environ["GITHUB_JOB"]
    run_id = os.environ["GITHUB_RUN_ID"]
    project_name = f"{repository}-{job}-{run_id}-{uuid.uuid4()}"

    (reporter or NullReporter()).info(f"Using compose project name {project_name}")
    return project_name


def get_context(
    config: Optional[Config] = None,
    reporter: Union[Reporter, NullReporter, None] = None,
) -> Context:
    """Read and validate the inputs of the main phase, then save them as state."""
    config = config or Config()

    compose_command = workflow.get_input("composeCommand") or Defaults.compose.command
    compose_arguments = parse_array(workflow.get_input("composeArguments") or Defaults.compose.arguments)
    # The default arguments only make sense for `up`
    if compose_command == "run" and compose_arguments == parse_array(Defaults.compose.arguments):
        compose_arguments = []

    build = to_boolean(workflow.get_input("build"))
    context = Context(
        compose_files=tuple(workflow.get_multiline_input("composeFile")),
        service_name=workflow.get_input("serviceName") or None,
        compose_command=compose_command,
        compose_arguments=tuple(compose_arguments),
        run_command=tuple(parse_array(workflow.get_input("runCommand"))),
        build=build,
        build_args=tuple(parse_build_args(workflow.get_multiline_input("build-args"))),
        registry_cache=workflow.get_input("registry-cache") or None,
        push=parse_push_option(workflow.get_input("push"), build),
        post_command=config.post_commands,
        project_name=create_project_name(reporter),
    )

    save_context(context)
    return context


def save_context(context: Context) -> None:
    workflow.save_state("isPost", True)
    workflow.save_state("composeFiles", list(context.compose_files))
    workflow.save_state("serviceName", context.service_name or "")
    workflow.save_state("composeCommand", context.compose_command)
    workflow.save_state("composeArguments", list(context.compose_arguments))
    workflow.save_state("runCommand", list(context.run_command))
    workflow.save_state("build", context.build)
    workflow.save_state("buildArgs", list(context.build_args))
    workflow.save_state("registryCache", context.registry_cache or "")
    workflow.save_state("push", context.push)
    workflow.save_state("postCommand", list(context.post_command))
    workflow.save_state("projectName", context.project_name)


def _state_list(name: str) -> List[str]:
    raw = workflow.get_state(name)
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InputError(f"Saved state {name} is not valid JSON: {e}") from e
    if not isinstance(value, list):
        raise InputError(f"Saved state {name} is not a list")
    return [str(item) for item in value]


def load_state() -> Context:
    """Rebuild the main phase's Context in the post phase."""
    project_name = workflow.get_state("projectName")
    if not project_name:
        raise InputError("Unexpectedly missing saved state: projectName")

    return Context(
        compose_files=tuple(_state_list("composeFiles")),
        service_name=workflow.get_state("serviceName") or None,
        compose_command=workflow.get_state("composeCommand"),
        compose_arguments=tuple(_state_list("composeArguments")),
        run_command=tuple(_state_list("runCommand")),
        build=to_boolean(workflow.get_state("build")),
        build_args=tuple(_state_list("buildArgs")),
        registry_cache=workflow.get_state("registryCache") or None,
        push=to_boolean(workflow.get_state("push")),
        post_command=tuple(_state_list("postCommand")),
        project_name=project_name,
    )
