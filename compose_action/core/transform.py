"""Registry rewrite: point Docker Hub images at a registry mirror."""

from typing import List

from ..config import Defaults
from ..errors import CommandFailedError
from ..runner import CommandRunner
from .context import Context

DOCKERHUB_PREFIXES = ["node:", "redis:", "postgres:", "bitnami/"]


def compose_image_yq_transform(dockerhub_image_expression: str, registry: str) -> str:
    """yq filter prefixing matching ``services.*.image`` values with ``registry``."""
    return (
        f'[.[] | (select(.value.image | test("^{dockerhub_image_expression}")))'
        f' |= (. | .value.image = "{registry}/" + .value.image)]'
    )


def compose_yq_pipeline(registry: str) -> str:
    transforms = " | ".join(compose_image_yq_transform(image, registry) for image in DOCKERHUB_PREFIXES)
    return f".services = (.services | (to_entries | {transforms} | from_entries))"


def dockerfile_sed_expressions(registry: str) -> List[str]:
    expressions: List[str] = []
    for image in DOCKERHUB_PREFIXES:
        expressions.extend(["-e", f"s#^\\(FROM\\) \\({image}\\)#\\1 {registry}/\\2#"])
    return expressions


def transform_compose_file(
    compose_file_path: str,
    registry: str,
    runner: CommandRunner,
    yq: str = Defaults.tools.yq,
) -> int:
    """Rewrite image references of one compose file in place."""
    returncode = runner.run(yq, ["--inplace", compose_yq_pipeline(registry), compose_file_path])
    if returncode != 0:
        raise CommandFailedError(yq, returncode)
    return returncode


def transform_docker_files(
    registry: str,
    runner: CommandRunner,
    find: str = Defaults.tools.find,
) -> int:
    """Rewrite ``FROM`` lines of every Dockerfile below the working directory."""
    args = [
        ".",
        "-type",
        "f",
        "-name",
        "Dockerfile*",
        "-exec",
        "sed",
        *dockerfile_sed_expressions(registry),
        "-i",
        "{}",
        "+",
    ]
    returncode = runner.run(find, args)
    if returncode != 0:
        raise CommandFailedError(find, returncode)
    return returncode


def apply_registry_rewrite(
    context: Context,
    runner: CommandRunner,
    yq: str = Defaults.tools.yq,
    find: str = Defaults.tools.find,
) -> None:
    """Point Dockerfiles and compose files at ``context.registry_cache``."""
    if not context.registry_cache:
        return
    transform_docker_files(context.registry_cache, runner, find=find)
    for compose_file in context.compose_files:
        transform_compose_file(compose_file, context.registry_cache, runner, yq=yq)
