"""Tests for the registry mirror rewrite."""
import pytest

from compose_action.core.transform import (
    apply_registry_rewrite,
    compose_image_yq_transform,
    compose_yq_pipeline,
    dockerfile_sed_expressions,
    transform_compose_file,
    transform_docker_files,
)
from compose_action.errors import CommandFailedError
from conftest import FakeRunner

REGISTRY = "hub.artifactor.ee"


def test_compose_image_yq_transform():
    assert compose_image_yq_transform("node:", REGISTRY) == (
        '[.[] | (select(.value.image | test("^node:")))'
        ' |= (. | .value.image = "hub.artifactor.ee/" + .value.image)]'
    )


def test_compose_yq_pipeline_covers_every_prefix():
    pipeline = compose_yq_pipeline(REGISTRY)

    assert pipeline.startswith(".services = (.services | (to_entries | ")
    assert pipeline.endswith(" | from_entries))")
    for prefix in ("node:", "redis:", "postgres:", "bitnami/"):
        assert f'test("^{prefix}")' in pipeline


def test_dockerfile_sed_expressions():
    expressions = dockerfile_sed_expressions(REGISTRY)

    assert expressions[:2] == ["-e", "s#^\\(FROM\\) \\(node:\\)#\\1 hub.artifactor.ee/\\2#"]
    assert expressions.count("-e") == 4


def test_transform_compose_file_runs_yq_in_place():
    runner = FakeRunner()

    transform_compose_file("docker-compose.yml", REGISTRY, runner)

    assert runner.calls == [
        ("yq", ["--inplace", compose_yq_pipeline(REGISTRY), "docker-compose.yml"], False),
    ]


def test_transform_docker_files_runs_find_with_sed():
    """
    Test the Dockerfile rewrite.
    Expected: one find invocation running sed in place on every Dockerfile*.
    """
    runner = FakeRunner()

    transform_docker_files(REGISTRY, runner, find="gfind")

    command, args, _ = runner.calls[0]
    assert command == "gfind"
    assert args[:7] == [".", "-type", "f", "-name", "Dockerfile*", "-exec", "sed"]
    assert args[-3:] == ["-i", "{}", "+"]


@pytest.mark.parametrize("transform", [
    lambda runner: transform_compose_file("docker-compose.yml", REGISTRY, runner),
    lambda runner: transform_docker_files(REGISTRY, runner),
])
def test_transform_non_zero_exit_raises(transform):
    with pytest.raises(CommandFailedError, match="exited with code 2"):
        transform(FakeRunner(returncode=2))


def test_apply_registry_rewrite_without_registry(make_context):
    runner = FakeRunner()

    apply_registry_rewrite(make_context(), runner)

    assert runner.calls == []


def test_apply_registry_rewrite_every_compose_file(make_context):
    """
    Test a rewrite over several compose files.
    Expected: Dockerfiles first, then each compose file in order.
    """
    context = make_context(compose_files=["a.yml", "b.yml"], registry_cache=REGISTRY)
    runner = FakeRunner()

    apply_registry_rewrite(context, runner, yq="yq4")

    assert [call[0] for call in runner.calls] == ["find", "yq4", "yq4"]
    assert [call[1][-1] for call in runner.calls[1:]] == ["a.yml", "b.yml"]
