"""Pytest configuration and shared fixtures."""
from typing import Callable, Dict, List, Optional

import pytest
from click.testing import CliRunner

from compose_action.core.compose import Compose, ComposeToolSelector
from compose_action.core.context import ActionContext, Context
from compose_action.core.reporter import NullReporter


class FakeRunner:
    """Records invocations instead of starting processes.

    Responses are consumed in order; once the queue is empty every call
    returns ``returncode``. A response may be an exit code, an exception to
    raise, or a callable ``(command, args, on_stdout) -> int``. Listeners
    receive ``stdout`` unless a callable response handles them itself.
    """

    def __init__(self, stdout: str = "", returncode: int = 0):
        self.stdout = stdout
        self.returncode = returncode
        self.responses: list = []
        self.calls: List[tuple] = []

    def queue(self, *responses) -> "FakeRunner":
        self.responses.extend(responses)
        return self

    def run(self, command: str, args, on_stdout: Optional[Callable[[str], None]] = None) -> int:
        self.calls.append((command, list(args), on_stdout is not None))
        response = self.responses.pop(0) if self.responses else self.returncode
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(command, args, on_stdout)
        if on_stdout is not None and self.stdout:
            on_stdout(self.stdout)
        return response


class RecordingReporter(NullReporter):
    """Reporter keeping messages for assertions."""

    def __init__(self):
        self.infos: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []
        self.steps: List[str] = []
        self.debugs: List[str] = []

    def step(self, title: str):
        self.steps.append(title)
        return super().step(title)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)


def read_file_commands(path) -> Dict[str, str]:
    """Parse a GITHUB_STATE / GITHUB_OUTPUT file into a dict."""
    values: Dict[str, str] = {}
    lines = path.read_text(encoding="utf-8").split("\n")
    i = 0
    while i < len(lines):
        if "<<" not in lines[i]:
            i += 1
            continue
        key, delimiter = lines[i].split("<<", 1)
        end = lines.index(delimiter, i + 1)
        values[key] = "\n".join(lines[i + 1:end])
        i = end + 1
    return values


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_context() -> Callable[..., Context]:
    """Factory for contexts with the usual CI defaults."""
    def _make(**overrides) -> Context:
        fields = dict(
            compose_files=["docker-compose.ci.yml"],
            service_name="test-service",
            compose_command="up",
            compose_arguments=["--abort-on-container-exit"],
            run_command=[],
            build=True,
            build_args=[],
            registry_cache=None,
            push=False,
            post_command=["down --remove-orphans --volumes", "rm -f"],
            project_name="test-name",
        )
        fields.update(overrides)
        return Context(**fields)
    return _make


@pytest.fixture
def make_compose(reporter) -> Callable[[FakeRunner], Compose]:
    """Compose client over a fake runner, already resolved to docker-compose."""
    def _make(runner: FakeRunner) -> Compose:
        selector = ComposeToolSelector(runner, reporter)
        selector.use_legacy()
        return Compose(runner, selector, reporter)
    return _make


@pytest.fixture
def make_action_context(make_compose, reporter) -> Callable[[Context, FakeRunner], ActionContext]:
    def _make(context: Context, runner: FakeRunner) -> ActionContext:
        return ActionContext(context, make_compose(runner), reporter)
    return _make
