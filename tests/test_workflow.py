"""Tests for workflow inputs, state and outputs."""
import pytest

from compose_action import workflow
from compose_action.errors import InputError
from conftest import read_file_commands


def test_get_input_trims_and_normalizes_name(monkeypatch):
    monkeypatch.setenv("INPUT_MY_INPUT", "  value \n")

    assert workflow.get_input("my input") == "value"
    assert workflow.get_input("missing input") == ""


def test_get_input_required(monkeypatch):
    monkeypatch.delenv("INPUT_SERVICENAME", raising=False)

    with pytest.raises(InputError, match="serviceName"):
        workflow.get_input("serviceName", required=True)


def test_get_multiline_input_drops_blank_lines(monkeypatch):
    """
    Test a multi-line input with blank lines and padding.
    Expected: non-blank trimmed lines only.
    """
    monkeypatch.setenv("INPUT_COMPOSEFILE", "\n docker-compose.yml \n\n docker-compose.ci.yml\n")

    assert workflow.get_multiline_input("composeFile") == ["docker-compose.yml", "docker-compose.ci.yml"]


def test_format_command_escapes_message():
    assert workflow.format_command("warning", "50%\nnext\r") == "::warning::50%25%0Anext%0D"


def test_save_state_writes_state_file(monkeypatch, tmp_path):
    """
    Test saving state through GITHUB_STATE.
    Expected: strings verbatim, everything else as JSON.
    """
    state_file = tmp_path / "state"
    monkeypatch.setenv("GITHUB_STATE", str(state_file))

    workflow.save_state("projectName", "name")
    workflow.save_state("composeFiles", ["a.yml", "b.yml"])
    workflow.save_state("push", False)

    assert read_file_commands(state_file) == {
        "projectName": "name",
        "composeFiles": '["a.yml", "b.yml"]',
        "push": "false",
    }


def test_save_state_without_state_file(monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_STATE", raising=False)

    workflow.save_state("isPost", True)

    assert capsys.readouterr().out == "::save-state name=isPost::true\n"


def test_set_output_writes_output_file(monkeypatch, tmp_path):
    output_file = tmp_path / "output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    workflow.set_output("containerId", "abc123")

    assert read_file_commands(output_file) == {"containerId": "abc123"}


def test_get_state_and_is_post(monkeypatch):
    monkeypatch.delenv("STATE_isPost", raising=False)
    assert workflow.is_post() is False
    assert workflow.get_state("isPost") == ""

    monkeypatch.setenv("STATE_isPost", "true")
    assert workflow.is_post() is True
    assert workflow.get_state("isPost") == "true"


@pytest.mark.parametrize("value, expected", [("true", True), ("false", False), ("", False)])
def test_in_github_actions(monkeypatch, value, expected):
    monkeypatch.setenv("GITHUB_ACTIONS", value)

    assert workflow.in_github_actions() is expected
