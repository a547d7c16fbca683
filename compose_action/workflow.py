"""GitHub Actions runner plumbing: inputs, state, outputs and workflow commands."""

import json
import os
import uuid
from pathlib import Path
from typing import Any, List

from .errors import InputError


def in_github_actions() -> bool:
    """True when running on a GitHub Actions runner."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def is_post() -> bool:
    """True in the post (cleanup) phase, i.e. once the main phase saved ``isPost``."""
    return bool(os.environ.get("STATE_isPost"))


def get_input(name: str, required: bool = False) -> str:
    """Read an action input from ``INPUT_<NAME>``, trimmed."""
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "")
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value.strip()


def get_multiline_input(name: str, required: bool = False) -> List[str]:
    """Read an input as a list of its non-blank, trimmed lines."""
    lines = [line.strip() for line in get_input(name, required=required).split("\n")]
    return [line for line in lines if line]


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    """Render a ``::command::message`` workflow command line."""
    return f"::{command}::{escape_data(message)}"


def _to_command_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _write_file_command(path: str, key: str, value: Any) -> None:
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    converted = _to_command_value(value)
    if delimiter in key or delimiter in converted:
        raise InputError(f"Unexpected input: name or value contains the delimiter {delimiter}")
    with Path(path).open("a", encoding="utf-8") as f:
        f.write(f"{key}<<{delimiter}\n{converted}\n{delimiter}\n")


def save_state(name: str, value: Any) -> None:
    """Persist a value for the post phase, where it appears as ``STATE_<name>``."""
    state_file = os.environ.get("GITHUB_STATE")
    if state_file:
        _write_file_command(state_file, name, value)
        return
    print(f"::save-state name={name}::{escape_data(_to_command_value(value))}")


def get_state(name: str) -> str:
    return os.environ.get(f"STATE_{name}", "")


def set_output(name: str, value: Any) -> None:
    """Publish a step output."""
    output_file = os.environ.get("GITHUB_OUTPUT")
    if output_file:
        _write_file_command(output_file, name, value)
        return
    print(f"::set-output name={name}::{escape_data(_to_command_value(value))}")
