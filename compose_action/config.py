"""Configuration defaults and environment overrides."""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import find_dotenv, load_dotenv


class Defaults:
    class compose:
        legacy_command = "docker-compose"
        plugin_command = "docker compose"
        command = "up"
        arguments = "--abort-on-container-exit"
    class post:
        commands = ("down --remove-orphans --volumes", "rm -f")
    class tools:
        yq = "yq"
        find = "find"

defaults = Defaults


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    """Tool names and switches, overridable through the environment."""

    legacy_command: str = Defaults.compose.legacy_command
    plugin_command: str = Defaults.compose.plugin_command
    yq_command: str = Defaults.tools.yq
    find_command: str = Defaults.tools.find
    post_commands: Tuple[str, ...] = Defaults.post.commands
    debug: bool = False

    @classmethod
    def load(cls) -> "Config":
        """Build a Config from ``COMPOSE_ACTION_*`` variables (and a local .env)."""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            legacy_command=os.getenv("COMPOSE_ACTION_LEGACY_COMMAND", Defaults.compose.legacy_command),
            plugin_command=os.getenv("COMPOSE_ACTION_PLUGIN_COMMAND", Defaults.compose.plugin_command),
            yq_command=os.getenv("COMPOSE_ACTION_YQ", Defaults.tools.yq),
            find_command=os.getenv("COMPOSE_ACTION_FIND", Defaults.tools.find),
            debug=_env_flag("COMPOSE_ACTION_DEBUG") or os.getenv("RUNNER_DEBUG") == "1",
        )
