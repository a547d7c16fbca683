"""Core infrastructure for compose invocation and step execution."""

from .compose import Compose, ComposeToolSelector, build_compose_args
from .context import COMPOSE_COMMANDS, ActionContext, Context
from .pipeline import run_pipeline
from .reporter import NullReporter, Reporter

__all__ = [
    "COMPOSE_COMMANDS",
    "ActionContext",
    "Compose",
    "ComposeToolSelector",
    "Context",
    "NullReporter",
    "Reporter",
    "build_compose_args",
    "run_pipeline",
]
