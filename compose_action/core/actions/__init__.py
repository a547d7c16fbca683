"""Steps of the main phase pipeline."""

from .base import BaseAction
from .images import BuildImages, PullImages, RewriteRegistry
from .service import InspectContainer, RunPrimaryCommand, primary_args

__all__ = [
    "BaseAction",
    "RewriteRegistry",
    "PullImages",
    "BuildImages",
    "RunPrimaryCommand",
    "InspectContainer",
    "primary_args",
]
