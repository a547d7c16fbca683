"""Run docker compose services as CI steps."""

__version__ = "0.1.0"
