from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ComposeError:
    """Failure of the main run.

    ``container_id`` is whatever could be recovered after the failure, so the
    caller can still inspect or collect logs from the container.
    """

    message: str
    container_id: Optional[str] = None


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    container_id: Optional[str] = None
    error: Optional[ComposeError] = None


@dataclass(frozen=True)
class CleanupResult:
    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "\n".join(self.errors)


class Action:
    name: str = "action"

    def run(self, ctx):
        raise NotImplementedError


__all__ = ["Action", "ActionResult", "CleanupResult", "ComposeError"]
