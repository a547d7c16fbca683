"""Base action class for the pipeline."""

from abc import ABC, abstractmethod
from typing import Optional

from ..context import ActionContext


class BaseAction(ABC):
    """Base class for all pipeline steps.

    Each step:
    1. Checks if it should run (should_run)
    2. Executes its logic (execute)
    3. Records results on the context
    """

    title: str = ""

    def should_run(self, ctx: ActionContext) -> bool:
        """Determine if this step should execute.

        Override this to conditionally skip steps based on the job inputs.

        Args:
            ctx: The pipeline context

        Returns:
            True if the step should execute, False to skip
        """
        return True

    @abstractmethod
    def execute(self, ctx: ActionContext) -> Optional[bool]:
        """Execute the step's main logic.

        Args:
            ctx: The pipeline context (read and modify as needed)

        Returns:
            - None or True: Continue pipeline
            - False: Stop pipeline execution
        """
        pass
