"""
Architectural Planning Adapter - Target Interface

Defines the interface that planning clients are written against.
Both the plain Architect and the cost estimation adapter implement it,
so a client can be handed either without knowing what is behind it.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO
import sys

from architect_planning.models import PlanningResult


class MakingArchitecturalPlan(ABC):
    """
    Abstract base class for anything that makes architectural plans.

    Implementations emit a human-readable description to their output
    stream and return the structured result.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the planner.

        Args:
            stream: Text stream for emitted output (sys.stdout if None)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so a redirected sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def make_plan(self, building_name: str, area_sq_ft: float) -> PlanningResult:
        """
        Create an architectural plan for a building and, if available,
        provide a rough estimate of raw-material cost.

        Args:
            building_name: Short name/label for the building
            area_sq_ft: Built-up area in square feet

        Returns:
            PlanningResult with the plan and optional estimate
        """
        pass

    def emit(self, lines: Iterable[str]) -> None:
        """Write lines to the output stream."""
        out = self.stream
        for line in lines:
            out.write(line + "\n")
        out.flush()
