"""
Architectural Planning Adapter - Architect

Existing component that knows how to create architectural plans,
but does not know how to estimate raw-material costs.
"""

from __future__ import annotations
import logging

from architect_planning.adapters.base import MakingArchitecturalPlan
from architect_planning.models import ArchitecturalPlan, PlanningResult

logger = logging.getLogger(__name__)


class Architect(MakingArchitecturalPlan):
    """
    Produces fixed-structure plans.

    Layout, structure type and finishing level are the same for every
    building. The area is taken as given; only the cost estimator checks it.
    """

    FLOOR_LAYOUT = "2BHK x 4 units per floor"
    STRUCTURE_TYPE = "RCC framed structure"
    FINISHING_LEVEL = "Standard residential spec"

    def produce_plan(self, building_name: str, area_sq_ft: float) -> ArchitecturalPlan:
        """
        Produce the plan for a building without emitting it.

        Args:
            building_name: Short name/label for the building
            area_sq_ft: Built-up area in square feet

        Returns:
            ArchitecturalPlan for the building
        """
        logger.debug(f"Producing plan for {building_name!r} ({area_sq_ft} sq.ft.)")
        return ArchitecturalPlan(
            building_name=building_name,
            area_sq_ft=area_sq_ft,
            floor_layout=self.FLOOR_LAYOUT,
            structure_type=self.STRUCTURE_TYPE,
            finishing_level=self.FINISHING_LEVEL,
        )

    def make_plan(self, building_name: str, area_sq_ft: float) -> PlanningResult:
        """Emit the plan block. No estimate is available here."""
        plan = self.produce_plan(building_name, area_sq_ft)
        self.emit(plan.describe())
        return PlanningResult(plan=plan)
