"""
Architectural Planning Adapter - Cost Estimation Adapter

Lets a client use the MakingArchitecturalPlan interface to both create an
architectural plan (via Architect) and get a rough raw-material cost
estimate (via RawMaterialEstimator). This is the class clients interact
with instead of dealing with the estimator directly.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional, TextIO
import logging

from architect_planning.adapters.base import MakingArchitecturalPlan
from architect_planning.models import PlanningResult

if TYPE_CHECKING:
    from architect_planning.engine.architect import Architect
    from architect_planning.engine.estimator import RawMaterialEstimator

logger = logging.getLogger(__name__)


class CostEstimationAdapter(MakingArchitecturalPlan):
    """
    Adapter combining the Architect and the RawMaterialEstimator.

    The plan is always emitted before the cost is computed. If the
    estimator rejects the input, InvalidArgumentError propagates to the
    caller with the plan block already written and no cost block.
    """

    def __init__(
        self,
        architect: Architect,
        estimator: RawMaterialEstimator,
        default_rate: float,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize the adapter.

        Args:
            architect: Plan provider (may be shared, it is stateless)
            estimator: Cost estimator (may be shared, it is stateless)
            default_rate: Cost per sq.ft. used for every estimate
            stream: Text stream for emitted output (sys.stdout if None)
        """
        super().__init__(stream)
        self._architect = architect
        self._estimator = estimator
        self._default_rate = default_rate

    @property
    def default_rate(self) -> float:
        return self._default_rate

    def make_plan(self, building_name: str, area_sq_ft: float) -> PlanningResult:
        # Plan first: delegate to the existing Architect and emit it as is
        plan = self._architect.produce_plan(building_name, area_sq_ft)
        self.emit(plan.describe())

        estimate = self._estimator.estimate_cost(area_sq_ft, self._default_rate)
        self.emit(estimate.describe())

        logger.info(
            f"Planned {building_name!r}: {area_sq_ft} sq.ft. at "
            f"{self._default_rate} -> {estimate.total_cost}"
        )
        return PlanningResult(plan=plan, estimate=estimate)
