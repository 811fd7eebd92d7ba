"""
Architectural Planning Adapter - Raw Material Estimator

Estimates raw-material cost from built-up area and a cost-per-sq.ft. rate.
This is the existing functionality the Architect has no access to.
"""

from __future__ import annotations
import logging

from architect_planning.models import CostEstimate

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when area or rate is not strictly positive."""

    def __init__(self, message: str, area_sq_ft: float, rate_per_sq_ft: float):
        self.message = message
        self.area_sq_ft = area_sq_ft
        self.rate_per_sq_ft = rate_per_sq_ft
        super().__init__(self.message)


class RawMaterialEstimator:
    """Stateless cost estimator: total = area * rate."""

    def estimate(self, area_sq_ft: float, rate_per_sq_ft: float) -> float:
        """
        Estimate the total raw-material cost.

        Args:
            area_sq_ft: Built-up area
            rate_per_sq_ft: Cost per square foot of raw materials

        Returns:
            Estimated total raw-material cost

        Raises:
            InvalidArgumentError: If area or rate is not strictly positive
        """
        # Written as a negation so NaN is rejected too.
        if not (area_sq_ft > 0 and rate_per_sq_ft > 0):
            raise InvalidArgumentError(
                "Area and cost per sq.ft. must be positive values",
                area_sq_ft=area_sq_ft,
                rate_per_sq_ft=rate_per_sq_ft,
            )
        return area_sq_ft * rate_per_sq_ft

    def estimate_cost(self, area_sq_ft: float, rate_per_sq_ft: float) -> CostEstimate:
        """Same as estimate(), returned as a record tagged with the rate."""
        total = self.estimate(area_sq_ft, rate_per_sq_ft)
        logger.debug(f"Estimated {total} for {area_sq_ft} sq.ft. at {rate_per_sq_ft}")
        return CostEstimate(
            area_sq_ft=area_sq_ft,
            rate_per_sq_ft=rate_per_sq_ft,
            total_cost=total,
        )
