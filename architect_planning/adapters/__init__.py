"""
Architectural Planning Adapter - Adapters Package

Provides the planning interface clients depend on and the adapter that
puts cost estimation behind it.
"""

from architect_planning.adapters.base import MakingArchitecturalPlan
from architect_planning.adapters.cost_estimation import CostEstimationAdapter

__all__ = ["MakingArchitecturalPlan", "CostEstimationAdapter"]
