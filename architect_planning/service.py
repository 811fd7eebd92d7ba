"""
Architectural Planning Adapter - Service Wiring

Builds the planner handed to clients. Architect and estimator are shared
between every planner built here since neither holds state.
"""

from __future__ import annotations
from typing import Optional, TextIO
import logging

from architect_planning.adapters import CostEstimationAdapter, MakingArchitecturalPlan
from architect_planning.engine import Architect, RawMaterialEstimator
from architect_planning.models import DEFAULT_RATE_PER_SQ_FT, PlanningConfig

logger = logging.getLogger(__name__)

_architect = Architect()
_estimator = RawMaterialEstimator()
_config: Optional[PlanningConfig] = None


def get_architect() -> Architect:
    """Get shared Architect instance."""
    return _architect


def get_estimator() -> RawMaterialEstimator:
    """Get shared estimator instance."""
    return _estimator


def get_config() -> PlanningConfig:
    """Get active configuration (defaults until configure() is called)."""
    global _config
    if _config is None:
        _config = PlanningConfig()
    return _config


def configure(config: Optional[PlanningConfig]) -> None:
    """Replace the active configuration. None restores the defaults."""
    global _config
    _config = config


def create_planning_service(
    default_rate: float = DEFAULT_RATE_PER_SQ_FT,
    stream: Optional[TextIO] = None,
) -> MakingArchitecturalPlan:
    """
    Factory function to create the planner clients talk to.

    Args:
        default_rate: Cost per sq.ft. for every estimate
        stream: Text stream for emitted output (sys.stdout if None)

    Returns:
        CostEstimationAdapter behind the MakingArchitecturalPlan interface
    """
    logger.debug(f"Creating planning service with rate {default_rate}")
    return CostEstimationAdapter(
        architect=get_architect(),
        estimator=get_estimator(),
        default_rate=default_rate,
        stream=stream,
    )


def create_plain_planner(stream: Optional[TextIO] = None) -> MakingArchitecturalPlan:
    """Planner without cost estimation: an Architect on its own stream."""
    return Architect(stream=stream)
