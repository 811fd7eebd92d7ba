"""
Architectural Planning Adapter - Domain Models

Defines the Pydantic models for plans, cost estimates, configuration and
API payloads. Value records are frozen: once produced they are never mutated.
"""

from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_RATE_PER_SQ_FT = 1200.0
DEMO_BUILDING_NAME = "Residential Apartment Building"
DEMO_BUILDING_AREA = 1500.0


# =============================================================================
# PLANNING RECORDS
# =============================================================================

class BuildingDescriptor(BaseModel):
    """Building to be planned. Area is not range-checked here."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Short name/label for the building")
    area_sq_ft: float = Field(..., description="Built-up area in square feet")


class ArchitecturalPlan(BaseModel):
    """Plan produced by the architect for a single building."""
    model_config = ConfigDict(frozen=True)

    building_name: str
    area_sq_ft: float
    floor_layout: str
    structure_type: str
    finishing_level: str

    def describe(self) -> List[str]:
        """Human-readable plan block."""
        return [
            "=== ARCHITECTURAL PLAN ===",
            f"Building name   : {self.building_name}",
            f"Built-up area   : {self.area_sq_ft} sq.ft.",
            f"Floor layout    : {self.floor_layout}",
            f"Structure type  : {self.structure_type}",
            f"Finishing level : {self.finishing_level}",
        ]


class CostEstimate(BaseModel):
    """Raw-material cost estimate, tagged with the rate used."""
    model_config = ConfigDict(frozen=True)

    area_sq_ft: float
    rate_per_sq_ft: float
    total_cost: float

    def describe(self) -> List[str]:
        """Human-readable cost block."""
        return [
            "--- COST ESTIMATION (via Adapter) ---",
            f"Estimated raw-material cost : {self.total_cost}",
            f"(Using rate {self.rate_per_sq_ft} per sq.ft.)",
        ]


class PlanningResult(BaseModel):
    """
    Outcome of a planning request.

    The estimate is only present when the request went through the
    cost estimation adapter.
    """
    model_config = ConfigDict(frozen=True)

    plan: ArchitecturalPlan
    estimate: Optional[CostEstimate] = None


# =============================================================================
# CONFIGURATION (YAML -> Domain Model)
# =============================================================================

class PlanningSettings(BaseModel):
    """Settings for the cost estimation adapter."""
    default_rate: float = Field(
        default=DEFAULT_RATE_PER_SQ_FT,
        description="Raw-material cost per sq.ft. used by the adapter",
    )


class PlanningConfig(BaseModel):
    """
    Complete planning configuration.

    Parsed from YAML. When no buildings are listed the demo building is
    planned.
    """
    planning: PlanningSettings = Field(default_factory=PlanningSettings)
    buildings: List[BuildingDescriptor] = Field(
        default_factory=lambda: [
            BuildingDescriptor(name=DEMO_BUILDING_NAME, area_sq_ft=DEMO_BUILDING_AREA)
        ]
    )


# =============================================================================
# API MODELS
# =============================================================================

class PlanRequest(BaseModel):
    """Request to create a plan with a cost estimate."""
    building_name: str = Field(..., description="Short name/label for the building")
    area_sq_ft: float = Field(..., description="Built-up area in square feet")


class PlanResponse(BaseModel):
    """Plan, estimate and the text emitted while producing them."""
    plan: ArchitecturalPlan
    estimate: Optional[CostEstimate] = None
    output: List[str] = Field(default_factory=list)


class EstimateRequest(BaseModel):
    """Request for a stand-alone cost estimate."""
    area_sq_ft: float
    rate_per_sq_ft: float


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    output: List[str] = Field(default_factory=list)
