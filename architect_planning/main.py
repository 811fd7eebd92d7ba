"""
Architectural Planning Adapter - FastAPI Application

HTTP entry point. Each request gets its own adapter writing to an
in-memory stream so the emitted text can be returned with the result.
"""

from __future__ import annotations
import io
import logging
import math
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from architect_planning import __version__
from architect_planning.engine import InvalidArgumentError
from architect_planning.models import (
    CostEstimate,
    ErrorResponse,
    EstimateRequest,
    PlanRequest,
    PlanResponse,
)
from architect_planning.service import (
    create_planning_service,
    get_config,
    get_estimator,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION SETUP
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Architectural Planning service starting...")
    logger.info(f"Default rate: {get_config().planning.default_rate} per sq.ft.")
    yield
    logger.info("Architectural Planning service shutting down...")


app = FastAPI(
    title="Architectural Planning",
    description="""
    ## Architectural plans with raw-material cost estimates

    - **POST /plans** returns a plan for a building together with a
      raw-material cost estimate at the configured rate
    - **POST /estimates** returns a stand-alone cost estimate
    """,
    version=__version__,
    lifespan=lifespan,
)


def _error_detail(error: str, message: str, output: str = "") -> dict:
    return ErrorResponse(
        error=error,
        detail=message,
        output=output.splitlines(),
    ).model_dump()


def _check_finite(estimate: CostEstimate, output: str = "") -> None:
    # JSON has no infinity; an overflowed product would be serialized as null
    if not math.isfinite(estimate.total_cost):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_error_detail(
                "Estimate out of range",
                f"Total cost for {estimate.area_sq_ft} sq.ft. at "
                f"{estimate.rate_per_sq_ft} is not a finite number",
                output,
            ),
        )


# =============================================================================
# API ENDPOINTS
# =============================================================================

@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Architectural Planning",
        "version": __version__,
        "status": "running",
        "endpoints": {
            "make_plan": "POST /plans",
            "estimate": "POST /estimates",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "default_rate": get_config().planning.default_rate,
    }


@app.post(
    "/plans",
    response_model=PlanResponse,
    tags=["Planning"],
    summary="Create a plan with a raw-material cost estimate",
)
async def make_plan(request: PlanRequest) -> PlanResponse:
    """
    Create an architectural plan and estimate its raw-material cost.

    On invalid area, or a total too large to represent, the response is
    400; its `output` holds the text emitted before the request failed.
    """
    buffer = io.StringIO()
    planner = create_planning_service(
        default_rate=get_config().planning.default_rate,
        stream=buffer,
    )

    try:
        result = planner.make_plan(request.building_name, request.area_sq_ft)
    except InvalidArgumentError as e:
        logger.warning(f"Plan for {request.building_name!r} rejected: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_error_detail("Invalid argument", e.message, buffer.getvalue()),
        )

    _check_finite(result.estimate, buffer.getvalue())
    return PlanResponse(
        plan=result.plan,
        estimate=result.estimate,
        output=buffer.getvalue().splitlines(),
    )


@app.post(
    "/estimates",
    response_model=CostEstimate,
    tags=["Planning"],
    summary="Estimate raw-material cost",
)
async def estimate(request: EstimateRequest) -> CostEstimate:
    """Estimate raw-material cost for an area at a given rate."""
    try:
        result = get_estimator().estimate_cost(request.area_sq_ft, request.rate_per_sq_ft)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_error_detail("Invalid argument", e.message),
        )
    _check_finite(result)
    return result


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc: Exception):
    """Global exception handler."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "architect_planning.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
