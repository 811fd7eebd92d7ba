"""
Architectural Planning Adapter - Engine Package

Existing components the adapter composes, plus configuration loading:
- Architect: Produces architectural plans
- RawMaterialEstimator: Computes raw-material cost from area and rate
- Parser: Validates and parses YAML configuration
"""

from architect_planning.engine.architect import Architect
from architect_planning.engine.estimator import InvalidArgumentError, RawMaterialEstimator
from architect_planning.engine.parser import ConfigParser, ParserError, get_parser

__all__ = [
    "Architect",
    "RawMaterialEstimator",
    "InvalidArgumentError",
    "ConfigParser",
    "ParserError",
    "get_parser",
]
