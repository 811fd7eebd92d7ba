"""
Architectural Planning Adapter - Configuration Parser

Parses and validates YAML configuration files.
Transforms raw YAML into a validated PlanningConfig.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import logging
import math
import yaml
from pydantic import ValidationError

from architect_planning.models import (
    BuildingDescriptor,
    PlanningConfig,
    PlanningSettings,
)

logger = logging.getLogger(__name__)


class ParserError(Exception):
    """Exception raised for parser errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)


class ConfigParser:
    """
    Parser for planning configuration files.

    Responsibilities:
    - Parse YAML content
    - Validate structure
    - Transform to domain model (PlanningConfig)
    - Report clear validation errors

    Building areas are deliberately left unchecked: the estimator is the
    single place where area is validated.
    """

    KNOWN_SECTIONS = ["planning", "buildings"]

    def __init__(self):
        """Initialize parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, yaml_content: str) -> PlanningConfig:
        """
        Parse YAML content into PlanningConfig.

        An empty document yields the default configuration.

        Args:
            yaml_content: YAML configuration string

        Returns:
            Validated PlanningConfig

        Raises:
            ParserError: If parsing or validation fails
        """
        raw_config = self._parse_yaml(yaml_content)

        validation_errors = self._validate_structure(raw_config)
        if validation_errors:
            raise ParserError(
                "Configuration validation failed",
                errors=validation_errors,
            )

        try:
            config = self._transform_to_model(raw_config)
        except ValidationError as e:
            errors = [f"{err['loc']}: {err['msg']}" for err in e.errors()]
            raise ParserError("Model validation failed", errors=errors)

        semantic_errors = self._validate_semantics(config)
        if semantic_errors:
            raise ParserError(
                "Semantic validation failed",
                errors=semantic_errors,
            )

        self.logger.info(
            f"Parsed configuration: rate {config.planning.default_rate}, "
            f"{len(config.buildings)} building(s)"
        )
        return config

    def _parse_yaml(self, yaml_content: str) -> Dict[str, Any]:
        """
        Parse YAML string to dictionary.

        Raises:
            ParserError: If YAML syntax is invalid
        """
        try:
            config = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ParserError(f"YAML syntax error: {str(e)}")
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ParserError("Configuration must be a YAML mapping/dictionary")
        return config

    def _validate_structure(self, config: Dict[str, Any]) -> List[str]:
        errors = []

        for section in config:
            if section not in self.KNOWN_SECTIONS:
                errors.append(f"Unknown section: '{section}'")

        if "planning" in config and not isinstance(config["planning"], dict):
            errors.append("Section 'planning' must be a mapping")

        if "buildings" in config:
            buildings = config["buildings"]
            if not isinstance(buildings, list):
                errors.append("buildings must be a list")
            else:
                for i, building in enumerate(buildings):
                    if not isinstance(building, dict):
                        errors.append(f"buildings[{i}] must be a mapping")
                        continue
                    if "name" not in building:
                        errors.append(f"buildings[{i}].name is required")
                    if "area_sq_ft" not in building:
                        errors.append(f"buildings[{i}].area_sq_ft is required")

        return errors

    def _transform_to_model(self, config: Dict[str, Any]) -> PlanningConfig:
        fields: Dict[str, Any] = {
            "planning": PlanningSettings(**(config.get("planning") or {})),
        }
        # Absent section keeps the demo building; an empty list is a semantic error
        if "buildings" in config:
            fields["buildings"] = [BuildingDescriptor(**b) for b in config["buildings"]]
        return PlanningConfig(**fields)

    def _validate_semantics(self, config: PlanningConfig) -> List[str]:
        errors = []

        rate = config.planning.default_rate
        if math.isnan(rate) or rate <= 0:
            errors.append(f"planning.default_rate must be positive, got {rate}")

        if not config.buildings:
            errors.append("buildings must not be empty")

        return errors

    def parse_file(self, file_path: str) -> PlanningConfig:
        """
        Parse configuration from file.

        Raises:
            ParserError: If file cannot be read or parsed
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                yaml_content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParserError(f"Cannot read file: {str(e)}")

        return self.parse(yaml_content)

    def validate_only(self, yaml_content: str) -> Tuple[bool, List[str]]:
        """
        Validate configuration without returning model.

        Returns:
            Tuple of (is_valid, error_list)
        """
        try:
            self.parse(yaml_content)
            return True, []
        except ParserError as e:
            return False, e.errors or [e.message]


# Singleton instance
parser = ConfigParser()


def get_parser() -> ConfigParser:
    """Get parser instance."""
    return parser
