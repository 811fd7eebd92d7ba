"""Tests for the cost estimation adapter."""

import io
from unittest.mock import MagicMock

import pytest

from architect_planning.adapters import CostEstimationAdapter, MakingArchitecturalPlan
from architect_planning.engine import Architect, InvalidArgumentError, RawMaterialEstimator
from architect_planning.service import create_planning_service

from tests.test_architect import DEMO_PLAN_BLOCK

DEMO_COST_BLOCK = [
    "--- COST ESTIMATION (via Adapter) ---",
    "Estimated raw-material cost : 1800000.0",
    "(Using rate 1200.0 per sq.ft.)",
]


class TestMakePlan:
    """Tests for CostEstimationAdapter.make_plan."""

    def test_implements_interface(self, adapter):
        assert isinstance(adapter, MakingArchitecturalPlan)

    def test_demo_building(self, adapter, stream):
        result = adapter.make_plan("Residential Apartment Building", 1500.0)

        assert stream.getvalue().splitlines() == DEMO_PLAN_BLOCK + DEMO_COST_BLOCK
        assert result.plan.building_name == "Residential Apartment Building"
        assert result.plan.area_sq_ft == 1500.0
        assert result.estimate.total_cost == 1800000.0
        assert result.estimate.rate_per_sq_ft == 1200.0

    @pytest.mark.parametrize("area", [1.0, 250.5, 1500.0, 98765.4321])
    def test_total_uses_configured_rate(self, architect, estimator, area):
        adapter = CostEstimationAdapter(architect, estimator, 875.5, stream=io.StringIO())

        result = adapter.make_plan("Any", area)

        assert result.estimate.total_cost == area * 875.5
        assert result.estimate.rate_per_sq_ft == 875.5

    def test_plan_block_precedes_cost_block(self, adapter, stream):
        adapter.make_plan("Ordered", 100.0)

        lines = stream.getvalue().splitlines()
        assert lines.index("=== ARCHITECTURAL PLAN ===") < lines.index(
            "--- COST ESTIMATION (via Adapter) ---"
        )

    @pytest.mark.parametrize("area", [0.0, -1500.0])
    def test_invalid_area_fails_after_plan_is_emitted(self, adapter, stream, area):
        with pytest.raises(InvalidArgumentError):
            adapter.make_plan("Residential Apartment Building", area)

        output = stream.getvalue()
        assert output.startswith("=== ARCHITECTURAL PLAN ===")
        assert f"Built-up area   : {area} sq.ft." in output
        assert "COST ESTIMATION" not in output

    def test_non_positive_rate_fails_after_plan_is_emitted(self, architect, estimator, stream):
        adapter = CostEstimationAdapter(architect, estimator, 0.0, stream=stream)

        with pytest.raises(InvalidArgumentError):
            adapter.make_plan("Free Building", 1500.0)

        assert stream.getvalue().splitlines() == [
            line.replace("Residential Apartment Building", "Free Building")
            for line in DEMO_PLAN_BLOCK
        ]

    def test_repeated_calls_are_identical(self, adapter, stream):
        first = adapter.make_plan("Residential Apartment Building", 1500.0)
        first_output = stream.getvalue()
        second = adapter.make_plan("Residential Apartment Building", 1500.0)

        assert first == second
        assert stream.getvalue() == first_output * 2

    def test_failure_leaves_no_state_behind(self, adapter, stream):
        with pytest.raises(InvalidArgumentError):
            adapter.make_plan("Broken", 0.0)

        result = adapter.make_plan("Residential Apartment Building", 1500.0)

        assert result.estimate.total_cost == 1800000.0


class TestDelegation:
    """The adapter only reaches its collaborators in a fixed order."""

    def test_architect_then_estimator(self):
        calls = MagicMock()
        architect = Architect()
        estimator = RawMaterialEstimator()
        calls.produce_plan.side_effect = architect.produce_plan
        calls.estimate_cost.side_effect = estimator.estimate_cost

        adapter = CostEstimationAdapter(calls, calls, 1200.0, stream=io.StringIO())
        adapter.make_plan("Delegated", 10.0)

        assert [c[0] for c in calls.mock_calls] == ["produce_plan", "estimate_cost"]
        calls.produce_plan.assert_called_once_with("Delegated", 10.0)
        calls.estimate_cost.assert_called_once_with(10.0, 1200.0)

    def test_collaborators_can_be_shared(self, architect, estimator):
        cheap_stream, dear_stream = io.StringIO(), io.StringIO()
        cheap = CostEstimationAdapter(architect, estimator, 100.0, stream=cheap_stream)
        dear = CostEstimationAdapter(architect, estimator, 5000.0, stream=dear_stream)

        assert cheap.make_plan("A", 10.0).estimate.total_cost == 1000.0
        assert dear.make_plan("A", 10.0).estimate.total_cost == 50000.0
        assert "(Using rate 100.0 per sq.ft.)" in cheap_stream.getvalue()
        assert "(Using rate 5000.0 per sq.ft.)" in dear_stream.getvalue()


class TestCreatePlanningService:
    """Tests for the service factory."""

    def test_defaults_to_demo_rate(self):
        service = create_planning_service(stream=io.StringIO())

        assert isinstance(service, CostEstimationAdapter)
        assert service.default_rate == 1200.0

    def test_writes_to_stdout_by_default(self, capsys):
        create_planning_service().make_plan("Residential Apartment Building", 1500.0)

        assert capsys.readouterr().out.splitlines() == DEMO_PLAN_BLOCK + DEMO_COST_BLOCK
