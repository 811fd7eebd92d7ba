"""Test configuration and fixtures."""

import io

import pytest
from fastapi.testclient import TestClient

from architect_planning.adapters import CostEstimationAdapter
from architect_planning.engine import Architect, ConfigParser, RawMaterialEstimator
from architect_planning.service import configure


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    configure(None)
    yield
    configure(None)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def architect():
    return Architect()


@pytest.fixture
def estimator():
    return RawMaterialEstimator()


@pytest.fixture
def adapter(architect, estimator, stream):
    """Adapter at the demo rate, writing to an in-memory stream."""
    return CostEstimationAdapter(architect, estimator, 1200.0, stream=stream)


@pytest.fixture
def config_parser():
    return ConfigParser()


@pytest.fixture
def client():
    from architect_planning.main import app

    with TestClient(app) as test_client:
        yield test_client
