"""Shared test fixtures."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router
from src.calculators.tax_data import DEFAULT_RATES
from src.models import TaxpayerInputs


@pytest.fixture
def make_inputs() -> Callable[..., TaxpayerInputs]:
    """Factory for TaxpayerInputs with everything zero unless given."""

    def _make(**overrides: Any) -> TaxpayerInputs:
        return TaxpayerInputs(**overrides)

    return _make


@pytest.fixture
def scenario_inputs() -> TaxpayerInputs:
    """£50k salary, 5% employee / 3% employer pension, no sacrifice or children."""
    return TaxpayerInputs(
        salary=Decimal("50000"),
        employee_pension_percent=Decimal("5"),
        employer_pension_percent=Decimal("3"),
    )


@pytest.fixture
def nursery_inputs() -> Callable[..., TaxpayerInputs]:
    """Factory for a £12/hour, 40 hours/week nursery with one child per cohort."""

    def _make(salary: str, **overrides: Any) -> TaxpayerInputs:
        fields: dict[str, Any] = {
            "salary": Decimal(salary),
            "nursery_cost_per_hour": Decimal("12"),
            "nursery_hours_per_week": Decimal("40"),
            "children_young": 1,
            "children_mid": 1,
        }
        fields.update(overrides)
        return TaxpayerInputs(**fields)

    return _make


@pytest.fixture
def app() -> FastAPI:
    """Create a test app with the router and 2024-25 tables but no lifespan."""
    test_app = FastAPI()
    test_app.include_router(router)
    test_app.state.rates = DEFAULT_RATES
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
