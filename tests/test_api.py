"""Tests for the API endpoints."""

from decimal import Decimal

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.calculators.tax_data import DEFAULT_RATES


def _money(value: object) -> Decimal:
    return Decimal(str(value))


def test_health(client: TestClient) -> None:
    """GET /health returns ok status and the active tax year."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["tax_year"] == "2024-25"


def test_calculate_reference_scenario(client: TestClient) -> None:
    """POST /calculate returns the itemised result, chart items and notes."""
    response = client.post(
        "/calculate",
        json={"salary": 50000, "employee_pension_percent": 5, "employer_pension_percent": 3},
    )

    assert response.status_code == 200
    data = response.json()
    result = data["result"]
    assert _money(result["taxable_income"]) == Decimal("47500")
    assert _money(result["tax"]) == Decimal("6986")
    assert _money(result["national_insurance"]) == Decimal("4191.6")
    assert _money(result["take_home"]) == Decimal("36322.4")
    assert result["below_childcare_threshold"] is True
    assert len(result["tax_bands"]) == 2
    assert [item["name"] for item in data["breakdown"]][:3] == [
        "Earnings",
        "Taxable Income",
        "Take-Home",
    ]
    assert [_money(t) for t in data["reference_thresholds"]] == [
        Decimal("37700"),
        Decimal("60000"),
        Decimal("100000"),
        Decimal("125140"),
    ]
    assert "HMRC" in data["notes"]


def test_calculate_blank_body_is_all_zero(client: TestClient) -> None:
    response = client.post("/calculate", json={})
    assert response.status_code == 200
    assert _money(response.json()["result"]["take_home"]) == 0


def test_calculate_clamps_negative_values(client: TestClient) -> None:
    response = client.post("/calculate", json={"salary": -100, "children_young": -1})
    assert response.status_code == 200
    result = response.json()["result"]
    assert _money(result["gross_income"]) == 0
    assert result["childcare_young"]["children"] == 0


def test_calculate_childcare(client: TestClient) -> None:
    """£100k loses the income-gated hours for both cohorts."""
    response = client.post(
        "/calculate",
        json={
            "salary": 100000,
            "nursery_cost_per_hour": 12,
            "nursery_hours_per_week": 40,
            "children_young": 1,
            "children_mid": 1,
        },
    )
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["below_childcare_threshold"] is False
    assert _money(result["childcare_mid"]["free_hours_per_week"]) == 15
    assert _money(result["total_nursery_cost"]) == Decimal("29640")


def test_calculate_invalid_type(client: TestClient) -> None:
    """Non-numeric salary returns 422."""
    response = client.post("/calculate", json={"salary": "lots"})
    assert response.status_code == 422


def test_calculate_fractional_children(client: TestClient) -> None:
    response = client.post("/calculate", json={"children_young": 1.5})
    assert response.status_code == 422


def test_rates(client: TestClient) -> None:
    """GET /rates describes the active tables."""
    response = client.get("/rates")
    assert response.status_code == 200
    data = response.json()
    assert data["tax_year"] == "2024-25"
    assert len(data["income_tax"]) == 4
    assert data["income_tax"][-1]["upper"] is None
    assert data["national_insurance"][1]["rate"] == 0.12
    assert data["childcare"]["mid"]["universal_hours"] == 15.0
    assert data["pension_annual_allowance"] == 60000.0


def test_rates_for_unknown_year(client: TestClient) -> None:
    response = client.get("/rates/2099-00")
    assert response.status_code == 404
    assert "Unknown tax year" in response.json()["error"]


def test_rates_for_known_year(client: TestClient) -> None:
    response = client.get("/rates/2024-25")
    assert response.status_code == 200
    assert response.json()["personal_allowance"]["base"] == 12570.0


def test_create_app_lifespan_resolves_rates() -> None:
    """The real app resolves tables at startup."""
    with TestClient(create_app()) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["tax_year"] == "2024-25"


def test_reference_thresholds_follow_active_rates(app: FastAPI, client: TestClient) -> None:
    """Chart guide lines come from the tables the app was started with."""
    app.state.rates = DEFAULT_RATES._replace(pension_annual_allowance=Decimal("40000"))

    calculated = client.post("/calculate", json={"salary": 50000}).json()
    described = client.get("/rates").json()

    assert _money(calculated["reference_thresholds"][1]) == Decimal("40000")
    assert described["reference_thresholds"][1] == 40000.0
