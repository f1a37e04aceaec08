"""API routes for the UK take-home pay calculator."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.calculators.tax_data import TaxBand, TaxYearData, get_tax_year, reference_thresholds
from src.calculators.take_home import NOTES, breakdown_items, compute
from src.models import CalculationResponse, TaxpayerInputs

logger = logging.getLogger(__name__)

router = APIRouter()


def _active_rates(request: Request) -> TaxYearData:
    return request.app.state.rates


def _describe_rates(rates: TaxYearData) -> dict[str, Any]:
    def bands(schedule: tuple[TaxBand, ...]) -> list[dict[str, Any]]:
        return [
            {
                "lower": float(band.lower),
                "upper": float(band.upper) if band.upper is not None else None,
                "rate": float(band.rate),
            }
            for band in schedule
        ]

    childcare = rates.childcare
    return {
        "tax_year": rates.label,
        "income_tax": bands(rates.income_tax),
        "national_insurance": bands(rates.national_insurance),
        "personal_allowance": {
            "base": float(rates.personal_allowance.base),
            "taper_threshold": float(rates.personal_allowance.taper_threshold),
        },
        "childcare": {
            "income_threshold": float(childcare.income_threshold),
            "weeks_per_year": float(childcare.weeks_per_year),
            "young": {
                "eligible_hours": float(childcare.young.eligible_hours),
                "universal_hours": float(childcare.young.universal_hours),
            },
            "mid": {
                "eligible_hours": float(childcare.mid.eligible_hours),
                "universal_hours": float(childcare.mid.universal_hours),
            },
        },
        "pension_annual_allowance": float(rates.pension_annual_allowance),
        "reference_thresholds": [float(t) for t in reference_thresholds(rates)],
    }


@router.get("/health")
async def health(request: Request) -> dict:  # type: ignore[type-arg]
    """Health check endpoint reporting the active tax year."""
    return {"status": "ok", "tax_year": _active_rates(request).label}


@router.post("/calculate", response_model=CalculationResponse)
def calculate(body: TaxpayerInputs, request: Request) -> CalculationResponse:
    """Calculate annual take-home pay for the submitted figures."""
    rates = _active_rates(request)
    logger.info(
        "Calculating take-home: gross=%s children=%d/%d year=%s",
        body.salary + body.bonus,
        body.children_young,
        body.children_mid,
        rates.label,
    )
    result = compute(body, rates)
    return CalculationResponse(
        result=result,
        breakdown=breakdown_items(result),
        reference_thresholds=list(reference_thresholds(rates)),
        notes=NOTES,
    )


@router.get("/rates")
async def rates(request: Request) -> dict:  # type: ignore[type-arg]
    """Describe the tables currently used for calculations."""
    return _describe_rates(_active_rates(request))


@router.get("/rates/{tax_year}")
async def rates_for_year(tax_year: str) -> JSONResponse:
    """Describe the built-in tables for a specific tax year."""
    try:
        data = get_tax_year(tax_year)
    except KeyError as exc:
        return JSONResponse({"error": exc.args[0]}, status_code=404)
    return JSONResponse(_describe_rates(data))
