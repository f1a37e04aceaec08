"""Take-home pay calculator: composites pension, sacrifice, tax, NI and childcare."""

import logging
from decimal import Decimal

from src.calculators.allowance import personal_allowance
from src.calculators.brackets import band_breakdown, calculate_banded_liability
from src.calculators.childcare import is_eligible, resolve_childcare
from src.calculators.tax_data import DEFAULT_RATES, TaxYearData
from src.models import BreakdownItem, DeductionResult, TaxpayerInputs

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

NOTES = (
    "Approximate figures for rest-of-UK taxpayers, not HMRC-accurate. "
    "Employee pension is treated as a salary-sacrifice style deduction, so it "
    "reduces both income tax and National Insurance. Employer pension is "
    "shown for the annual allowance check only. Scottish rates, student "
    "loans and the High Income Child Benefit Charge are not modelled."
)

# Items always drawn on the chart, even at zero
_ALWAYS_SHOWN = frozenset({"Earnings", "Taxable Income", "Take-Home"})


def compute(
    inputs: TaxpayerInputs,
    rates: TaxYearData = DEFAULT_RATES,
) -> DeductionResult:
    """Calculate annual take-home pay with an itemised breakdown.

    Steps run in a fixed order: taxable income is settled before tax, NI
    and childcare eligibility, which all use that same figure.

    Args:
        inputs: The taxpayer's annual figures (already clamped to range).
        rates: Tables for the tax year; defaults to 2024-25.

    Returns:
        A frozen DeductionResult.
    """
    gross_income = inputs.salary + inputs.bonus
    total_salary_sacrifice = inputs.electric_car_sacrifice + inputs.bike_to_work_sacrifice

    employee_pension = gross_income * inputs.employee_pension_percent / _HUNDRED
    employer_pension = gross_income * inputs.employer_pension_percent / _HUNDRED
    total_pension = employee_pension + employer_pension

    taxable_income = gross_income - employee_pension - total_salary_sacrifice

    allowance = personal_allowance(taxable_income, rates.personal_allowance)
    tax_bands = band_breakdown(rates.income_tax, taxable_income, allowance)
    ni_bands = band_breakdown(rates.national_insurance, taxable_income)
    tax = calculate_banded_liability(rates.income_tax, taxable_income, allowance)
    national_insurance = calculate_banded_liability(rates.national_insurance, taxable_income)

    young = resolve_childcare(
        "young",
        inputs.children_young,
        taxable_income,
        inputs.nursery_cost_per_hour,
        inputs.nursery_hours_per_week,
        rates.childcare,
    )
    mid = resolve_childcare(
        "mid",
        inputs.children_mid,
        taxable_income,
        inputs.nursery_cost_per_hour,
        inputs.nursery_hours_per_week,
        rates.childcare,
    )
    total_nursery_cost = young.annual_cost + mid.annual_cost
    eligible = is_eligible(taxable_income, rates.childcare)

    take_home = (
        gross_income
        - employee_pension
        - tax
        - national_insurance
        - total_salary_sacrifice
        - total_nursery_cost
    )

    effective_rate = (
        (tax + national_insurance) / gross_income * _HUNDRED if gross_income > 0 else _ZERO
    )

    logger.debug(
        "Take-home %s from gross %s (taxable %s, tax %s, NI %s, nursery %s)",
        take_home,
        gross_income,
        taxable_income,
        tax,
        national_insurance,
        total_nursery_cost,
    )

    return DeductionResult(
        tax_year=rates.label,
        gross_income=gross_income,
        taxable_income=taxable_income,
        employee_pension=employee_pension,
        employer_pension=employer_pension,
        total_pension=total_pension,
        electric_car_sacrifice=inputs.electric_car_sacrifice,
        bike_to_work_sacrifice=inputs.bike_to_work_sacrifice,
        total_salary_sacrifice=total_salary_sacrifice,
        personal_allowance=allowance,
        tax=tax,
        national_insurance=national_insurance,
        tax_bands=tuple(tax_bands),
        ni_bands=tuple(ni_bands),
        effective_rate=round(effective_rate, 2),
        childcare_young=young,
        childcare_mid=mid,
        total_nursery_cost=total_nursery_cost,
        below_childcare_threshold=eligible,
        pension_allowance_exceeded=total_pension > rates.pension_annual_allowance,
        take_home=take_home,
    )


def breakdown_items(result: DeductionResult) -> list[BreakdownItem]:
    """Labelled amounts for the salary breakdown chart.

    Zero-value items are dropped, apart from earnings, taxable income and
    take-home which are always present.
    """
    pension_over = result.pension_allowance_exceeded
    items = [
        BreakdownItem(name="Earnings", value=result.gross_income, kind="earnings"),
        BreakdownItem(
            name="Taxable Income",
            value=result.taxable_income,
            kind="taxable",
            over_limit=not result.below_childcare_threshold,
        ),
        BreakdownItem(name="Take-Home", value=result.take_home, kind="takehome"),
        BreakdownItem(
            name="Total Pension",
            value=result.total_pension,
            kind="pension",
            employee_pension=result.employee_pension,
            employer_pension=result.employer_pension,
            over_limit=pension_over,
        ),
        BreakdownItem(name="Tax", value=result.tax, kind="tax"),
        BreakdownItem(name="National Insurance", value=result.national_insurance, kind="ni"),
        BreakdownItem(name="Electric Car", value=result.electric_car_sacrifice, kind="sacrifice"),
        BreakdownItem(name="Bike to Work", value=result.bike_to_work_sacrifice, kind="sacrifice"),
        BreakdownItem(name="Nursery Costs", value=result.total_nursery_cost, kind="nursery"),
    ]
    return [item for item in items if item.value > 0 or item.name in _ALWAYS_SHOWN]
