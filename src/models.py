"""Pydantic models for calculator inputs and results."""

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

_MONEY_FIELDS = (
    "salary",
    "bonus",
    "electric_car_sacrifice",
    "bike_to_work_sacrifice",
    "nursery_cost_per_hour",
    "nursery_hours_per_week",
)
_PERCENT_FIELDS = ("employee_pension_percent", "employer_pension_percent")
_COUNT_FIELDS = ("children_young", "children_mid")


# --- Inputs ---


class TaxpayerInputs(BaseModel):
    """Annual figures entered by the user.

    Blank values count as zero. Out-of-range values are clamped rather than
    rejected: money and counts to >= 0, percentages to 0-100.
    """

    model_config = ConfigDict(frozen=True)

    salary: Decimal = _ZERO
    bonus: Decimal = _ZERO
    employee_pension_percent: Decimal = _ZERO
    employer_pension_percent: Decimal = _ZERO
    electric_car_sacrifice: Decimal = _ZERO
    bike_to_work_sacrifice: Decimal = _ZERO
    nursery_cost_per_hour: Decimal = _ZERO
    nursery_hours_per_week: Decimal = _ZERO
    children_young: int = 0  # 9 months to 3 years
    children_mid: int = 0  # 3 to 4 years

    @field_validator(*_MONEY_FIELDS, *_PERCENT_FIELDS, *_COUNT_FIELDS, mode="before")
    @classmethod
    def _blank_is_zero(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator(*_MONEY_FIELDS)
    @classmethod
    def _clamp_money(cls, value: Decimal) -> Decimal:
        return max(value, _ZERO)

    @field_validator(*_PERCENT_FIELDS)
    @classmethod
    def _clamp_percent(cls, value: Decimal) -> Decimal:
        return min(max(value, _ZERO), _HUNDRED)

    @field_validator(*_COUNT_FIELDS)
    @classmethod
    def _clamp_count(cls, value: int) -> int:
        return max(value, 0)


# --- Calculator outputs ---


class BandAmount(BaseModel):
    """Income falling in one band of a schedule and the liability on it.

    lower/upper are the effective bounds after any allowance taper, so they
    can differ from the nominal schedule.
    """

    model_config = ConfigDict(frozen=True)

    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    amount: Decimal
    liability: Decimal


class CohortChildcare(BaseModel):
    """Funded and paid nursery hours for one child-age cohort."""

    model_config = ConfigDict(frozen=True)

    cohort: Literal["young", "mid"]
    children: int
    free_hours_per_week: Decimal  # per child
    paid_hours_per_week: Decimal  # per child
    total_free_hours_per_week: Decimal  # across all children in the cohort
    annual_cost: Decimal


class DeductionResult(BaseModel):
    """Itemised annual take-home calculation."""

    model_config = ConfigDict(frozen=True)

    tax_year: str
    gross_income: Decimal
    taxable_income: Decimal

    employee_pension: Decimal
    employer_pension: Decimal
    total_pension: Decimal

    electric_car_sacrifice: Decimal
    bike_to_work_sacrifice: Decimal
    total_salary_sacrifice: Decimal

    personal_allowance: Decimal
    tax: Decimal
    national_insurance: Decimal
    tax_bands: tuple[BandAmount, ...] = ()
    ni_bands: tuple[BandAmount, ...] = ()
    effective_rate: Decimal = Field(description="(tax + NI) as a percentage of gross income")

    childcare_young: CohortChildcare
    childcare_mid: CohortChildcare
    total_nursery_cost: Decimal
    below_childcare_threshold: bool

    pension_allowance_exceeded: bool

    take_home: Decimal


class BreakdownItem(BaseModel):
    """One labelled bar of the salary breakdown chart."""

    name: str
    value: Decimal
    kind: Literal["earnings", "taxable", "takehome", "pension", "tax", "ni", "sacrifice", "nursery"]
    employee_pension: Decimal | None = None
    employer_pension: Decimal | None = None
    over_limit: bool = False


class CalculationResponse(BaseModel):
    """Response from the /calculate endpoint."""

    result: DeductionResult
    breakdown: list[BreakdownItem]
    reference_thresholds: list[Decimal]
    notes: str
