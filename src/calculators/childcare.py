"""Funded childcare hours and nursery cost per child-age cohort."""

from decimal import Decimal

from src.calculators.tax_data import DEFAULT_RATES, ChildcarePolicy
from src.models import CohortChildcare

_ZERO = Decimal("0")


def is_eligible(
    taxable_income: Decimal,
    policy: ChildcarePolicy = DEFAULT_RATES.childcare,
) -> bool:
    """Whether income is low enough for the income-gated free hours.

    The threshold itself is not eligible (£100,000 exactly loses the hours).
    """
    return taxable_income < policy.income_threshold


def free_hours_per_week(
    cohort: str,
    taxable_income: Decimal,
    policy: ChildcarePolicy = DEFAULT_RATES.childcare,
) -> Decimal:
    """Free hours a week for one child in the cohort."""
    entitlement = policy.entitlement(cohort)
    if is_eligible(taxable_income, policy):
        return max(entitlement.eligible_hours, entitlement.universal_hours)
    return entitlement.universal_hours


def resolve_childcare(
    cohort: str,
    children: int,
    taxable_income: Decimal,
    cost_per_hour: Decimal,
    hours_per_week: Decimal,
    policy: ChildcarePolicy = DEFAULT_RATES.childcare,
) -> CohortChildcare:
    """Resolve free/paid hours and annual nursery cost for a cohort.

    Paid hours are whatever the requested weekly hours exceed the free
    entitlement by, charged for each term-time week and each child.

    Args:
        cohort: "young" (9 months to 3 years) or "mid" (3 to 4 years).
        children: Number of children in the cohort.
        taxable_income: Income used for the eligibility test.
        cost_per_hour: Nursery hourly rate.
        hours_per_week: Requested nursery hours per child.
        policy: Childcare rules for the tax year.
    """
    children = max(children, 0)
    free = free_hours_per_week(cohort, taxable_income, policy)
    paid = max(_ZERO, max(hours_per_week, _ZERO) - free)
    annual_cost = paid * max(cost_per_hour, _ZERO) * policy.weeks_per_year * children

    return CohortChildcare(
        cohort=cohort,
        children=children,
        free_hours_per_week=free,
        paid_hours_per_week=paid,
        total_free_hours_per_week=free * children,
        annual_cost=annual_cost,
    )
