"""Personal allowance taper for high earners."""

from decimal import Decimal

from src.calculators.tax_data import DEFAULT_RATES, PersonalAllowance


def personal_allowance(
    taxable_income: Decimal,
    allowance: PersonalAllowance = DEFAULT_RATES.personal_allowance,
) -> Decimal:
    """Effective personal allowance for a taxable income.

    The base allowance is reduced by £1 for every £2 of income above the
    taper threshold, reaching zero at threshold + 2 * base (£125,140 for
    2024-25). It never goes negative.
    """
    if taxable_income <= allowance.taper_threshold:
        return allowance.base

    reduction = min(
        allowance.base,
        (taxable_income - allowance.taper_threshold) / allowance.taper_ratio,
    )
    return allowance.base - reduction
