"""Progressive band calculator, shared by income tax and National Insurance."""

from collections.abc import Iterator
from decimal import Decimal

from src.calculators.tax_data import TaxBand
from src.models import BandAmount

_ZERO = Decimal("0")


def _effective_bounds(
    schedule: tuple[TaxBand, ...],
    allowance: Decimal | None,
) -> Iterator[tuple[TaxBand, Decimal, Decimal | None]]:
    """Yield each band with its effective (lower, upper) bounds.

    Without an allowance these are the schedule's own bounds. With one, the
    lowest band ends at the allowance (capped at its own width, so unused
    allowance does not carry upwards) and the next band keeps its width,
    moving down by the same amount. Bands above that keep their schedule
    upper bounds.
    """
    shift = _ZERO
    first_upper = schedule[0].upper if schedule else None
    if allowance is not None and first_upper is not None:
        shift = first_upper - min(first_upper, max(allowance, _ZERO))

    lower = _ZERO
    for index, band in enumerate(schedule):
        upper = band.upper
        if upper is not None and index < 2:
            upper -= shift
        yield band, lower, upper
        if upper is None:
            break
        lower = upper


def band_breakdown(
    schedule: tuple[TaxBand, ...],
    income: Decimal,
    allowance: Decimal | None = None,
) -> list[BandAmount]:
    """Split income across a schedule's bands, lowest first.

    Bands are half-open [lower, upper): income exactly on a boundary sits
    wholly in the lower band. Negative income is treated as zero.

    Args:
        schedule: Contiguous, ascending bands; the last one unbounded.
        income: Annual income to allocate.
        allowance: Optional tapered personal allowance, which sets the top
            of the lowest band. Only pass this for the income tax schedule.

    Returns:
        One BandAmount per band that received income, with effective bounds.
    """
    remaining = max(income, _ZERO)
    breakdown: list[BandAmount] = []

    for band, lower, upper in _effective_bounds(schedule, allowance):
        if remaining <= 0:
            break

        amount = remaining if upper is None else min(remaining, upper - lower)
        if amount > 0:
            breakdown.append(
                BandAmount(
                    lower=lower,
                    upper=upper,
                    rate=band.rate,
                    amount=amount,
                    liability=amount * band.rate,
                )
            )
        remaining -= amount

    return breakdown


def calculate_banded_liability(
    schedule: tuple[TaxBand, ...],
    income: Decimal,
    allowance: Decimal | None = None,
) -> Decimal:
    """Total liability on income under a progressive schedule."""
    return sum(
        (entry.liability for entry in band_breakdown(schedule, income, allowance)),
        _ZERO,
    )
