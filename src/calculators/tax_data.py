"""UK tax constants: income tax and NI bands, personal allowance, childcare.

Hardcoded Python constants for 2024-25 (rest of UK rates). The same tables
can be supplied as YAML under config/ via tax_year_from_config(), so an
alternate year is injected as data rather than code.
"""

from decimal import Decimal
from typing import Any, NamedTuple

from config import load_yaml_config


class TaxBand(NamedTuple):
    """A single band of a progressive schedule."""

    lower: Decimal  # inclusive
    upper: Decimal | None  # exclusive; None = no cap
    rate: Decimal


class PersonalAllowance(NamedTuple):
    """Personal allowance and its high-income taper."""

    base: Decimal
    taper_threshold: Decimal
    # £1 of allowance lost for every £2 over the threshold
    taper_ratio: Decimal = Decimal("2")


class CohortEntitlement(NamedTuple):
    """Free childcare hours per week for one age cohort."""

    eligible_hours: Decimal  # below the income threshold
    universal_hours: Decimal  # regardless of income


class ChildcarePolicy(NamedTuple):
    """Funded childcare rules for a tax year."""

    income_threshold: Decimal  # eligible strictly below this
    weeks_per_year: Decimal
    young: CohortEntitlement  # 9 months to 3 years
    mid: CohortEntitlement  # 3 to 4 years

    def entitlement(self, cohort: str) -> CohortEntitlement:
        """Look up a cohort's entitlement by name ("young" or "mid")."""
        if cohort not in COHORTS:
            raise KeyError(f"Unknown childcare cohort: {cohort}. Available: {', '.join(COHORTS)}")
        return getattr(self, cohort)


class TaxYearData(NamedTuple):
    """All parameters for a single UK tax year."""

    label: str
    income_tax: tuple[TaxBand, ...]
    national_insurance: tuple[TaxBand, ...]
    personal_allowance: PersonalAllowance
    childcare: ChildcarePolicy
    pension_annual_allowance: Decimal


COHORTS: tuple[str, ...] = ("young", "mid")

_INCOME_TAX_2024 = (
    TaxBand(Decimal("0"), Decimal("12570"), Decimal("0")),  # personal allowance
    TaxBand(Decimal("12570"), Decimal("50270"), Decimal("0.20")),  # basic
    TaxBand(Decimal("50270"), Decimal("125140"), Decimal("0.40")),  # higher
    TaxBand(Decimal("125140"), None, Decimal("0.45")),  # additional
)

# Employee Class 1 at the 12% main rate and 2% above the upper earnings limit
_NATIONAL_INSURANCE_2024 = (
    TaxBand(Decimal("0"), Decimal("12570"), Decimal("0")),
    TaxBand(Decimal("12570"), Decimal("50270"), Decimal("0.12")),
    TaxBand(Decimal("50270"), None, Decimal("0.02")),
)

TAX_YEARS: dict[str, TaxYearData] = {
    "2024-25": TaxYearData(
        label="2024-25",
        income_tax=_INCOME_TAX_2024,
        national_insurance=_NATIONAL_INSURANCE_2024,
        personal_allowance=PersonalAllowance(
            base=Decimal("12570"),
            taper_threshold=Decimal("100000"),
        ),
        childcare=ChildcarePolicy(
            income_threshold=Decimal("100000"),
            weeks_per_year=Decimal("38"),  # term-time only
            young=CohortEntitlement(Decimal("30"), Decimal("0")),
            mid=CohortEntitlement(Decimal("30"), Decimal("15")),
        ),
        pension_annual_allowance=Decimal("60000"),
    ),
}

DEFAULT_TAX_YEAR = "2024-25"
DEFAULT_RATES = TAX_YEARS[DEFAULT_TAX_YEAR]


def get_tax_year(label: str) -> TaxYearData:
    """Return the built-in tables for a tax year label, e.g. "2024-25"."""
    if label not in TAX_YEARS:
        raise KeyError(f"Unknown tax year: {label}. Available: {', '.join(sorted(TAX_YEARS))}")
    return TAX_YEARS[label]


def _decimal(value: Any) -> Decimal:
    # str() first so YAML floats like 0.2 don't pick up binary noise
    return Decimal(str(value))


def _bands(rows: list[dict[str, Any]]) -> tuple[TaxBand, ...]:
    return tuple(
        TaxBand(
            lower=_decimal(row["lower"]),
            upper=_decimal(row["upper"]) if row.get("upper") is not None else None,
            rate=_decimal(row["rate"]),
        )
        for row in rows
    )


def _entitlement(row: dict[str, Any]) -> CohortEntitlement:
    return CohortEntitlement(
        eligible_hours=_decimal(row["eligible_hours"]),
        universal_hours=_decimal(row.get("universal_hours", 0)),
    )


def tax_year_from_config(filename: str) -> TaxYearData:
    """Build a TaxYearData from a YAML file in the config/ directory.

    Args:
        filename: File name relative to config/, e.g. "rates_2024_25.yaml".

    Returns:
        The parsed tables. Bands are validated as contiguous, ascending
        and open-ended; a malformed table raises ValueError.
    """
    raw = load_yaml_config(filename)["tax_year"]
    allowance = raw["personal_allowance"]
    childcare = raw["childcare"]

    data = TaxYearData(
        label=str(raw["label"]),
        income_tax=_bands(raw["income_tax"]),
        national_insurance=_bands(raw["national_insurance"]),
        personal_allowance=PersonalAllowance(
            base=_decimal(allowance["base"]),
            taper_threshold=_decimal(allowance["taper_threshold"]),
            taper_ratio=_decimal(allowance.get("taper_ratio", 2)),
        ),
        childcare=ChildcarePolicy(
            income_threshold=_decimal(childcare["income_threshold"]),
            weeks_per_year=_decimal(childcare["weeks_per_year"]),
            young=_entitlement(childcare["young"]),
            mid=_entitlement(childcare["mid"]),
        ),
        pension_annual_allowance=_decimal(raw["pension_annual_allowance"]),
    )
    validate_schedule(data.income_tax)
    validate_schedule(data.national_insurance)
    return data


def validate_schedule(schedule: tuple[TaxBand, ...]) -> None:
    """Check a schedule starts at zero, is contiguous and ends unbounded."""
    if not schedule:
        raise ValueError("Schedule must contain at least one band.")
    if schedule[0].lower != 0:
        raise ValueError("First band must start at 0.")
    for current, following in zip(schedule, schedule[1:]):
        if current.upper is None or current.upper != following.lower:
            raise ValueError(
                f"Bands must be contiguous: {current.lower}-{current.upper} "
                f"then {following.lower}-{following.upper}."
            )
        if following.lower <= current.lower:
            raise ValueError("Bands must be sorted ascending.")
    if schedule[-1].upper is not None:
        raise ValueError("Last band must be unbounded.")


def reference_thresholds(rates: TaxYearData) -> tuple[Decimal, ...]:
    """Guide lines for the salary chart, taken from the given tables.

    Basic rate band width, pension annual allowance, start of the allowance
    taper and the income at which the allowance is fully withdrawn.
    """
    basic_band_width = next(
        (band.upper - band.lower for band in rates.income_tax if band.rate > 0 and band.upper is not None),
        Decimal("0"),
    )
    allowance = rates.personal_allowance
    thresholds = [
        basic_band_width,
        rates.pension_annual_allowance,
        allowance.taper_threshold,
        allowance.taper_threshold + allowance.base * allowance.taper_ratio,
    ]
    return tuple(thresholds)
