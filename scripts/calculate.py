"""Print a take-home pay breakdown for the given figures.

Usage:
    python scripts/calculate.py --salary 50000 --employee-pension 5 --employer-pension 3
    python scripts/calculate.py --salary 95000 --nursery-rate 12 --nursery-hours 40 --young 1
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from src.api.app import resolve_rates
from src.calculators.take_home import NOTES, breakdown_items, compute
from src.models import TaxpayerInputs

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UK take-home pay calculator")
    parser.add_argument("--salary", type=Decimal, default=Decimal("0"), help="Annual salary (£)")
    parser.add_argument("--bonus", type=Decimal, default=Decimal("0"), help="Expected annual bonus (£)")
    parser.add_argument("--employee-pension", type=Decimal, default=Decimal("0"), help="Employee contribution %%")
    parser.add_argument("--employer-pension", type=Decimal, default=Decimal("0"), help="Employer contribution %%")
    parser.add_argument("--electric-car", type=Decimal, default=Decimal("0"), help="Electric car sacrifice (£/year)")
    parser.add_argument("--bike-to-work", type=Decimal, default=Decimal("0"), help="Bike to work sacrifice (£/year)")
    parser.add_argument("--nursery-rate", type=Decimal, default=Decimal("0"), help="Nursery cost per hour (£)")
    parser.add_argument("--nursery-hours", type=Decimal, default=Decimal("0"), help="Nursery hours per week")
    parser.add_argument("--young", type=int, default=0, help="Children aged 9 months to 3 years")
    parser.add_argument("--mid", type=int, default=0, help="Children aged 3 to 4 years")
    return parser


def main() -> None:
    """Parse arguments, run the calculation and print JSON."""
    args = build_parser().parse_args()
    inputs = TaxpayerInputs(
        salary=args.salary,
        bonus=args.bonus,
        employee_pension_percent=args.employee_pension,
        employer_pension_percent=args.employer_pension,
        electric_car_sacrifice=args.electric_car,
        bike_to_work_sacrifice=args.bike_to_work,
        nursery_cost_per_hour=args.nursery_rate,
        nursery_hours_per_week=args.nursery_hours,
        children_young=args.young,
        children_mid=args.mid,
    )

    rates = resolve_rates(settings)
    result = compute(inputs, rates)
    if result.pension_allowance_exceeded:
        logger.warning(
            "Total pension %s exceeds the %s annual allowance",
            result.total_pension,
            rates.pension_annual_allowance,
        )

    output = {
        "result": result.model_dump(mode="json"),
        "breakdown": [item.model_dump(mode="json") for item in breakdown_items(result)],
        "notes": NOTES,
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
