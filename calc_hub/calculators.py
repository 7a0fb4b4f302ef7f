"""Calculator registry - validates raw forms, runs the pure calculation, logs and records metrics"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Type

from pydantic import BaseModel

from calc_hub.config import settings
from calc_hub.domain.dday import calculate_dday
from calc_hub.domain.discount import calculate_discount
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.health import calculate_bmi, calculate_calorie
from calc_hub.domain.loan import calculate_loan
from calc_hub.domain.models import (
    BMIInput,
    CalorieInput,
    DdayInput,
    DiscountInput,
    LoanInput,
    SavingsInput,
    SeveranceInput,
    WorldClockResult,
)
from calc_hub.domain.savings import calculate_savings
from calc_hub.domain.severance import calculate_severance
from calc_hub.domain.timezone import describe_difference, find_city, flight_arrival, offset_difference, time_in_city
from calc_hub.domain.units import convert
from calc_hub.forms.parsing import parse_form
from calc_hub.forms.schemas import (
    BMIForm,
    CalorieForm,
    ConvertForm,
    DdayForm,
    DiscountForm,
    LoanForm,
    SavingsForm,
    SeveranceForm,
    TimezoneForm,
)
from calc_hub.infrastructure.observability.logging import log_calculation
from calc_hub.infrastructure.observability.metrics import record_calculation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculator:
    """One registered calculator: its form schema and the computation behind it"""

    name: str
    form: Type[BaseModel]
    compute: Callable[[Any, Optional[datetime]], Any]
    log_fields: Callable[[Any], Dict[str, Any]] = lambda form: {}


def _loan(form: LoanForm, now: Optional[datetime]):
    loan = LoanInput(principal=form.principal, annual_rate_percent=form.annual_rate, term_months=form.months)
    return calculate_loan(loan, form.method)


def _savings(form: SavingsForm, now: Optional[datetime]):
    return calculate_savings(
        SavingsInput(
            periodic_deposit=form.monthly_deposit,
            num_periods=form.months,
            annual_rate_percent=form.annual_rate,
            method=form.interest_type,
        )
    )


def _severance(form: SeveranceForm, now: Optional[datetime]):
    return calculate_severance(
        SeveranceInput(monthly_wage=form.monthly_salary, service_years=form.years, service_months=form.months)
    )


def _bmi(form: BMIForm, now: Optional[datetime]):
    return calculate_bmi(BMIInput(height_cm=form.height, weight_kg=form.weight))


def _calorie(form: CalorieForm, now: Optional[datetime]):
    return calculate_calorie(
        CalorieInput(
            gender=form.gender,
            age=form.age,
            height_cm=form.height,
            weight_kg=form.weight,
            activity_level=form.activity_level,
        )
    )


def _discount(form: DiscountForm, now: Optional[datetime]):
    return calculate_discount(
        DiscountInput(
            original_price=form.original_price,
            discount1_percent=form.discount1,
            discount2_percent=form.discount2,
        )
    )


def _dday(form: DdayForm, now: Optional[datetime]):
    return calculate_dday(DdayInput(target=form.target_date), now=now)


def _world_clock(form: TimezoneForm, now: Optional[datetime]) -> WorldClockResult:
    city = find_city(form.city)
    reference = find_city(settings.reference_city)
    instant = now or datetime.now(timezone.utc)

    arrival = None
    if form.flight_hours or form.flight_minutes:
        departure = form.departure or instant
        arrival = flight_arrival(departure, form.flight_hours, form.flight_minutes, city)

    return WorldClockResult(
        city=city,
        local_time=time_in_city(city, instant),
        offset_hours=offset_difference(city, reference),
        difference=describe_difference(city, reference),
        arrival_time=arrival,
    )


def _convert(form: ConvertForm, now: Optional[datetime]):
    return convert(form.value, form.category, form.from_unit, form.to_unit)


CALCULATORS: Dict[str, Calculator] = {
    calc.name: calc
    for calc in [
        Calculator("loan", LoanForm, _loan, lambda f: {"method": f.method.value, "term_months": f.months}),
        Calculator("savings", SavingsForm, _savings, lambda f: {"method": f.interest_type.value, "periods": f.months}),
        Calculator("severance", SeveranceForm, _severance, lambda f: {"service_years": f.years}),
        Calculator("bmi", BMIForm, _bmi),
        Calculator("calorie", CalorieForm, _calorie, lambda f: {"activity_level": f.activity_level.value}),
        Calculator("discount", DiscountForm, _discount, lambda f: {"stacked": f.discount2 is not None}),
        Calculator("dday", DdayForm, _dday),
        Calculator("timezone", TimezoneForm, _world_clock, lambda f: {"city": f.city}),
        Calculator("convert", ConvertForm, _convert, lambda f: {"category": f.category}),
    ]
}


def get_calculator(name: str) -> Calculator:
    try:
        return CALCULATORS[name]
    except KeyError:
        raise InvalidInputError(f"calculator: unknown calculator {name!r}", field="calculator") from None


def run_calculator(name: str, raw: Mapping[str, Any], now: Optional[datetime] = None) -> Any:
    """
    Main entry point for front ends: validate the raw form and compute.

    Flow:
    1. Validate raw (string) input into the calculator's form model
    2. Run the pure calculation
    3. Record metrics and a structured log line

    Raises:
        InvalidInputError: input rejected; nothing was computed
    """
    calculator = get_calculator(name)
    start_time = time.perf_counter()

    try:
        form = parse_form(calculator.form, raw)
        result = calculator.compute(form, now)
    except InvalidInputError as e:
        record_calculation(name, ok=False)
        logger.warning(f"Invalid input: {e}", extra={"calculator": name, "fields": [err["field"] for err in e.errors]})
        raise

    duration = time.perf_counter() - start_time
    record_calculation(name, ok=True, duration_seconds=duration)
    log_calculation(name, duration * 1000, **calculator.log_fields(form))

    return result
