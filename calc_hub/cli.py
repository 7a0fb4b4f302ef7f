"""
Command-line front end for the calculators.

Usage:
    calc-hub loan --principal 100,000,000 --annual-rate 4.5 --months 360 --method equal_payment
    calc-hub savings --monthly-deposit 100000 --months 12 --annual-rate 3.5 --interest-type compound
    calc-hub severance --monthly-salary 3000000 --years 5 --months 0
    calc-hub bmi --height 170 --weight 65
    calc-hub calorie --gender female --age 30 --height 165 --weight 55 --activity-level 1.375
    calc-hub discount --original-price 100000 --discount1 20 --discount2 10
    calc-hub dday --target-date 2026-12-25 [--live --ticks 10]
    calc-hub timezone --city 뉴욕 [--flight-hours 14 --flight-minutes 5]
    calc-hub convert --category length --value 1 --from-unit mile --to-unit km

Every value is passed through the same form validation a UI would use;
invalid input exits with status 2 and nothing is computed.
"""

import argparse
import json
import sys
import time
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from pydantic_core import to_jsonable_python

from calc_hub.calculators import CALCULATORS, run_calculator
from calc_hub.config import settings
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.models import (
    BMIResult,
    CalorieResult,
    ConversionResult,
    DdayResult,
    DiscountResult,
    LoanResult,
    SavingsResult,
    SeveranceResult,
    WorldClockResult,
)
from calc_hub.infrastructure.observability.logging import setup_logging
from calc_hub.infrastructure.observability.metrics import export_textfile

EXIT_OK = 0
EXIT_INVALID = 2


def form_fields(calculator: str) -> List[str]:
    return list(CALCULATORS[calculator].form.model_fields)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calc-hub", description="Everyday finance, health and life calculators")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")

    subparsers = parser.add_subparsers(dest="calculator", required=True)
    for name in CALCULATORS:
        sub = subparsers.add_parser(name, help=f"{name} calculator")
        # One flag per form field: --annual-rate -> annual_rate
        for field in form_fields(name):
            # Raw strings on purpose: validation happens in the form layer
            sub.add_argument(f"--{field.replace('_', '-')}", dest=field, default=None)
        if name == "dday":
            sub.add_argument("--live", action="store_true", help="refresh the countdown until --ticks runs out")
            sub.add_argument("--ticks", type=int, default=10, help="number of live refreshes")

    return parser


def _won(amount: Decimal) -> str:
    return f"{amount:,.0f}원"


def _format_loan(result: LoanResult) -> List[str]:
    lines = [
        f"상환 방식: {result.method.value}",
        f"월 상환액: {_won(result.periodic_payment)}",
        f"총 상환액: {_won(result.total_payment)}",
        f"총 이자: {_won(result.total_interest)}",
        "",
        f"{'회차':>4} {'원금':>14} {'이자':>12} {'상환액':>14} {'잔액':>16}",
    ]
    for row in result.schedule:
        lines.append(
            f"{row.period_index:>4} {row.principal_portion:>14,.0f} {row.interest_portion:>12,.0f} "
            f"{row.payment_total:>14,.0f} {row.remaining_balance:>16,.0f}"
        )
    return lines


def _format_savings(result: SavingsResult) -> List[str]:
    lines = [
        f"이자 방식: {result.method.value}",
        f"총 납입액: {_won(result.total_deposited)}",
        f"총 이자: {_won(result.total_interest)}",
        f"만기 수령액: {_won(result.final_balance)}",
        "",
        f"{'회차':>4} {'납입액':>12} {'이자':>12} {'잔액':>16}",
    ]
    for row in result.schedule:
        lines.append(
            f"{row.period_index:>4} {row.deposit:>12,.0f} {row.interest_accrued:>12,.0f} {row.balance:>16,.0f}"
        )
    return lines


def _format_severance(result: SeveranceResult) -> List[str]:
    return [
        f"근속일수: {result.total_service_days}일",
        f"퇴직금: {_won(result.gross_severance)}",
        f"근속연수공제: {_won(result.service_deduction)}",
        f"과세표준: {_won(result.tax_base)}",
        f"소득세: {_won(result.national_income_tax)}",
        f"지방소득세: {_won(result.local_income_tax)}",
        f"실수령액: {_won(result.net_amount)}",
    ]


def _format_bmi(result: BMIResult) -> List[str]:
    return [f"BMI: {result.bmi:.2f}", f"판정: {result.category}"]


def _format_calorie(result: CalorieResult) -> List[str]:
    return [
        f"기초대사량: {result.bmr:,.0f} kcal",
        f"활동대사량: {result.tdee:,.0f} kcal",
        f"권장 칼로리: {result.recommended_calorie:,.0f} kcal/일",
        f"다이어트: {result.diet_calorie:,.0f} kcal/일",
        f"체중 증가: {result.gain_calorie:,.0f} kcal/일",
    ]


def _format_discount(result: DiscountResult) -> List[str]:
    lines = [f"{step.step}. {step.description}: {_won(step.price)} (-{_won(step.discount)})" for step in result.steps]
    lines += [
        f"최종 가격: {_won(result.final_price)}",
        f"총 할인: {_won(result.total_discount)} ({result.total_discount_rate}%)",
    ]
    return lines


def _format_dday(result: DdayResult) -> List[str]:
    remaining = "경과" if result.is_past else "남음"
    return [
        result.label,
        f"{result.days}일 {result.hours:02d}시간 {result.minutes:02d}분 {result.seconds:02d}초 {remaining}",
    ]


def _format_world_clock(result: WorldClockResult) -> List[str]:
    lines = [
        f"{result.city.name} ({result.city.country}, {result.city.tz_name})",
        f"현재 시각: {result.local_time:%Y-%m-%d %H:%M:%S}",
        result.difference,
    ]
    if result.arrival_time is not None:
        lines.append(f"도착 시각 (현지): {result.arrival_time:%Y-%m-%d %H:%M:%S}")
    return lines


def _format_conversion(result: ConversionResult) -> List[str]:
    return [f"{result.value:g} {result.from_unit} = {result.converted:.10g} {result.to_unit}"]


FORMATTERS: Dict[type, Callable[[Any], List[str]]] = {
    LoanResult: _format_loan,
    SavingsResult: _format_savings,
    SeveranceResult: _format_severance,
    BMIResult: _format_bmi,
    CalorieResult: _format_calorie,
    DiscountResult: _format_discount,
    DdayResult: _format_dday,
    WorldClockResult: _format_world_clock,
    ConversionResult: _format_conversion,
}


def render(result: Any, as_json: bool = False) -> str:
    if as_json:
        payload = to_jsonable_python(result)
        if isinstance(result, DdayResult):
            payload["label"] = result.label
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return "\n".join(FORMATTERS[type(result)](result))


def iter_countdown(
    raw: Dict[str, Any],
    ticks: int,
    interval: float,
    sleep: Optional[Callable[[float], None]] = None,
    clock: Callable[[], Optional[datetime]] = lambda: None,
) -> Iterator[DdayResult]:
    """Re-run the D-Day calculation every ``interval`` seconds, ``ticks`` times"""
    sleep = sleep or time.sleep
    for tick in range(ticks):
        if tick:
            sleep(interval)
        yield run_calculator("dday", raw, now=clock())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_json)

    raw = {field: getattr(args, field) for field in form_fields(args.calculator)}

    try:
        if args.calculator == "dday" and args.live:
            for result in iter_countdown(raw, args.ticks, settings.dday_refresh_seconds):
                print(render(result, args.json), flush=True)
        else:
            print(render(run_calculator(args.calculator, raw), args.json))
    except InvalidInputError as e:
        for err in e.errors:
            print(f"입력 오류 - {err['field']}: {err['message']}", file=sys.stderr)
        return EXIT_INVALID
    finally:
        if settings.metrics_textfile:
            export_textfile(settings.metrics_textfile)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
