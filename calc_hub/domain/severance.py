"""Severance pay and retirement income tax"""

from decimal import Decimal
from typing import List, Tuple

from calc_hub.domain.models import SeveranceInput, SeveranceResult
from calc_hub.domain.money import round_won, to_decimal

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30  # calendar approximation, not exact day counting

LOCAL_TAX_RATE = Decimal("0.1")

# Service-years deduction tiers: (upper bound in years, base amount, per-year amount above floor)
DEDUCTION_TIERS: List[Tuple[Decimal, Decimal, Decimal]] = [
    (Decimal(5), Decimal(0), Decimal(300_000)),
    (Decimal(10), Decimal(1_500_000), Decimal(500_000)),
    (Decimal(20), Decimal(4_000_000), Decimal(700_000)),
]
DEDUCTION_TOP_TIER = (Decimal(11_000_000), Decimal(1_000_000))

# Progressive tax brackets: (upper bound of taxable amount, rate). Last bracket is unbounded.
TAX_BRACKETS: List[Tuple[Decimal, Decimal]] = [
    (Decimal(12_000_000), Decimal("0.06")),
    (Decimal(46_000_000), Decimal("0.15")),
    (Decimal(88_000_000), Decimal("0.24")),
    (Decimal(150_000_000), Decimal("0.35")),
]
TOP_TAX_RATE = Decimal("0.38")


def total_service_days(service_years: int, service_months: int) -> int:
    """years * 365 + months * 30 (simplified statutory day count)"""
    return service_years * DAYS_PER_YEAR + service_months * DAYS_PER_MONTH


def service_years_deduction(service_years: Decimal) -> Decimal:
    """
    Piecewise-linear deduction for years of service.

    Tiers:
    - up to 5 years:   300,000 per year
    - 5 to 10 years:   1,500,000 + 500,000 per year above 5
    - 10 to 20 years:  4,000,000 + 700,000 per year above 10
    - over 20 years:   11,000,000 + 1,000,000 per year above 20

    Each upper bound is inclusive: exactly 5 years is 5 * 300,000.
    """
    floor = Decimal(0)
    for upper, base, per_year in DEDUCTION_TIERS:
        if service_years <= upper:
            return base + (service_years - floor) * per_year
        floor = upper

    base, per_year = DEDUCTION_TOP_TIER
    return base + (service_years - floor) * per_year


def progressive_income_tax(tax_base: Decimal) -> Decimal:
    """
    Standard progressive-bracket tax.

    Every bracket taxes only the slice of the base that falls inside it, which
    reproduces the usual "base + rate * excess over floor" table (720,000 at
    12M, 5,820,000 at 46M, 15,900,000 at 88M, 37,600,000 at 150M).
    A zero or negative base is taxed at zero.
    """
    if tax_base <= 0:
        return Decimal(0)

    tax = Decimal(0)
    floor = Decimal(0)
    for upper, rate in TAX_BRACKETS:
        if tax_base <= upper:
            return tax + (tax_base - floor) * rate
        tax += (upper - floor) * rate
        floor = upper

    return tax + (tax_base - floor) * TOP_TAX_RATE


def calculate_severance(severance: SeveranceInput) -> SeveranceResult:
    """
    Main entry point: gross severance, deductions, taxes and net payout.

    gross = monthly_wage * 30 * (service_days / 365)

    Taxes are computed on max(gross - deduction, 0). Reported amounts are
    rounded half-up to the won, and net is derived from the rounded figures
    so gross - income tax - local tax == net exactly.
    """
    severance.validate()
    wage = to_decimal(severance.monthly_wage)

    days = total_service_days(severance.service_years, severance.service_months)
    years = Decimal(days) / DAYS_PER_YEAR

    gross = wage * 30 * years
    deduction = service_years_deduction(years)
    tax_base = max(gross - deduction, Decimal(0))

    income_tax = round_won(progressive_income_tax(tax_base))
    local_tax = round_won(income_tax * LOCAL_TAX_RATE)
    gross_rounded = round_won(gross)

    return SeveranceResult(
        total_service_days=days,
        service_years=years,
        gross_severance=gross_rounded,
        service_deduction=round_won(deduction),
        tax_base=round_won(tax_base),
        national_income_tax=income_tax,
        local_income_tax=local_tax,
        net_amount=gross_rounded - income_tax - local_tax,
    )
