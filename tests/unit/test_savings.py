"""Unit tests for savings accumulation"""

import pytest
from decimal import Decimal
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.models import InterestMethod, SavingsInput
from calc_hub.domain.savings import calculate_savings, compound_interest_schedule, simple_interest_schedule


def _savings(method: InterestMethod, deposit=100_000, periods=12, rate=12) -> SavingsInput:
    return SavingsInput(
        periodic_deposit=Decimal(deposit),
        num_periods=periods,
        annual_rate_percent=Decimal(rate),
        method=method,
    )


def test_simple_interest_totals():
    """100,000 a month for 12 months at 12%: 1,000 * (12 + 11 + ... + 1) interest"""
    result = simple_interest_schedule(_savings(InterestMethod.SIMPLE))

    assert result.total_deposited == Decimal(1_200_000)
    assert result.total_interest == Decimal(78_000)
    assert result.final_balance == Decimal(1_278_000)


def test_simple_interest_rows():
    result = simple_interest_schedule(_savings(InterestMethod.SIMPLE))

    first, last = result.schedule[0], result.schedule[-1]
    assert first.interest_accrued == Decimal(12_000)  # first deposit earns 12 months
    assert first.balance == Decimal(112_000)
    assert last.interest_accrued == Decimal(1_000)  # last deposit earns 1 month
    assert last.balance == result.final_balance


def test_compound_interest_totals():
    """Deposits compound monthly from the month they are made"""
    result = compound_interest_schedule(_savings(InterestMethod.COMPOUND))

    assert result.total_deposited == Decimal(1_200_000)
    assert result.final_balance == Decimal(1_280_933)
    assert result.total_interest == Decimal(80_933)
    assert result.schedule[0].interest_accrued == Decimal(1_000)
    assert result.schedule[0].balance == Decimal(101_000)


def test_compound_exceeds_simple():
    simple = calculate_savings(_savings(InterestMethod.SIMPLE))
    compound = calculate_savings(_savings(InterestMethod.COMPOUND))

    assert compound.final_balance > simple.final_balance
    assert compound.total_deposited == simple.total_deposited


def test_compound_interest_is_cumulative():
    result = compound_interest_schedule(_savings(InterestMethod.COMPOUND))

    for row, deposits in zip(result.schedule, range(100_000, 1_300_000, 100_000)):
        assert abs(row.balance - deposits - row.interest_accrued) <= 1
    interests = [row.interest_accrued for row in result.schedule]
    assert interests == sorted(interests)


@pytest.mark.parametrize("method", list(InterestMethod))
def test_zero_rate_earns_nothing(method: InterestMethod):
    result = calculate_savings(_savings(method, rate=0))

    assert result.total_interest == 0
    assert result.final_balance == Decimal(1_200_000)


@pytest.mark.parametrize("method", list(InterestMethod))
def test_schedule_length_and_method(method: InterestMethod):
    result = calculate_savings(_savings(method, periods=36, rate="3.5"))

    assert result.method is method
    assert len(result.schedule) == 36
    assert result.schedule[-1].balance == result.final_balance


def test_zero_periods_rejected():
    with pytest.raises(InvalidInputError):
        calculate_savings(_savings(InterestMethod.SIMPLE, periods=0))
