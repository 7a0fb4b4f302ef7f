"""Installment savings accumulation with simple or monthly-compound interest"""

from decimal import Decimal
from typing import List

from calc_hub.domain.models import InterestMethod, SavingsInput, SavingsResult, SavingsRow
from calc_hub.domain.money import monthly_rate, round_won, to_decimal


def simple_interest_schedule(savings: SavingsInput) -> SavingsResult:
    """
    Simple interest: every deposit earns r per period until maturity.

    The deposit made in period k stays in the account for n - k + 1 periods,
    so it earns deposit * r * (n - k + 1). Each row reports the interest
    attributed to that period's deposit; the balance is the running total of
    deposits plus interest.
    """
    savings.validate()
    deposit = to_decimal(savings.periodic_deposit)
    rate = monthly_rate(savings.annual_rate_percent)
    n = savings.num_periods

    total_deposited = Decimal(0)
    total_interest = Decimal(0)
    schedule: List[SavingsRow] = []

    for period in range(1, n + 1):
        total_deposited += deposit
        interest = deposit * rate * (n - period + 1)
        total_interest += interest

        schedule.append(
            SavingsRow(
                period_index=period,
                deposit=round_won(deposit),
                interest_accrued=round_won(interest),
                balance=round_won(total_deposited + total_interest),
            )
        )

    return SavingsResult(
        method=InterestMethod.SIMPLE,
        total_deposited=round_won(total_deposited),
        total_interest=round_won(total_interest),
        final_balance=round_won(total_deposited + total_interest),
        schedule=schedule,
    )


def compound_interest_schedule(savings: SavingsInput) -> SavingsResult:
    """
    Monthly compounding: balance_k = (balance_{k-1} + deposit) * (1 + r).

    Deposits are made at the start of the period, the same timing the simple
    mode uses (deposit k earns n - k + 1 periods), so for equal inputs the
    compound balance is never below the simple one.
    This deliberately differs from the end-of-period recurrence
    balance_k = balance_{k-1} * (1 + r) + deposit, which would leave the compound
    balance below the simple one.

    Each row reports the interest earned to date (balance minus deposits so
    far). Intermediate balances keep full precision; only reported figures
    are rounded.
    """
    savings.validate()
    deposit = to_decimal(savings.periodic_deposit)
    rate = monthly_rate(savings.annual_rate_percent)

    balance = Decimal(0)
    total_deposited = Decimal(0)
    schedule: List[SavingsRow] = []

    for period in range(1, savings.num_periods + 1):
        balance = (balance + deposit) * (1 + rate)
        total_deposited += deposit

        schedule.append(
            SavingsRow(
                period_index=period,
                deposit=round_won(deposit),
                interest_accrued=round_won(balance - total_deposited),
                balance=round_won(balance),
            )
        )

    return SavingsResult(
        method=InterestMethod.COMPOUND,
        total_deposited=round_won(total_deposited),
        total_interest=round_won(balance - total_deposited),
        final_balance=round_won(balance),
        schedule=schedule,
    )


def calculate_savings(savings: SavingsInput) -> SavingsResult:
    """Main entry point: dispatch on the interest method"""
    if InterestMethod(savings.method) is InterestMethod.COMPOUND:
        return compound_interest_schedule(savings)
    return simple_interest_schedule(savings)
