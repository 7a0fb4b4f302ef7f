"""Loan repayment schedules: equal payment, equal principal and bullet repayment"""

from decimal import Decimal
from typing import Callable, Dict, List

from calc_hub.domain.models import AmortizationRow, LoanInput, LoanResult, RepaymentMethod
from calc_hub.domain.money import monthly_rate, round_won, to_decimal


def annuity_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """
    Fixed monthly payment for an equal-payment (annuity) loan, rounded half-up.

    P = principal * r * (1+r)^n / ((1+r)^n - 1)

    A zero rate has no interest to spread, so the payment is principal / n.
    The same holds when the rate is so small that (1+r)^n rounds to 1.
    """
    if rate == 0:
        return round_won(principal / term_months)

    compound = (1 + rate) ** term_months
    if compound == 1:
        return round_won(principal / term_months)
    return round_won(principal * rate * compound / (compound - 1))


def _summarize(method: RepaymentMethod, periodic_payment: Decimal, schedule: List[AmortizationRow]) -> LoanResult:
    total_interest = sum((row.interest_portion for row in schedule), Decimal(0))
    total_payment = sum((row.payment_total for row in schedule), Decimal(0))

    return LoanResult(
        method=method,
        periodic_payment=periodic_payment,
        total_payment=total_payment,
        total_interest=total_interest,
        schedule=schedule,
    )


def equal_payment_schedule(loan: LoanInput) -> LoanResult:
    """
    Equal-payment (annuity) amortization.

    Requirements:
    - Constant payment every period; interest = balance * r, rounded half-up
    - Principal portion = payment - interest, never more than the balance left;
      once the loan is repaid the remaining periods are empty
    - Last period absorbs the accumulated rounding residual so the principal
      portions sum to exactly the original principal and the balance ends at 0

    Example:
        120,000 at 0% over 12 months -> 12 payments of 10,000, no interest
    """
    loan.validate()
    principal = to_decimal(loan.principal)
    rate = monthly_rate(loan.annual_rate_percent)
    n = loan.term_months

    payment = annuity_payment(principal, rate, n)

    schedule = []
    balance = principal
    for period in range(1, n + 1):
        interest = round_won(balance * rate)
        principal_portion = min(payment - interest, balance)
        period_payment = principal_portion + interest
        balance -= principal_portion

        # Final-period balancing: fold the rounding residual into this period
        if period == n and balance != 0:
            principal_portion += balance
            period_payment += balance
            balance = Decimal(0)

        schedule.append(
            AmortizationRow(
                period_index=period,
                principal_portion=principal_portion,
                interest_portion=interest,
                payment_total=period_payment,
                remaining_balance=balance,
            )
        )

    return _summarize(RepaymentMethod.EQUAL_PAYMENT, payment, schedule)


def equal_principal_schedule(loan: LoanInput) -> LoanResult:
    """
    Equal-principal amortization: same principal every period, declining payment.

    The per-period principal is principal / n rounded half-up. Rounding can make
    that share slightly too large or too small, so a period never repays more
    than the outstanding balance and the last period repays whatever is left.
    """
    loan.validate()
    principal = to_decimal(loan.principal)
    rate = monthly_rate(loan.annual_rate_percent)
    n = loan.term_months

    principal_share = round_won(principal / n)

    schedule = []
    balance = principal
    for period in range(1, n + 1):
        interest = round_won(balance * rate)
        if period == n:
            principal_portion = balance
        else:
            principal_portion = min(principal_share, balance)
        balance -= principal_portion

        schedule.append(
            AmortizationRow(
                period_index=period,
                principal_portion=principal_portion,
                interest_portion=interest,
                payment_total=principal_portion + interest,
                remaining_balance=balance,
            )
        )

    # Headline figure is the first (largest) payment
    return _summarize(RepaymentMethod.EQUAL_PRINCIPAL, schedule[0].payment_total, schedule)


def bullet_schedule(loan: LoanInput) -> LoanResult:
    """
    Bullet repayment: interest only until maturity, full principal in the last period.

    The monthly interest is constant (principal * r) because the balance never
    moves before maturity; it is also the headline periodic payment.
    """
    loan.validate()
    principal = to_decimal(loan.principal)
    rate = monthly_rate(loan.annual_rate_percent)
    n = loan.term_months

    monthly_interest = round_won(principal * rate)

    schedule = []
    for period in range(1, n):
        schedule.append(
            AmortizationRow(
                period_index=period,
                principal_portion=Decimal(0),
                interest_portion=monthly_interest,
                payment_total=monthly_interest,
                remaining_balance=principal,
            )
        )
    schedule.append(
        AmortizationRow(
            period_index=n,
            principal_portion=principal,
            interest_portion=monthly_interest,
            payment_total=principal + monthly_interest,
            remaining_balance=Decimal(0),
        )
    )

    return _summarize(RepaymentMethod.BULLET, monthly_interest, schedule)


SCHEDULERS: Dict[RepaymentMethod, Callable[[LoanInput], LoanResult]] = {
    RepaymentMethod.EQUAL_PAYMENT: equal_payment_schedule,
    RepaymentMethod.EQUAL_PRINCIPAL: equal_principal_schedule,
    RepaymentMethod.BULLET: bullet_schedule,
}


def calculate_loan(loan: LoanInput, method: RepaymentMethod = RepaymentMethod.EQUAL_PAYMENT) -> LoanResult:
    """Main entry point: build the repayment schedule for the chosen method"""
    return SCHEDULERS[RepaymentMethod(method)](loan)
