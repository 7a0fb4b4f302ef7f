"""Stacked percentage discounts"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple

from calc_hub.domain.models import DiscountInput, DiscountResult, DiscountStep
from calc_hub.domain.money import round_won, to_decimal


def _format_percent(percent: Decimal) -> str:
    # 20 -> "20", 12.50 -> "12.5"
    return format(percent.normalize(), "f")


def apply_discount(price: Decimal, percent: Decimal) -> Tuple[Decimal, Decimal]:
    """Return (discounted price, discount amount)"""
    amount = price * percent / 100
    return price - amount, amount


def calculate_discount(offer: DiscountInput) -> DiscountResult:
    """
    Apply discount 1, then discount 2 on the already reduced price.

    Stacking is multiplicative: 20% then 10% off 100,000 is 72,000, not
    70,000. Discount 2 is skipped when absent or zero. Prices stay exact;
    reported figures are rounded half-up to the won.

    Example:
        100,000 -20% -> 80,000 -10% -> 72,000 (total 28,000 / 28%)
    """
    offer.validate()
    original = to_decimal(offer.original_price)
    first = to_decimal(offer.discount1_percent)

    steps: List[DiscountStep] = []

    price, amount = apply_discount(original, first)
    after_first = price
    steps.append(
        DiscountStep(
            step=1,
            description=f"{_format_percent(first)}% 할인",
            price=round_won(price),
            discount=round_won(amount),
        )
    )

    if offer.discount2_percent is not None and offer.discount2_percent > 0:
        second = to_decimal(offer.discount2_percent)
        price, amount = apply_discount(price, second)
        steps.append(
            DiscountStep(
                step=2,
                description=f"{_format_percent(second)}% 추가 할인",
                price=round_won(price),
                discount=round_won(amount),
            )
        )

    total_discount = original - price
    # Free items have no meaningful discount rate
    if original == 0:
        total_rate = Decimal(0)
    else:
        total_rate = total_discount / original * 100

    return DiscountResult(
        after_first=round_won(after_first),
        final_price=round_won(price),
        total_discount=round_won(total_discount),
        total_discount_rate=total_rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
        steps=steps,
    )
