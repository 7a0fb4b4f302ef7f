"""Domain models - immutable records passed into and returned from the calculators"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from calc_hub.domain.exceptions import InvalidInputError


class RepaymentMethod(str, Enum):
    """Loan repayment scheme"""

    EQUAL_PAYMENT = "equal_payment"  # 원리금균등상환
    EQUAL_PRINCIPAL = "equal_principal"  # 원금균등상환
    BULLET = "bullet"  # 만기일시상환


class InterestMethod(str, Enum):
    """Savings interest scheme"""

    SIMPLE = "simple"
    COMPOUND = "compound"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity multipliers offered by the calorie calculator"""

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    ACTIVE = 1.725
    VERY_ACTIVE = 1.9


def _require(condition: bool, field: str, message: str) -> None:
    if not condition:
        raise InvalidInputError(f"{field}: {message}", field=field)


@dataclass(frozen=True)
class LoanInput:
    """Loan parameters; rate is an annual percentage (e.g. 4.5 for 4.5%)"""

    principal: Decimal
    annual_rate_percent: Decimal
    term_months: int

    def validate(self) -> None:
        _require(self.principal >= 0, "principal", "must be >= 0")
        _require(self.annual_rate_percent >= 0, "annual_rate_percent", "must be >= 0")
        # term_months >= 1 keeps principal / n defined
        _require(self.term_months >= 1, "term_months", "must be >= 1")


@dataclass(frozen=True)
class AmortizationRow:
    """Single period of a repayment schedule"""

    period_index: int
    principal_portion: Decimal
    interest_portion: Decimal
    payment_total: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class LoanResult:
    """Repayment summary plus the full per-period schedule"""

    method: RepaymentMethod
    periodic_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    schedule: List[AmortizationRow]


@dataclass(frozen=True)
class SavingsInput:
    periodic_deposit: Decimal
    num_periods: int
    annual_rate_percent: Decimal
    method: InterestMethod = InterestMethod.SIMPLE

    def validate(self) -> None:
        _require(self.periodic_deposit >= 0, "periodic_deposit", "must be >= 0")
        _require(self.num_periods >= 1, "num_periods", "must be >= 1")
        _require(self.annual_rate_percent >= 0, "annual_rate_percent", "must be >= 0")


@dataclass(frozen=True)
class SavingsRow:
    period_index: int
    deposit: Decimal
    interest_accrued: Decimal
    balance: Decimal


@dataclass(frozen=True)
class SavingsResult:
    method: InterestMethod
    total_deposited: Decimal
    total_interest: Decimal
    final_balance: Decimal
    schedule: List[SavingsRow]


@dataclass(frozen=True)
class SeveranceInput:
    """Monthly wage and length of service (months are in addition to full years)"""

    monthly_wage: Decimal
    service_years: int
    service_months: int = 0

    def validate(self) -> None:
        _require(self.monthly_wage >= 0, "monthly_wage", "must be >= 0")
        _require(self.service_years >= 0, "service_years", "must be >= 0")
        _require(self.service_months >= 0, "service_months", "must be >= 0")


@dataclass(frozen=True)
class SeveranceResult:
    total_service_days: int
    service_years: Decimal
    gross_severance: Decimal
    service_deduction: Decimal
    tax_base: Decimal
    national_income_tax: Decimal
    local_income_tax: Decimal
    net_amount: Decimal


@dataclass(frozen=True)
class BMIInput:
    height_cm: float
    weight_kg: float

    def validate(self) -> None:
        _require(self.height_cm > 0, "height_cm", "must be > 0")
        _require(self.weight_kg > 0, "weight_kg", "must be > 0")


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str
    category_key: str


@dataclass(frozen=True)
class CalorieInput:
    gender: Gender
    age: int
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel = ActivityLevel.MODERATE

    def validate(self) -> None:
        _require(self.age > 0, "age", "must be > 0")
        _require(self.height_cm > 0, "height_cm", "must be > 0")
        _require(self.weight_kg > 0, "weight_kg", "must be > 0")


@dataclass(frozen=True)
class CalorieResult:
    bmr: float
    tdee: float
    recommended_calorie: float
    diet_calorie: float
    gain_calorie: float


@dataclass(frozen=True)
class DiscountInput:
    original_price: Decimal
    discount1_percent: Decimal
    discount2_percent: Optional[Decimal] = None

    def validate(self) -> None:
        _require(self.original_price >= 0, "original_price", "must be >= 0")
        _require(0 <= self.discount1_percent <= 100, "discount1_percent", "must be between 0 and 100")
        if self.discount2_percent is not None:
            _require(0 <= self.discount2_percent <= 100, "discount2_percent", "must be between 0 and 100")


@dataclass(frozen=True)
class DiscountStep:
    step: int
    description: str
    price: Decimal
    discount: Decimal


@dataclass(frozen=True)
class DiscountResult:
    after_first: Decimal
    final_price: Decimal
    total_discount: Decimal
    total_discount_rate: Decimal
    steps: List[DiscountStep]


@dataclass(frozen=True)
class DdayInput:
    target: datetime


@dataclass(frozen=True)
class DdayResult:
    dday: int
    days: int
    hours: int
    minutes: int
    seconds: int
    is_past: bool

    @property
    def label(self) -> str:
        """Countdown label as shown on the site: D-3, D-Day, D+2"""
        if self.dday == 0:
            return "D-Day"
        if self.dday > 0:
            return f"D-{self.dday}"
        return f"D+{-self.dday}"


@dataclass(frozen=True)
class City:
    """World clock entry with a fixed UTC offset (no DST)"""

    name: str
    country: str
    tz_name: str
    utc_offset_hours: float


@dataclass(frozen=True)
class ConversionResult:
    category: str
    value: float
    from_unit: str
    to_unit: str
    base_value: float
    converted: float


@dataclass(frozen=True)
class WorldClockResult:
    city: City
    local_time: datetime
    offset_hours: float
    difference: str
    arrival_time: Optional[datetime] = None
