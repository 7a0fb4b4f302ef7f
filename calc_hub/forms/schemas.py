"""Pydantic schemas for raw calculator form input"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, FiniteFloat, field_validator, model_validator

from calc_hub.domain.models import ActivityLevel, Gender, InterestMethod, RepaymentMethod


class CalculatorForm(BaseModel):
    """
    Base for every form: values arrive as strings from a UI or the command line.

    Blank strings are treated as missing so required fields fail instead of
    silently defaulting. Thousands separators ("100,000") are accepted.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_blank_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            cleaned[key] = value
        return cleaned


def _strip_thousands(value: Any) -> Any:
    if isinstance(value, str):
        return value.replace(",", "")
    return value


Amount = Annotated[Decimal, BeforeValidator(_strip_thousands)]
WholeNumber = Annotated[int, BeforeValidator(_strip_thousands)]


class LoanForm(CalculatorForm):
    principal: Amount = Field(..., ge=0, allow_inf_nan=False, description="Loan principal (won)")
    annual_rate: Amount = Field(..., ge=0, le=100, allow_inf_nan=False, description="Annual rate (%)")
    months: WholeNumber = Field(..., ge=1, le=1200, description="Repayment term in months")
    method: RepaymentMethod = RepaymentMethod.EQUAL_PAYMENT


class SavingsForm(CalculatorForm):
    monthly_deposit: Amount = Field(..., ge=0, allow_inf_nan=False, description="Deposit per month (won)")
    months: WholeNumber = Field(..., ge=1, le=1200, description="Number of monthly deposits")
    annual_rate: Amount = Field(..., ge=0, le=100, allow_inf_nan=False, description="Annual rate (%)")
    interest_type: InterestMethod = InterestMethod.SIMPLE


class SeveranceForm(CalculatorForm):
    monthly_salary: Amount = Field(..., ge=0, allow_inf_nan=False, description="Monthly wage (won)")
    years: WholeNumber = Field(..., ge=0, le=80, description="Full years of service")
    months: WholeNumber = Field(..., ge=0, le=11, description="Months of service beyond full years")


class BMIForm(CalculatorForm):
    height: FiniteFloat = Field(..., gt=0, le=300, description="Height (cm)")
    weight: FiniteFloat = Field(..., gt=0, le=700, description="Weight (kg)")


class CalorieForm(CalculatorForm):
    gender: Gender
    age: int = Field(..., gt=0, le=150)
    height: FiniteFloat = Field(..., gt=0, le=300, description="Height (cm)")
    weight: FiniteFloat = Field(..., gt=0, le=700, description="Weight (kg)")
    activity_level: ActivityLevel = ActivityLevel.MODERATE

    @field_validator("activity_level", mode="before")
    @classmethod
    def parse_activity_level(cls, value: Any) -> Any:
        # "1.55" -> ActivityLevel.MODERATE; names such as "moderate" also work
        if isinstance(value, ActivityLevel):
            return value
        if isinstance(value, str) and value.upper() in ActivityLevel.__members__:
            return ActivityLevel[value.upper()]
        try:
            return ActivityLevel(float(value))
        except (TypeError, ValueError):
            allowed = ", ".join(str(level.value) for level in ActivityLevel)
            raise ValueError(f"must be one of {allowed}") from None


class DiscountForm(CalculatorForm):
    original_price: Amount = Field(..., ge=0, allow_inf_nan=False, description="Price before discounts (won)")
    discount1: Amount = Field(..., ge=0, le=100, allow_inf_nan=False, description="First discount (%)")
    discount2: Optional[Amount] = Field(None, ge=0, le=100, allow_inf_nan=False, description="Extra discount (%)")


def _parse_datetime(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise ValueError("must be an ISO date or date-time (YYYY-MM-DD[THH:MM[:SS]])") from None
    return value


IsoDateTime = Annotated[datetime, BeforeValidator(_parse_datetime)]


class DdayForm(CalculatorForm):
    target_date: IsoDateTime


class TimezoneForm(CalculatorForm):
    city: str = Field(..., min_length=1, description="City name or IANA zone")
    flight_hours: int = Field(0, ge=0, le=48)
    flight_minutes: int = Field(0, ge=0, le=59)
    departure: Optional[IsoDateTime] = None


class ConvertForm(CalculatorForm):
    category: str
    value: FiniteFloat
    from_unit: str
    to_unit: str

    @field_validator("category", "from_unit", "to_unit")
    @classmethod
    def lowercase_codes(cls, value: str) -> str:
        return value.lower()
