"""BMI and daily calorie calculators"""

from typing import List, Tuple

from calc_hub.domain.models import BMIInput, BMIResult, CalorieInput, CalorieResult, Gender

# (upper bound exclusive, Korean label, key). Korean obesity guideline cut-offs.
BMI_CATEGORIES: List[Tuple[float, str, str]] = [
    (18.5, "저체중", "underweight"),
    (23.0, "정상", "normal"),
    (25.0, "과체중", "overweight"),
    (30.0, "비만", "obese"),
]
BMI_TOP_CATEGORY = ("고도비만", "severely_obese")

DIET_FACTOR = 0.8
GAIN_FACTOR = 1.2


def classify_bmi(bmi: float) -> Tuple[str, str]:
    for upper, label, key in BMI_CATEGORIES:
        if bmi < upper:
            return label, key
    return BMI_TOP_CATEGORY


def calculate_bmi(body: BMIInput) -> BMIResult:
    """BMI = weight (kg) / height (m)^2"""
    body.validate()
    height_m = body.height_cm / 100
    bmi = body.weight_kg / (height_m * height_m)
    category, key = classify_bmi(bmi)
    return BMIResult(bmi=bmi, category=category, category_key=key)


def basal_metabolic_rate(gender: Gender, age: int, height_cm: float, weight_kg: float) -> float:
    """Revised Harris-Benedict equation"""
    if Gender(gender) is Gender.MALE:
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)


def calculate_calorie(person: CalorieInput) -> CalorieResult:
    """
    Daily energy needs.

    - BMR from Harris-Benedict
    - TDEE = BMR * activity multiplier (1.2 sedentary .. 1.9 very active)
    - Recommended intake is the TDEE; diet and weight-gain targets are
      80% and 120% of it
    """
    person.validate()
    bmr = basal_metabolic_rate(person.gender, person.age, person.height_cm, person.weight_kg)
    tdee = bmr * person.activity_level.value

    return CalorieResult(
        bmr=bmr,
        tdee=tdee,
        recommended_calorie=tdee,
        diet_calorie=tdee * DIET_FACTOR,
        gain_calorie=tdee * GAIN_FACTOR,
    )
