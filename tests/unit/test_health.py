"""Unit tests for BMI and calorie calculators"""

import pytest
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.health import basal_metabolic_rate, calculate_bmi, calculate_calorie, classify_bmi
from calc_hub.domain.models import ActivityLevel, BMIInput, CalorieInput, Gender


def test_bmi_normal():
    result = calculate_bmi(BMIInput(height_cm=170, weight_kg=65))

    assert result.bmi == pytest.approx(22.49, abs=0.01)
    assert result.category == "정상"
    assert result.category_key == "normal"


@pytest.mark.parametrize(
    "bmi,category",
    [
        (17.0, "저체중"),
        (18.5, "정상"),  # lower bound is inclusive
        (22.99, "정상"),
        (23.0, "과체중"),
        (25.0, "비만"),
        (29.9, "비만"),
        (30.0, "고도비만"),
        (41.2, "고도비만"),
    ],
)
def test_bmi_category_boundaries(bmi: float, category: str):
    assert classify_bmi(bmi)[0] == category


def test_bmi_rejects_zero_height():
    with pytest.raises(InvalidInputError):
        calculate_bmi(BMIInput(height_cm=0, weight_kg=65))


def test_bmr_male():
    # 88.362 + 13.397*70 + 4.799*175 - 5.677*30
    assert basal_metabolic_rate(Gender.MALE, 30, 175, 70) == pytest.approx(1695.667)


def test_bmr_female():
    # 447.593 + 9.247*55 + 3.098*165 - 4.330*30
    assert basal_metabolic_rate(Gender.FEMALE, 30, 165, 55) == pytest.approx(1337.448)


def test_calorie_targets():
    result = calculate_calorie(
        CalorieInput(gender=Gender.MALE, age=30, height_cm=175, weight_kg=70, activity_level=ActivityLevel.MODERATE)
    )

    assert result.bmr == pytest.approx(1695.667)
    assert result.tdee == pytest.approx(1695.667 * 1.55)
    assert result.recommended_calorie == result.tdee
    assert result.diet_calorie == pytest.approx(result.tdee * 0.8)
    assert result.gain_calorie == pytest.approx(result.tdee * 1.2)


def test_calorie_activity_scales_tdee():
    def tdee(level: ActivityLevel) -> float:
        person = CalorieInput(gender=Gender.FEMALE, age=40, height_cm=160, weight_kg=60, activity_level=level)
        return calculate_calorie(person).tdee

    values = [tdee(level) for level in ActivityLevel]
    assert values == sorted(values)
