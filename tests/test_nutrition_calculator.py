"""Tests for BMR, TDEE and macro calculations."""
import pytest

from core.exceptions import ValidationError
from core.rounding import round_half_up
from services.nutrition_calculator import nutrition_calculator as calc
from services.reference_tables import ACTIVITY_MULTIPLIERS, KCAL_PER_GRAM


def test_bmr_mifflin_st_jeor_male():
    """Test that BMR follows the Mifflin-St Jeor equation for men."""
    # 10*70 + 6.25*175 - 5*30 + 5 = 1648.75
    assert calc.calculate_bmr(70, 175, 30, "male").bmr == 1649


def test_bmr_rounds_half_up():
    """Test that a BMR ending in .5 rounds up."""
    # 10*70 + 6.25*174 - 5*30 + 5 = 1642.5
    assert calc.calculate_bmr(70, 174, 30, "male").bmr == 1643


def test_bmr_gender_gap_is_166():
    """Test that male and female BMR differ by 166 kcal."""
    male = calc.calculate_bmr(80, 180, 30, "male")
    female = calc.calculate_bmr(80, 180, 30, "female")
    assert male.bmr == 1780
    assert female.bmr == 1614
    assert male.bmr - female.bmr == 166


def test_bmr_tdee_for_every_activity_level():
    """Test that the BMR result lists TDEE for each activity level."""
    result = calc.calculate_bmr(80, 180, 30, "male")
    assert set(result.tdee_by_activity_level) == set(ACTIVITY_MULTIPLIERS)
    for level, multiplier in ACTIVITY_MULTIPLIERS.items():
        assert result.tdee_by_activity_level[level] == round_half_up(1780 * multiplier)
    assert result.tdee_by_activity_level["sedentary"] == 2136


def test_bmr_rejects_unknown_gender():
    """Test that an unknown gender is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_bmr(70, 175, 30, "other")
    assert "Gender" in exc_info.value.message


def test_bmr_rejects_age_out_of_range():
    """Test that an age above 120 is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_bmr(70, 175, 121, "male")
    assert exc_info.value.message == "Age must be between 1 and 120"


def test_tdee_selects_activity_level_and_default_split():
    """Test that TDEE uses the chosen activity level and the default split."""
    result = calc.calculate_tdee(80, 180, 30, "male", "moderate")
    assert result.bmr == 1780
    assert result.tdee == 2759
    assert result.activity_level == "moderate"
    assert result.macros.protein.grams == 207
    assert result.macros.protein.calories == 828
    assert result.macros.carbs.grams == 276
    assert result.macros.carbs.calories == 1104
    assert result.macros.fat.grams == 92
    assert (result.macros.protein.percentage, result.macros.carbs.percentage, result.macros.fat.percentage) == (30, 40, 30)


def test_tdee_matches_bmr_table():
    """Test that TDEE agrees with the BMR activity table."""
    bmr = calc.calculate_bmr(65, 168, 44, "female")
    for level in ACTIVITY_MULTIPLIERS:
        assert calc.calculate_tdee(65, 168, 44, "female", level).tdee == bmr.tdee_by_activity_level[level]


def test_tdee_rejects_unknown_activity_level():
    """Test that an unknown activity level is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_tdee(80, 180, 30, "male", "extreme")
    assert exc_info.value.message.startswith("Activity level must be one of")


def test_macros_lose():
    """Test that the lose goal cuts 500 kcal and uses its split."""
    result = calc.calculate_macros(2500, "lose")
    assert result.calories == 2000
    assert result.macros.protein.grams == 200
    assert result.macros.carbs.grams == 150
    assert result.macros.fat.grams == 67
    assert result.macros.fat.calories == 600


def test_macros_gain():
    """Test that the gain goal adds 300 kcal and uses its split."""
    result = calc.calculate_macros(2500, "gain")
    assert result.calories == 2800
    assert result.macros.protein.grams == 210
    assert result.macros.carbs.grams == 315
    assert result.macros.fat.grams == 78
    assert result.macros.carbs.percentage == 45


def test_macros_custom_split_overrides_goal_default():
    """Test that a custom split replaces the goal's split."""
    result = calc.calculate_macros(2000, "lose", custom_split={"protein": 40, "carbs": 40, "fat": 20})
    assert result.calories == 1500
    assert result.macros.protein.grams == 150
    assert result.macros.carbs.grams == 150
    assert result.macros.fat.grams == 33
    assert result.macros.fat.percentage == 20


def test_macros_custom_goal_without_split_uses_default():
    """Test that the custom goal falls back to the default split."""
    result = calc.calculate_macros(2000, "custom")
    assert result.calories == 2000
    assert result.macros.protein.percentage == 30


@pytest.mark.parametrize("tdee,goal", [(2500, "maintain"), (1873, "lose"), (3120, "gain"), (2222, "custom")])
def test_macro_grams_round_back_to_calories(tdee, goal):
    """Test that grams times kcal per gram stays close to macro calories."""
    result = calc.calculate_macros(tdee, goal)
    for macro, kcal_per_gram in KCAL_PER_GRAM.items():
        amount = getattr(result.macros, macro)
        assert abs(amount.grams * kcal_per_gram - amount.calories) <= kcal_per_gram / 2 + 1


def test_macros_rejects_unknown_goal():
    """Test that an unknown goal is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_macros(2500, "bulk")
    assert "Goal" in exc_info.value.message


def test_macros_rejects_non_positive_tdee():
    """Test that a zero TDEE is rejected as non-positive."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_macros(0, "maintain")
    assert exc_info.value.message == "TDEE must be greater than 0"


def test_macros_rejects_incomplete_custom_split():
    """Test that a custom split missing a macro is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_macros(2500, "custom", custom_split={"protein": 50, "carbs": 50})
    assert exc_info.value.message == "Fat percentage is required"
    assert exc_info.value.field == "Fat percentage"


@pytest.mark.parametrize("tdee", [300, 999, 6001])
def test_macros_rejects_tdee_outside_range(tdee):
    """Test that a TDEE outside 1000-6000 kcal is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        calc.calculate_macros(tdee, "lose")
    assert exc_info.value.message == "TDEE must be between 1000 and 6000"
    assert exc_info.value.field == "TDEE"


def test_macros_accepts_tdee_range_bounds():
    """Test that both TDEE bounds give positive macros."""
    low = calc.calculate_macros(1000, "lose")
    assert low.calories == 500
    assert low.macros.fat.grams > 0
    high = calc.calculate_macros(6000, "gain")
    assert high.calories == 6300
    assert high.macros.protein.calories == 1890


def test_bmr_is_idempotent():
    """Test that repeated BMR calls return equal results."""
    assert calc.calculate_bmr(72, 170, 35, "female") == calc.calculate_bmr(72, 170, 35, "female")
