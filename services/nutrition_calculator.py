"""Energy and macronutrient calculators.

Provides BMR (Mifflin-St Jeor), TDEE and macro split utilities used by the
API and composed by the other calculators.
"""

from typing import Mapping, Optional

from core.exceptions import ValidationError
from core.logger import get_logger
from core.rounding import round_half_up
from core.validation import (
    require_choice,
    require_gender,
    require_percentage,
    require_range,
)
from schemas.result_schema import BmrResult, MacroAmount, MacroSplit, MacrosResult, TdeeResult
from services.reference_tables import (
    ACTIVITY_LEVELS,
    ACTIVITY_MULTIPLIERS,
    AGE_RANGE,
    DEFAULT_MACRO_SPLIT,
    GOAL_ADJUSTMENTS,
    GOALS,
    HEIGHT_RANGE,
    KCAL_PER_GRAM,
    TDEE_RANGE,
    WEIGHT_RANGE,
)

logger = get_logger("services.nutrition_calculator")


class NutritionCalculator:
    """Class-based energy calculator used across the app."""

    def calculate_bmr(self, weight: float, height: float, age: float, gender: str) -> BmrResult:
        """Calculate BMR using the Mifflin-St Jeor equation.

        Male: 10w + 6.25h - 5a + 5, female: 10w + 6.25h - 5a - 161.
        The TDEE for every activity level is derived from the unrounded BMR.
        """
        require_range(weight, *WEIGHT_RANGE, "Weight")
        require_range(height, *HEIGHT_RANGE, "Height")
        require_range(age, *AGE_RANGE, "Age")
        require_gender(gender)

        base = 10 * weight + 6.25 * height - 5 * age
        bmr = base + 5 if gender == "male" else base - 161

        tdee = {
            level: round_half_up(bmr * multiplier)
            for level, multiplier in ACTIVITY_MULTIPLIERS.items()
        }
        result = BmrResult(bmr=round_half_up(bmr), tdee_by_activity_level=tdee)
        logger.debug("BMR calculated: %s", result.bmr)
        return result

    def calculate_tdee(
        self, weight: float, height: float, age: float, gender: str, activity_level: str
    ) -> TdeeResult:
        """Estimate TDEE for one activity level with the default 30/40/30 macro split."""
        require_choice(activity_level, ACTIVITY_LEVELS, "Activity level")
        bmr_result = self.calculate_bmr(weight, height, age, gender)
        tdee = bmr_result.tdee_by_activity_level[activity_level]
        macros = self.calculate_macro_split(tdee, DEFAULT_MACRO_SPLIT)
        logger.debug("TDEE calculated for %s: %s", activity_level, tdee)
        return TdeeResult(
            bmr=bmr_result.bmr,
            tdee=tdee,
            activity_level=activity_level,
            macros=macros,
        )

    def calculate_macro_split(self, calories: float, split: Mapping[str, float]) -> MacroSplit:
        """Allocate a calorie figure to protein, carbs and fat by percentage.

        Protein and carbs carry 4 kcal/g, fat 9 kcal/g. Grams and per-macro
        calories are rounded to whole numbers; the percentages are echoed back.
        The split is not required to sum to 100.
        """
        amounts = {}
        for macro, kcal_per_gram in KCAL_PER_GRAM.items():
            kcal = calories * (split[macro] / 100)
            amounts[macro] = MacroAmount(
                grams=round_half_up(kcal / kcal_per_gram),
                calories=round_half_up(kcal),
                percentage=split[macro],
            )
        return MacroSplit(**amounts)

    def calculate_macros(
        self, tdee: float, goal: str, custom_split: Optional[Mapping[str, float]] = None
    ) -> MacrosResult:
        """Derive a calorie target from TDEE and goal, then split it into macros.

        A custom split replaces the goal's default split whatever the goal.
        """
        require_range(tdee, *TDEE_RANGE, "TDEE")
        require_choice(goal, GOALS, "Goal")
        if custom_split is not None:
            for macro in KCAL_PER_GRAM:
                if macro not in custom_split:
                    raise ValidationError(f"{macro.capitalize()} percentage is required",
                                          field=f"{macro.capitalize()} percentage")
                require_percentage(custom_split[macro], f"{macro.capitalize()} percentage")

        delta, default_split = GOAL_ADJUSTMENTS[goal]
        target_calories = tdee + delta
        split = custom_split if custom_split is not None else default_split

        macros = self.calculate_macro_split(target_calories, split)
        logger.debug("Macros for goal %s at %s kcal: %s", goal, target_calories, macros)
        return MacrosResult(calories=round_half_up(target_calories), macros=macros)


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator"]
