"""Training and hydration calculators.

One-rep-max estimation from a submaximal set and daily water intake.
"""

import math

from core.logger import get_logger
from core.rounding import round_1, round_half_up
from core.validation import require_choice, require_flag, require_range
from schemas.result_schema import (
    OneRepMaxResult,
    RepMaxPercentage,
    WaterAdjustments,
    WaterIntakeResult,
)
from services.reference_tables import (
    ACTIVITY_LEVELS,
    BREASTFEEDING_WATER_ML,
    CLIMATES,
    EXERCISE_WATER_ML,
    GLASS_ML,
    HIGH_PROTEIN_WATER_ML,
    HOT_CLIMATE_WATER_ML,
    LIFT_WEIGHT_RANGE,
    PREGNANCY_WATER_ML,
    REP_MAX_PERCENTAGES,
    REPS_RANGE,
    WATER_ML_PER_KG,
    WEIGHT_RANGE,
)

logger = get_logger("services.fitness_calculator")


def hydration_recommendation(liters: float) -> str:
    """Describe a daily intake given in liters."""
    if liters < 2:
        return "Below recommended - increase water intake"
    if liters <= 3:
        return "Good hydration level"
    if liters <= 4:
        return "Excellent hydration for active lifestyle"
    return "Very high - ensure this matches your activity level"


class FitnessCalculator:
    """Class-based strength and hydration calculator used across the app."""

    def calculate_one_rep_max(self, weight: float, reps: float) -> OneRepMaxResult:
        """Estimate the one-rep-max from `weight` lifted for `reps` repetitions.

        Averages the Epley, Brzycki, Lombardi and O'Conner estimates. The
        formulas are calibrated for roughly 1-15 reps; up to 30 is accepted.
        Brzycki's denominator (37 - reps) shrinks quickly near the ceiling,
        so estimates there run high.
        """
        require_range(weight, *LIFT_WEIGHT_RANGE, "Weight")
        require_range(reps, *REPS_RANGE, "Reps")

        epley = weight * (1 + reps / 30)
        brzycki = weight * (36 / (37 - reps))
        lombardi = weight * math.pow(reps, 0.1)
        oconner = weight * (1 + 0.025 * reps)
        average = (epley + brzycki + lombardi + oconner) / 4

        percentages = [
            RepMaxPercentage(
                reps=table_reps,
                percentage=percentage,
                weight=round_half_up(average * percentage / 100),
            )
            for table_reps, percentage in REP_MAX_PERCENTAGES
        ]

        result = OneRepMaxResult(
            epley=round_half_up(epley),
            brzycki=round_half_up(brzycki),
            lombardi=round_half_up(lombardi),
            oconner=round_half_up(oconner),
            average=round_half_up(average),
            percentages=percentages,
        )
        logger.debug("1RM estimated for %s x %s: %s", weight, reps, result.average)
        return result

    def calculate_water_intake(
        self,
        weight: float,
        activity_level: str = "sedentary",
        climate: str = "normal",
        high_protein: bool = False,
        pregnant: bool = False,
        breastfeeding: bool = False,
    ) -> WaterIntakeResult:
        """Estimate daily water needs in ml.

        Baseline is 33 ml per kg; exercise, hot climate, a high-protein diet,
        pregnancy and breastfeeding each add a fixed amount independently.
        """
        require_range(weight, *WEIGHT_RANGE, "Weight")
        require_choice(activity_level, ACTIVITY_LEVELS, "Activity level")
        require_choice(climate, CLIMATES, "Climate")
        require_flag(high_protein, "High protein")
        require_flag(pregnant, "Pregnant")
        require_flag(breastfeeding, "Breastfeeding")

        baseline = weight * WATER_ML_PER_KG
        adjustments = WaterAdjustments(
            exercise=EXERCISE_WATER_ML[activity_level],
            climate=HOT_CLIMATE_WATER_ML if climate == "hot" else 0,
            high_protein=HIGH_PROTEIN_WATER_ML if high_protein else 0,
            pregnancy=PREGNANCY_WATER_ML if pregnant else 0,
            breastfeeding=BREASTFEEDING_WATER_ML if breastfeeding else 0,
        )
        total = baseline + adjustments.total()
        liters = round_1(total / 1000)

        result = WaterIntakeResult(
            baseline=round_half_up(baseline),
            adjustments=adjustments,
            total=round_half_up(total),
            glasses=math.ceil(total / GLASS_ML),
            liters=liters,
            recommendation=hydration_recommendation(liters),
        )
        logger.debug("Water intake calculated: %s ml", result.total)
        return result


fitness_calculator = FitnessCalculator()
__all__ = ["FitnessCalculator", "fitness_calculator", "hydration_recommendation"]
