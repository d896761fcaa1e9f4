"""Body composition calculators.

BMI, body fat percentage (Deurenberg), lean body mass (Boer, Hume and from
a known body fat %) and ideal weight (Devine, Robinson, Miller, Hamwi).
"""

from typing import List, Optional

from core.logger import get_logger
from core.rounding import round_1
from core.validation import require_gender, require_range
from schemas.result_schema import (
    BmiResult,
    BodyFatResult,
    IdealWeightResult,
    LeanBodyMassResult,
    WeightRange,
)
from services.reference_tables import (
    AGE_RANGE,
    BMI_BANDS,
    BMI_PRINTED_RANGES,
    BODY_FAT_BANDS,
    BODY_FAT_CLAMP,
    BODY_FAT_INPUT_RANGE,
    HEALTHY_BMI_MAX,
    HEALTHY_BMI_MIN,
    HEIGHT_RANGE,
    WEIGHT_RANGE,
)

logger = get_logger("services.body_composition")

CM_PER_INCH = 2.54

# (intercept kg, kg per inch over 5 ft)
IDEAL_WEIGHT_FORMULAS = {
    "male": {
        "devine": (50, 2.3),
        "robinson": (52, 1.9),
        "miller": (56.2, 1.41),
        "hamwi": (48, 2.7),
    },
    "female": {
        "devine": (45.5, 2.3),
        "robinson": (49, 1.7),
        "miller": (53.1, 1.36),
        "hamwi": (45.5, 2.2),
    },
}


def healthy_weight_range(height_cm: float) -> WeightRange:
    """Weights giving a BMI between 18.5 and 24.9 at this height."""
    height_m = height_cm / 100
    return WeightRange(
        min=round_1(HEALTHY_BMI_MIN * height_m * height_m),
        max=round_1(HEALTHY_BMI_MAX * height_m * height_m),
    )


def bmi_category(bmi: float) -> str:
    """Map a BMI to its band using strict `<` upper bounds."""
    for upper, category, _label in BMI_BANDS:
        if bmi < upper:
            return category
    return "obese"


def body_fat_category(percentage: float, gender: str) -> str:
    """Map a body fat percentage to its label for `gender`."""
    for upper, _category, label in BODY_FAT_BANDS[gender]:
        if percentage < upper:
            return label
    return "Obese"


def get_bmi_ranges() -> List[dict]:
    """Return the BMI bands as `{category, label, min, max}` records."""
    return [
        {"category": category, "label": label, "min": low, "max": high}
        for category, label, low, high in BMI_PRINTED_RANGES
    ]


def get_body_fat_ranges(gender: str) -> List[dict]:
    """Return the gender-specific body fat bands as `{category, label, max}` records."""
    require_gender(gender)
    return [
        {"category": category, "label": label, "max": upper}
        for upper, category, label in BODY_FAT_BANDS[gender]
    ]


class BodyCompositionCalculator:
    """Class-based body composition calculator used across the app."""

    def calculate_bmi(self, weight: float, height: float) -> BmiResult:
        """Calculate BMI from weight in kg and height in cm.

        The category uses strict `<` comparisons against each band's upper
        bound (so a BMI of 24.95 is "overweight").
        """
        require_range(weight, *WEIGHT_RANGE, "Weight")
        require_range(height, *HEIGHT_RANGE, "Height")

        height_m = height / 100
        bmi = weight / (height_m * height_m)

        result = BmiResult(
            bmi=round_1(bmi),
            category=bmi_category(bmi),
            healthy_range=healthy_weight_range(height),
        )
        logger.debug("BMI calculated: %s (%s)", result.bmi, result.category)
        return result

    def calculate_body_fat(self, weight: float, height: float, age: float, gender: str) -> BodyFatResult:
        """Estimate body fat % with the Deurenberg equation.

        BF% = 1.2 * BMI + 0.23 * age - 10.8 * sex - 5.4, where sex is 1 for
        male and 0 for female, using the rounded BMI. The estimate is clamped
        to [3, 60].
        """
        require_range(age, *AGE_RANGE, "Age")
        require_gender(gender)
        bmi = self.calculate_bmi(weight, height).bmi

        sex_factor = 1 if gender == "male" else 0
        percentage = 1.2 * bmi + 0.23 * age - 10.8 * sex_factor - 5.4
        low, high = BODY_FAT_CLAMP
        percentage = max(low, min(high, percentage))

        fat_mass = (percentage / 100) * weight
        lean_mass = weight - fat_mass

        result = BodyFatResult(
            percentage=round_1(percentage),
            category=body_fat_category(percentage, gender),
            fat_mass=round_1(fat_mass),
            lean_mass=round_1(lean_mass),
        )
        logger.debug("Body fat calculated: %s%% (%s)", result.percentage, result.category)
        return result

    def calculate_lean_body_mass(
        self,
        weight: float,
        height: float,
        gender: str,
        body_fat_percentage: Optional[float] = None,
    ) -> LeanBodyMassResult:
        """Estimate lean body mass with the Boer and Hume formulas.

        When a body fat percentage is supplied a third estimate,
        weight * (1 - bf / 100), joins the average.
        """
        require_range(weight, *WEIGHT_RANGE, "Weight")
        require_range(height, *HEIGHT_RANGE, "Height")
        require_gender(gender)
        if body_fat_percentage is not None:
            require_range(body_fat_percentage, *BODY_FAT_INPUT_RANGE, "Body fat percentage")

        if gender == "male":
            boer = 0.407 * weight + 0.267 * height - 19.2
            hume = 0.32810 * weight + 0.33929 * height - 29.5336
        else:
            boer = 0.252 * weight + 0.473 * height - 48.3
            hume = 0.29569 * weight + 0.41813 * height - 43.2933

        estimates = [boer, hume]
        from_body_fat = None
        if body_fat_percentage is not None:
            from_body_fat = weight * (1 - body_fat_percentage / 100)
            estimates.append(from_body_fat)

        average = sum(estimates) / len(estimates)
        fat_mass = weight - average

        result = LeanBodyMassResult(
            boer=round_1(boer),
            hume=round_1(hume),
            from_body_fat=round_1(from_body_fat) if from_body_fat is not None else None,
            average=round_1(average),
            fat_mass=round_1(fat_mass),
        )
        logger.debug("Lean body mass calculated from %s estimates: %s", len(estimates), result.average)
        return result

    def calculate_ideal_weight(self, height: float, gender: str) -> IdealWeightResult:
        """Estimate ideal weight with four height-based formulas.

        Each formula adds a per-inch increment for every inch above 5 ft;
        heights below 5 ft get the formula's base weight.
        """
        require_range(height, *HEIGHT_RANGE, "Height")
        require_gender(gender)

        inches_over_5ft = max(0, height / CM_PER_INCH - 60)
        estimates = {
            name: round_1(base + per_inch * inches_over_5ft)
            for name, (base, per_inch) in IDEAL_WEIGHT_FORMULAS[gender].items()
        }
        result = IdealWeightResult(bmi_range=healthy_weight_range(height), **estimates)
        logger.debug("Ideal weight calculated: %s", estimates)
        return result


body_composition_calculator = BodyCompositionCalculator()
__all__ = [
    "BodyCompositionCalculator",
    "body_composition_calculator",
    "get_bmi_ranges",
    "get_body_fat_ranges",
]
