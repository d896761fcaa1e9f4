"""Result records returned by the calculators.

All results are frozen pydantic models, built fresh on every call.
"""

from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class WeightRange(_Result):
    """Weight range in kg."""

    min: float
    max: float


class BmiResult(_Result):
    bmi: float
    category: str
    healthy_range: WeightRange


class BmrResult(_Result):
    """Basal metabolic rate plus the TDEE at every activity level."""

    bmr: int
    tdee_by_activity_level: Dict[str, int]


class MacroAmount(_Result):
    grams: int
    calories: int
    percentage: float


class MacroSplit(_Result):
    protein: MacroAmount
    carbs: MacroAmount
    fat: MacroAmount


class TdeeResult(_Result):
    bmr: int
    tdee: int
    activity_level: str
    macros: MacroSplit


class BodyFatResult(_Result):
    percentage: float
    category: str
    fat_mass: float
    lean_mass: float


class LeanBodyMassResult(_Result):
    """Lean body mass estimates in kg; `from_body_fat` is None unless a body fat % was given."""

    boer: float
    hume: float
    from_body_fat: Optional[float] = None
    average: float
    fat_mass: float


class IdealWeightResult(_Result):
    devine: float
    robinson: float
    miller: float
    hamwi: float
    bmi_range: WeightRange


class MacrosResult(_Result):
    calories: int
    macros: MacroSplit


class RepMaxPercentage(_Result):
    reps: int
    percentage: int
    weight: int


class OneRepMaxResult(_Result):
    epley: int
    brzycki: int
    lombardi: int
    oconner: int
    average: int
    percentages: List[RepMaxPercentage]


class WaterAdjustments(_Result):
    """Additive water adjustments in ml."""

    exercise: int
    climate: int
    high_protein: int
    pregnancy: int
    breastfeeding: int

    def total(self) -> int:
        return self.exercise + self.climate + self.high_protein + self.pregnancy + self.breastfeeding


class WaterIntakeResult(_Result):
    baseline: int
    adjustments: WaterAdjustments
    total: int
    glasses: int
    liters: float
    recommendation: str
