"""Request payloads for the calculator endpoints.

Fields are typed here but range checks are left to the calculators, so the
client receives the same user-facing messages the engine produces.
"""

from pydantic import BaseModel, Field
from typing import Optional


class BmiRequest(BaseModel):
    """Payload for the BMI calculator."""

    weight: float = Field(..., examples=[70.0], description="Weight in kilograms (20-500)")
    height: float = Field(..., examples=[175.0], description="Height in centimeters (50-300)")


class BmrRequest(BmiRequest):
    """Payload for the BMR and body fat calculators."""

    age: float = Field(..., examples=[30], description="Age in years (1-120)")
    gender: str = Field(..., examples=["male"], description="Gender (male/female)")


class TdeeRequest(BmrRequest):
    """Payload for the TDEE calculator."""

    activity_level: str = Field(..., examples=["moderate"], description="Activity level: sedentary, light, moderate, active, athlete")


class LeanBodyMassRequest(BmiRequest):
    """Payload for the lean body mass calculator."""

    gender: str = Field(..., examples=["male"], description="Gender (male/female)")
    body_fat_percentage: Optional[float] = Field(None, examples=[18.0], description="Known body fat percentage (1-70), optional")


class IdealWeightRequest(BaseModel):
    """Payload for the ideal weight calculator."""

    height: float = Field(..., examples=[175.0], description="Height in centimeters (50-300)")
    gender: str = Field(..., examples=["female"], description="Gender (male/female)")


class MacroSplitRequest(BaseModel):
    """Caller-supplied macro split in percent of total calories."""

    protein: float = Field(..., examples=[35])
    carbs: float = Field(..., examples=[40])
    fat: float = Field(..., examples=[25])


class MacrosRequest(BaseModel):
    """Payload for the macro calculator."""

    tdee: float = Field(..., examples=[2500], description="Total daily energy expenditure in kcal")
    goal: str = Field(..., examples=["lose"], description="Goal: maintain, lose, gain, custom")
    custom_split: Optional[MacroSplitRequest] = Field(None, description="Overrides the goal's default split")


class OneRepMaxRequest(BaseModel):
    """Payload for the one-rep-max calculator."""

    weight: float = Field(..., examples=[100.0], description="Weight lifted in kilograms (1-1000)")
    reps: float = Field(..., examples=[5], description="Repetitions performed (1-30)")


class WaterIntakeRequest(BaseModel):
    """Payload for the water intake calculator."""

    weight: float = Field(..., examples=[70.0], description="Weight in kilograms (20-500)")
    activity_level: str = Field("sedentary", examples=["moderate"], description="Activity level: sedentary, light, moderate, active, athlete")
    climate: str = Field("normal", examples=["hot"], description="Climate: normal, hot")
    high_protein: bool = Field(False, description="Following a high-protein diet")
    pregnant: bool = Field(False)
    breastfeeding: bool = Field(False)
