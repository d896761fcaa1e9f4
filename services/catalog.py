"""Calculator catalog.

Static descriptors for every calculator the app offers, grouped the way the
front-end navigation shows them. Slider bounds come from the range tables
the calculators validate against.
"""

from typing import Dict, List

from core.exceptions import NotFoundError
from core.validation import GENDERS
from schemas.catalog_schema import CalculatorCategory, CalculatorDescriptor, CalculatorInput
from services.reference_tables import (
    ACTIVITY_LEVELS,
    AGE_RANGE,
    BODY_FAT_INPUT_RANGE,
    CLIMATES,
    GOALS,
    HEIGHT_RANGE,
    LIFT_WEIGHT_RANGE,
    REPS_RANGE,
    TDEE_RANGE,
    WEIGHT_RANGE,
)


def _slider(key, label, bounds, default, unit=None, step=1):
    low, high = bounds
    return CalculatorInput(key=key, label=label, type="slider", min=low, max=high,
                           step=step, default=default, unit=unit)


WEIGHT = _slider("weight", "Weight", WEIGHT_RANGE, 70, "kg", 0.5)
HEIGHT = _slider("height", "Height", HEIGHT_RANGE, 175, "cm")
AGE = _slider("age", "Age", AGE_RANGE, 30, "years")
GENDER = CalculatorInput(key="gender", label="Gender", type="gender", default="male", options=list(GENDERS))
ACTIVITY = CalculatorInput(key="activity_level", label="Activity Level", type="activity",
                           default="moderate", options=list(ACTIVITY_LEVELS))

_CATEGORIES = [
    ("body", "BODY", [
        dict(id="bmi", name="BMI", full_name="Body Mass Index", path="/bmi",
             description="Assess if you're at a healthy weight for your height",
             inputs=[WEIGHT, HEIGHT]),
        dict(id="body-fat", name="BF%", full_name="Body Fat Percentage", path="/body-fat",
             description="Estimate your body fat percentage",
             inputs=[WEIGHT, HEIGHT, AGE, GENDER]),
        dict(id="ideal-weight", name="IDEAL", full_name="Ideal Body Weight", path="/ideal-weight",
             description="Find your ideal weight range",
             inputs=[HEIGHT, GENDER]),
        dict(id="lean-body-mass", name="LBM", full_name="Lean Body Mass", path="/lean-body-mass",
             description="Calculate your lean muscle mass",
             inputs=[WEIGHT, HEIGHT, GENDER,
                     _slider("body_fat_percentage", "Body Fat", BODY_FAT_INPUT_RANGE, 20, "%")]),
    ]),
    ("energy", "ENERGY", [
        dict(id="bmr", name="BMR", full_name="Basal Metabolic Rate", path="/bmr",
             description="Calculate calories burned at rest",
             inputs=[WEIGHT, HEIGHT, AGE, GENDER]),
        dict(id="tdee", name="TDEE", full_name="Total Daily Energy", path="/tdee",
             description="Total calories burned daily",
             inputs=[WEIGHT, HEIGHT, AGE, GENDER, ACTIVITY]),
        dict(id="macros", name="MACRO", full_name="Macro Calculator", path="/macros",
             description="Protein, carbs & fat split",
             inputs=[_slider("tdee", "TDEE", TDEE_RANGE, 2500, "kcal", 50),
                     CalculatorInput(key="goal", label="Goal", type="choice",
                                     default="maintain", options=list(GOALS))]),
    ]),
    ("wellness", "WELLNESS", [
        dict(id="water-intake", name="H2O", full_name="Water Intake", path="/water-intake",
             description="Daily hydration needs",
             inputs=[WEIGHT,
                     CalculatorInput(key="activity_level", label="Activity Level", type="activity",
                                     default="sedentary", options=list(ACTIVITY_LEVELS)),
                     CalculatorInput(key="climate", label="Climate", type="choice",
                                     default="normal", options=list(CLIMATES)),
                     CalculatorInput(key="high_protein", label="High-protein diet", type="toggle", default=False),
                     CalculatorInput(key="pregnant", label="Pregnant", type="toggle", default=False),
                     CalculatorInput(key="breastfeeding", label="Breastfeeding", type="toggle", default=False)]),
    ]),
    ("strength", "STRENGTH", [
        dict(id="one-rep-max", name="1RM", full_name="One Rep Max", path="/one-rep-max",
             description="Calculate your maximum lift",
             inputs=[_slider("weight", "Weight Lifted", LIFT_WEIGHT_RANGE, 100, "kg", 2.5),
                     _slider("reps", "Reps", REPS_RANGE, 5, "reps")]),
    ]),
    ("coming-soon", "SOON", [
        dict(id="protein", name="PROT", full_name="Protein Calculator", path="/protein",
             description="Calculate optimal protein intake for your goals", coming_soon=True),
        dict(id="calories-burned", name="BURN", full_name="Calories Burned", path="/calories-burned",
             description="Calculate calories burned by activity (MET-based)", coming_soon=True),
        dict(id="heart-rate-zones", name="HR", full_name="Heart Rate Zones", path="/heart-rate-zones",
             description="Find your training heart rate zones", coming_soon=True),
        dict(id="pace-calculator", name="PACE", full_name="Pace Calculator", path="/pace-calculator",
             description="Convert pace, speed & race predictions", coming_soon=True),
        dict(id="waist-hip-ratio", name="WHR", full_name="Waist-to-Hip Ratio", path="/waist-hip-ratio",
             description="Assess cardiovascular health risk", coming_soon=True),
        dict(id="sleep-calculator", name="SLEEP", full_name="Sleep Calculator", path="/sleep-calculator",
             description="Optimal sleep duration by age", coming_soon=True),
    ]),
]

CATEGORIES: List[CalculatorCategory] = [
    CalculatorCategory(
        id=category_id,
        name=name,
        calculators=[CalculatorDescriptor(category=category_id, **item) for item in items],
    )
    for category_id, name, items in _CATEGORIES
]

_BY_ID: Dict[str, CalculatorDescriptor] = {
    calc.id: calc for category in CATEGORIES for calc in category.calculators
}


def list_categories() -> List[CalculatorCategory]:
    """Return every category with its calculators, in navigation order."""
    return list(CATEGORIES)


def get_calculator(calculator_id: str) -> CalculatorDescriptor:
    """Look up one calculator descriptor by id.

    Raises:
        NotFoundError: If no calculator has this id.
    """
    try:
        return _BY_ID[calculator_id]
    except KeyError:
        raise NotFoundError("Calculator", calculator_id) from None
