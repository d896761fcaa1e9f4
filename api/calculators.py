"""Calculator API router.

One POST endpoint per calculator plus read-only reference tables. The
endpoints only unpack payloads; validation and formulas live in the
calculator services, which raise `ValidationError` for rejected input.
"""

from fastapi import APIRouter
from typing import List
from core.logger import get_logger
from schemas.calculator_schema import (
    BmiRequest,
    BmrRequest,
    IdealWeightRequest,
    LeanBodyMassRequest,
    MacrosRequest,
    OneRepMaxRequest,
    TdeeRequest,
    WaterIntakeRequest,
)
from schemas.result_schema import (
    BmiResult,
    BmrResult,
    BodyFatResult,
    IdealWeightResult,
    LeanBodyMassResult,
    MacrosResult,
    OneRepMaxResult,
    TdeeResult,
    WaterIntakeResult,
)
from services.body_composition import body_composition_calculator, get_bmi_ranges, get_body_fat_ranges
from services.fitness_calculator import fitness_calculator
from services.nutrition_calculator import nutrition_calculator
from services.reference_tables import (
    ACTIVITY_DESCRIPTIONS,
    ACTIVITY_MULTIPLIERS,
    EXERCISE_WATER_ML,
    GOAL_ADJUSTMENTS,
)

logger = get_logger("api.calculators")
router = APIRouter(prefix="/api/calculators", tags=["calculators"])


@router.post("/bmi", response_model=BmiResult)
def calculate_bmi(payload: BmiRequest):
    """Return BMI, its category and the healthy weight range for the height."""
    logger.info("BMI request: weight=%s height=%s", payload.weight, payload.height)
    return body_composition_calculator.calculate_bmi(payload.weight, payload.height)


@router.post("/bmr", response_model=BmrResult)
def calculate_bmr(payload: BmrRequest):
    """Return BMR and the TDEE at every activity level."""
    logger.info("BMR request: age=%s gender=%s", payload.age, payload.gender)
    return nutrition_calculator.calculate_bmr(payload.weight, payload.height, payload.age, payload.gender)


@router.post("/tdee", response_model=TdeeResult)
def calculate_tdee(payload: TdeeRequest):
    """Return TDEE for one activity level with a default macro split."""
    logger.info("TDEE request: activity_level=%s", payload.activity_level)
    return nutrition_calculator.calculate_tdee(
        payload.weight, payload.height, payload.age, payload.gender, payload.activity_level
    )


@router.post("/body-fat", response_model=BodyFatResult)
def calculate_body_fat(payload: BmrRequest):
    """Return the Deurenberg body fat estimate with fat and lean mass."""
    logger.info("Body fat request: age=%s gender=%s", payload.age, payload.gender)
    return body_composition_calculator.calculate_body_fat(
        payload.weight, payload.height, payload.age, payload.gender
    )


@router.post("/lean-body-mass", response_model=LeanBodyMassResult)
def calculate_lean_body_mass(payload: LeanBodyMassRequest):
    """Return Boer, Hume and (optionally) body-fat-based lean mass estimates."""
    logger.info("Lean body mass request: body_fat_percentage=%s", payload.body_fat_percentage)
    return body_composition_calculator.calculate_lean_body_mass(
        payload.weight, payload.height, payload.gender, payload.body_fat_percentage
    )


@router.post("/ideal-weight", response_model=IdealWeightResult)
def calculate_ideal_weight(payload: IdealWeightRequest):
    """Return four ideal weight formulas and the healthy BMI weight range."""
    logger.info("Ideal weight request: height=%s gender=%s", payload.height, payload.gender)
    return body_composition_calculator.calculate_ideal_weight(payload.height, payload.gender)


@router.post("/macros", response_model=MacrosResult)
def calculate_macros(payload: MacrosRequest):
    """Return the goal-adjusted calorie target split into macros."""
    logger.info("Macros request: tdee=%s goal=%s", payload.tdee, payload.goal)
    custom_split = payload.custom_split.model_dump() if payload.custom_split else None
    return nutrition_calculator.calculate_macros(payload.tdee, payload.goal, custom_split)


@router.post("/one-rep-max", response_model=OneRepMaxResult)
def calculate_one_rep_max(payload: OneRepMaxRequest):
    """Return 1RM estimates and the percentage-of-max table."""
    logger.info("1RM request: weight=%s reps=%s", payload.weight, payload.reps)
    return fitness_calculator.calculate_one_rep_max(payload.weight, payload.reps)


@router.post("/water-intake", response_model=WaterIntakeResult)
def calculate_water_intake(payload: WaterIntakeRequest):
    """Return the daily water target with its adjustments."""
    logger.info("Water intake request: activity_level=%s climate=%s", payload.activity_level, payload.climate)
    return fitness_calculator.calculate_water_intake(
        payload.weight,
        activity_level=payload.activity_level,
        climate=payload.climate,
        high_protein=payload.high_protein,
        pregnant=payload.pregnant,
        breastfeeding=payload.breastfeeding,
    )


@router.get("/bmi/ranges", response_model=List[dict])
def bmi_ranges():
    """Return the BMI category bands."""
    return get_bmi_ranges()


@router.get("/body-fat/ranges/{gender}", response_model=List[dict])
def body_fat_ranges(gender: str):
    """Return the body fat category bands for a gender."""
    return get_body_fat_ranges(gender)


@router.get("/reference")
def reference_tables():
    """Return the activity, goal and hydration lookup tables."""
    return {
        "activity_levels": [
            {
                "level": level,
                "multiplier": multiplier,
                "description": ACTIVITY_DESCRIPTIONS[level],
                "exercise_water_ml": EXERCISE_WATER_ML[level],
            }
            for level, multiplier in ACTIVITY_MULTIPLIERS.items()
        ],
        "goals": [
            {"goal": goal, "calorie_adjustment": delta, "split": dict(split)}
            for goal, (delta, split) in GOAL_ADJUSTMENTS.items()
        ],
    }
