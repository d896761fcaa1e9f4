"""Static lookup tables shared by the calculators.

Every table here is built once at import time and never mutated; the public
names are read-only mapping proxies or tuples.
"""

from types import MappingProxyType

# Input ranges (inclusive), also used by the calculator catalog
WEIGHT_RANGE = (20, 500)
HEIGHT_RANGE = (50, 300)
AGE_RANGE = (1, 120)
BODY_FAT_INPUT_RANGE = (1, 70)
LIFT_WEIGHT_RANGE = (1, 1000)
REPS_RANGE = (1, 30)
TDEE_RANGE = (1000, 6000)

ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "athlete")

ACTIVITY_MULTIPLIERS = MappingProxyType({
    "sedentary": 1.2,   # little or no exercise
    "light": 1.375,     # light exercise 1-3 days/week
    "moderate": 1.55,   # moderate exercise 3-5 days/week
    "active": 1.725,    # hard exercise 6-7 days/week
    "athlete": 1.9,     # very hard exercise, physical job
})

ACTIVITY_DESCRIPTIONS = MappingProxyType({
    "sedentary": "Little or no exercise",
    "light": "Light exercise 1-3 days/week",
    "moderate": "Moderate exercise 3-5 days/week",
    "active": "Hard exercise 6-7 days/week",
    "athlete": "Very hard exercise, physical job",
})

# (upper bound, category, label); first band with value < upper bound wins
BMI_BANDS = (
    (18.5, "underweight", "Underweight"),
    (24.9, "normal", "Normal"),
    (29.9, "overweight", "Overweight"),
    (float("inf"), "obese", "Obese"),
)

# Bounds as shown to users: (category, label, min, max)
BMI_PRINTED_RANGES = (
    ("underweight", "Underweight", None, 18.5),
    ("normal", "Normal", 18.5, 24.9),
    ("overweight", "Overweight", 25, 29.9),
    ("obese", "Obese", 30, None),
)

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

BODY_FAT_BANDS = MappingProxyType({
    "male": (
        (6, "essential", "Essential Fat"),
        (14, "athletes", "Athletes"),
        (18, "fitness", "Fitness"),
        (25, "average", "Average"),
        (100, "obese", "Obese"),
    ),
    "female": (
        (14, "essential", "Essential Fat"),
        (21, "athletes", "Athletes"),
        (25, "fitness", "Fitness"),
        (32, "average", "Average"),
        (100, "obese", "Obese"),
    ),
})

BODY_FAT_CLAMP = (3, 60)

KCAL_PER_GRAM = MappingProxyType({"protein": 4, "carbs": 4, "fat": 9})

DEFAULT_MACRO_SPLIT = MappingProxyType({"protein": 30, "carbs": 40, "fat": 30})

GOALS = ("maintain", "lose", "gain", "custom")

# goal -> (calorie delta, default split)
GOAL_ADJUSTMENTS = MappingProxyType({
    "maintain": (0, DEFAULT_MACRO_SPLIT),
    "lose": (-500, MappingProxyType({"protein": 40, "carbs": 30, "fat": 30})),
    "gain": (300, MappingProxyType({"protein": 30, "carbs": 45, "fat": 25})),
    "custom": (0, DEFAULT_MACRO_SPLIT),
})

# (reps, percentage of 1RM)
REP_MAX_PERCENTAGES = (
    (1, 100),
    (2, 95),
    (3, 93),
    (4, 90),
    (5, 87),
    (6, 85),
    (8, 80),
    (10, 75),
    (12, 70),
    (15, 65),
)

WATER_ML_PER_KG = 33
GLASS_ML = 250
CLIMATES = ("normal", "hot")

EXERCISE_WATER_ML = MappingProxyType({
    "sedentary": 0,
    "light": 250,
    "moderate": 500,
    "active": 750,
    "athlete": 1000,
})

HOT_CLIMATE_WATER_ML = 750
HIGH_PROTEIN_WATER_ML = 375
PREGNANCY_WATER_ML = 300
BREASTFEEDING_WATER_ML = 700
