"""Pydantic schema package for request payloads and calculator results."""

from .calculator_schema import (
    BmiRequest,
    BmrRequest,
    TdeeRequest,
    LeanBodyMassRequest,
    IdealWeightRequest,
    MacrosRequest,
    OneRepMaxRequest,
    WaterIntakeRequest,
)
from .result_schema import (
    BmiResult,
    BmrResult,
    TdeeResult,
    BodyFatResult,
    LeanBodyMassResult,
    IdealWeightResult,
    MacrosResult,
    OneRepMaxResult,
    WaterIntakeResult,
)
from .catalog_schema import CalculatorCategory, CalculatorDescriptor

__all__ = [
    "BmiRequest",
    "BmrRequest",
    "TdeeRequest",
    "LeanBodyMassRequest",
    "IdealWeightRequest",
    "MacrosRequest",
    "OneRepMaxRequest",
    "WaterIntakeRequest",
    "BmiResult",
    "BmrResult",
    "TdeeResult",
    "BodyFatResult",
    "LeanBodyMassResult",
    "IdealWeightResult",
    "MacrosResult",
    "OneRepMaxResult",
    "WaterIntakeResult",
    "CalculatorCategory",
    "CalculatorDescriptor",
]
