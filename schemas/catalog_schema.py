"""Schemas for the calculator catalog."""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union


class CalculatorInput(BaseModel):
    """Description of one input a calculator accepts."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    type: str
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    default: Union[float, str, bool]
    unit: Optional[str] = None
    options: List[str] = []


class CalculatorDescriptor(BaseModel):
    """Static description of a calculator: naming, route and inputs."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    full_name: str
    path: str
    category: str
    description: str
    coming_soon: bool = False
    inputs: List[CalculatorInput] = []


class CalculatorCategory(BaseModel):
    """Group of calculators shown together."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    calculators: List[CalculatorDescriptor]
