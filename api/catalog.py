"""Catalog API router.

Exposes the static calculator descriptors used to build navigation and
input forms.
"""

from fastapi import APIRouter
from typing import List
from core.logger import get_logger
from schemas.catalog_schema import CalculatorCategory, CalculatorDescriptor
from services.catalog import get_calculator, list_categories

logger = get_logger("api.catalog")
router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("", response_model=List[CalculatorCategory])
def get_catalog():
    """Return every calculator grouped by category."""
    return list_categories()


@router.get("/{calculator_id}", response_model=CalculatorDescriptor)
def get_calculator_descriptor(calculator_id: str):
    """Return one calculator descriptor.

    Raises:
        NotFoundError: If the calculator id is unknown.
    """
    logger.info("Catalog lookup: %s", calculator_id)
    return get_calculator(calculator_id)
