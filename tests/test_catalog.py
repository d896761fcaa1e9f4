"""Tests for the calculator catalog."""
import pytest

from core.exceptions import NotFoundError
from services.catalog import get_calculator, list_categories
from services.reference_tables import TDEE_RANGE, WEIGHT_RANGE


def test_catalog_groups_calculators():
    """Test that categories come in navigation order with every calculator listed."""
    categories = list_categories()
    assert [c.id for c in categories] == ["body", "energy", "wellness", "strength", "coming-soon"]
    implemented = [calc.id for c in categories for calc in c.calculators if not calc.coming_soon]
    assert sorted(implemented) == sorted([
        "bmi", "body-fat", "ideal-weight", "lean-body-mass",
        "bmr", "tdee", "macros", "water-intake", "one-rep-max",
    ])


def test_catalog_lists_all_coming_soon_calculators():
    """Test that every planned calculator is listed as coming soon."""
    coming_soon = next(c for c in list_categories() if c.id == "coming-soon")
    assert [calc.id for calc in coming_soon.calculators] == [
        "protein", "calories-burned", "heart-rate-zones",
        "pace-calculator", "waist-hip-ratio", "sleep-calculator",
    ]
    assert all(calc.coming_soon for calc in coming_soon.calculators)


def test_catalog_inputs_share_validator_ranges():
    """Test that slider bounds match the ranges the calculators enforce."""
    bmi = get_calculator("bmi")
    weight = next(i for i in bmi.inputs if i.key == "weight")
    assert (weight.min, weight.max) == WEIGHT_RANGE
    assert weight.unit == "kg"


def test_macros_tdee_slider_uses_tdee_range():
    """Test that the macros TDEE slider is bounded by the enforced TDEE range."""
    tdee = next(i for i in get_calculator("macros").inputs if i.key == "tdee")
    assert (tdee.min, tdee.max) == TDEE_RANGE


def test_coming_soon_calculators_have_no_inputs():
    """Test that placeholder calculators carry no inputs."""
    sleep = get_calculator("sleep-calculator")
    assert sleep.coming_soon is True
    assert sleep.inputs == []


def test_unknown_calculator_raises_404():
    """Test that an unknown id raises NotFoundError."""
    with pytest.raises(NotFoundError) as exc_info:
        get_calculator("stress-calculator")
    assert exc_info.value.status_code == 404
    assert "stress-calculator" in exc_info.value.message
