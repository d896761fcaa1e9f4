"""End-to-end tests for the calculator endpoints."""
from fastapi.testclient import TestClient

from main import app
from api.calculators import calculate_lean_body_mass, calculate_macros
from schemas.calculator_schema import LeanBodyMassRequest, MacroSplitRequest, MacrosRequest

client = TestClient(app)


def test_health():
    """Test that the health endpoint reports healthy."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_bmi_endpoint():
    """Test the BMI endpoint response body."""
    response = client.post("/api/calculators/bmi", json={"weight": 70, "height": 175})
    assert response.status_code == 200
    assert response.json() == {
        "bmi": 22.9,
        "category": "normal",
        "healthy_range": {"min": 56.7, "max": 76.3},
    }


def test_bmr_endpoint_lists_all_activity_levels():
    """Test that the BMR endpoint lists every activity level in order."""
    response = client.post(
        "/api/calculators/bmr",
        json={"weight": 80, "height": 180, "age": 30, "gender": "male"},
    )
    body = response.json()
    assert body["bmr"] == 1780
    assert list(body["tdee_by_activity_level"]) == ["sedentary", "light", "moderate", "active", "athlete"]


def test_tdee_endpoint():
    """Test the TDEE endpoint."""
    response = client.post(
        "/api/calculators/tdee",
        json={"weight": 80, "height": 180, "age": 30, "gender": "male", "activity_level": "moderate"},
    )
    body = response.json()
    assert body["tdee"] == 2759
    assert body["macros"]["carbs"]["grams"] == 276


def test_body_fat_endpoint():
    """Test the body fat endpoint."""
    response = client.post(
        "/api/calculators/body-fat",
        json={"weight": 70, "height": 175, "age": 30, "gender": "female"},
    )
    assert response.json()["percentage"] == 29.0


def test_lean_body_mass_route_without_body_fat():
    """Test the LBM route without a body fat figure."""
    result = calculate_lean_body_mass(LeanBodyMassRequest(weight=80, height=180, gender="male"))
    assert result.from_body_fat is None
    assert result.average == 59.6


def test_ideal_weight_endpoint():
    """Test the ideal weight endpoint."""
    response = client.post("/api/calculators/ideal-weight", json={"height": 180, "gender": "male"})
    assert response.json()["devine"] == 75.0


def test_macros_route_with_custom_split():
    """Test the macros route with a custom split."""
    payload = MacrosRequest(
        tdee=2000, goal="lose", custom_split=MacroSplitRequest(protein=40, carbs=40, fat=20)
    )
    result = calculate_macros(payload)
    assert result.calories == 1500
    assert result.macros.fat.grams == 33


def test_one_rep_max_endpoint():
    """Test the one-rep-max endpoint."""
    response = client.post("/api/calculators/one-rep-max", json={"weight": 100, "reps": 5})
    body = response.json()
    assert body["average"] == 115
    assert len(body["percentages"]) == 10


def test_water_intake_endpoint_defaults():
    """Test the water intake endpoint with default options."""
    response = client.post("/api/calculators/water-intake", json={"weight": 70})
    body = response.json()
    assert body["total"] == 2310
    assert body["recommendation"] == "Good hydration level"


def test_reference_tables():
    """Test that the reference endpoint exposes the lookup tables."""
    body = client.get("/api/calculators/reference").json()
    athlete = next(a for a in body["activity_levels"] if a["level"] == "athlete")
    assert athlete["multiplier"] == 1.9
    assert athlete["exercise_water_ml"] == 1000
    lose = next(g for g in body["goals"] if g["goal"] == "lose")
    assert lose == {"goal": "lose", "calorie_adjustment": -500, "split": {"protein": 40, "carbs": 30, "fat": 30}}


def test_body_fat_ranges_endpoint():
    """Test the body fat ranges endpoint and its gender check."""
    response = client.get("/api/calculators/body-fat/ranges/female")
    assert [band["max"] for band in response.json()] == [14, 21, 25, 32, 100]
    assert client.get("/api/calculators/body-fat/ranges/other").status_code == 400


def test_catalog_endpoint():
    """Test the catalog endpoints."""
    body = client.get("/api/catalog").json()
    assert body[0]["id"] == "body"
    assert client.get("/api/catalog/tdee").json()["full_name"] == "Total Daily Energy"
