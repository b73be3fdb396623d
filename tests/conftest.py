import pytest

from src.core.catalog import build_catalog
from src.models.user_profile import UserProfile


def _raw_exercise(exercise_id, category="strength", target_muscle="chest", **overrides):
    entry = {
        "id": exercise_id,
        "name": exercise_id.replace("_", " ").title(),
        "category": category,
        "target_muscle": target_muscle if category == "strength" else None,
        "equipment": "bodyweight",
        "level": "intermediate",
        "excluded_injuries": [],
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def raw_exercise():
    """Factory for source-schema exercise entries."""
    return _raw_exercise


@pytest.fixture
def make_catalog():
    def _make(*entries):
        return build_catalog(entries)

    return _make


@pytest.fixture
def make_profile():
    def _make(**overrides):
        data = {
            "gender": "male",
            "age": 30,
            "height_cm": 175,
            "weight_kg": 70,
            "activity_level": "active",
            "goal": "lose",
            "location": "gym",
            "injury": "None",
            "training_days_per_week": 4,
        }
        data.update(overrides)
        return UserProfile(**data)

    return _make


@pytest.fixture
def profile(make_profile):
    return make_profile()


@pytest.fixture
def exercises(make_catalog, raw_exercise):
    """Two-exercise list for session tests."""
    return list(make_catalog(raw_exercise("ex_a"), raw_exercise("ex_b")))
