"""Tests for exercise catalog normalization."""

from src.core.catalog import EXERCISE_CATALOG, build_catalog, get_exercise


def test_catalog_ids_are_unique():
    ids = [ex.id for ex in EXERCISE_CATALOG]
    assert len(ids) == len(set(ids))


def test_catalog_covers_every_split():
    splits = {ex.split_type for ex in EXERCISE_CATALOG}
    assert {"push", "pull", "legs", "core", "cardio", "flexibility"} <= splits


def test_gym_machines_are_gym_only():
    for exercise_id in ("ex_leg_press", "ex_lat_pulldown", "ex_stationary_bike"):
        assert get_exercise(exercise_id).location_requirement == "gym-only"
    assert get_exercise("ex_push_up").location_requirement == "any"


def test_contraindications_are_capitalized():
    deadlift = get_exercise("ex_barbell_deadlift")
    assert deadlift.contraindications == frozenset({"Back", "Knee"})


def test_level_mapping():
    push_up = get_exercise("ex_push_up")
    assert push_up.intensity == 4
    assert (push_up.min_age, push_up.max_age) == (12, 75)
    assert push_up.level_label == "Easy"

    bench = get_exercise("ex_barbell_bench_press")
    assert bench.intensity == 9
    assert (bench.min_age, bench.max_age) == (16, 55)
    assert (bench.sets, bench.reps) == (4, "8-10")
    assert bench.impact_level == "High"


def test_split_by_target_muscle():
    assert get_exercise("ex_push_up").split_type == "push"
    assert get_exercise("ex_band_row").split_type == "pull"
    assert get_exercise("ex_glute_bridge").split_type == "legs"
    assert get_exercise("ex_dead_bug").split_type == "core"
    assert get_exercise("ex_kettlebell_swing").split_type == "push"


def test_cardio_entries():
    walk = get_exercise("ex_brisk_walk")
    assert walk.split_type == "cardio"
    assert (walk.sets, walk.reps) == (1, "15-20 min")
    assert walk.muscle_label == "Cardio"
    assert walk.impact_level == "Low"
    assert get_exercise("ex_jumping_jacks").impact_level == "High"


def test_get_exercise_unknown():
    assert get_exercise("ex_does_not_exist") is None


def test_build_catalog_skips_duplicates(raw_exercise):
    catalog = build_catalog([
        raw_exercise("ex_a", name="First"),
        raw_exercise("ex_b"),
        raw_exercise("ex_a", name="Second"),
    ])
    assert [ex.id for ex in catalog] == ["ex_a", "ex_b"]
    assert catalog[0].name == "First"
    assert isinstance(catalog, tuple)


def test_allows_age_is_inclusive():
    push_up = get_exercise("ex_push_up")
    assert push_up.allows_age(12)
    assert push_up.allows_age(75)
    assert not push_up.allows_age(76)
