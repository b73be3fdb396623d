"""Tests for weekly schedule generation."""

import pytest

from src.core.schedule_generator import (
    TARGET_SPLITS,
    day_template,
    generate_schedule,
)


@pytest.mark.parametrize("days", [3, 4, 5, 6])
def test_schedule_has_one_slot_per_day(make_profile, days):
    schedule = generate_schedule(make_profile(training_days_per_week=days))
    assert len(schedule) == days
    assert [slot.day for slot in schedule] == [f"Day {i + 1}" for i in range(days)]


@pytest.mark.parametrize("days", [0, 2, 7])
def test_unsupported_day_count_gives_empty_schedule(profile, days):
    assert generate_schedule(profile, days=days) == []
    assert day_template(days) == []


def test_four_day_template_labels():
    labels = [slot.label for slot in day_template(4)]
    assert labels == ["Upper (Strength)", "Lower (Strength)", "Upper (Volume)", "Lower (Volume) + Cardio"]


def test_full_body_day_composition(make_profile):
    schedule = generate_schedule(make_profile(training_days_per_week=3, goal="lose"))
    day = schedule[0]
    splits = [ex.split_type for ex in day.exercises]
    assert splits.count("push") == 2
    assert splits.count("pull") == 2
    assert splits.count("legs") == 2
    assert splits.count("core") == 1
    assert splits.count("cardio") == 1


def test_upper_day_composition(profile):
    day = generate_schedule(profile)[0]
    splits = [ex.split_type for ex in day.exercises]
    assert splits == ["push"] * 3 + ["pull"] * 3 + ["core"] * 2 + ["cardio"]


@pytest.mark.parametrize("injury", ["Knee", "Back", "Shoulder"])
def test_injury_contraindications_are_excluded(make_profile, injury):
    schedule = generate_schedule(make_profile(injury=injury, training_days_per_week=6))
    for slot in schedule:
        for ex in slot.exercises:
            assert injury not in ex.contraindications


def test_age_limits_are_respected(make_profile):
    schedule = generate_schedule(make_profile(age=60, training_days_per_week=5))
    exercises = [ex for slot in schedule for ex in slot.exercises]
    assert exercises
    for ex in exercises:
        assert ex.min_age <= 60 <= ex.max_age
        assert ex.level != "advanced"


def test_home_location_excludes_gym_only(make_profile):
    schedule = generate_schedule(make_profile(location="home", training_days_per_week=6))
    for slot in schedule:
        for ex in slot.exercises:
            assert ex.location_requirement != "gym-only"


@pytest.mark.parametrize("days", [3, 4, 5, 6])
def test_main_lifts_ordered_by_intensity(make_profile, days):
    schedule = generate_schedule(make_profile(training_days_per_week=days))
    for slot in schedule:
        for split in TARGET_SPLITS[slot.split_type]:
            intensities = [ex.intensity for ex in slot.exercises if ex.split_type == split]
            assert intensities == sorted(intensities, reverse=True)


@pytest.mark.parametrize("days", [3, 4, 5, 6])
def test_no_duplicate_exercise_within_a_day(make_profile, days):
    for slot in generate_schedule(make_profile(training_days_per_week=days)):
        ids = [ex.id for ex in slot.exercises]
        assert len(ids) == len(set(ids))


def test_generation_is_deterministic(make_profile):
    profile = make_profile(training_days_per_week=5, injury="Back")
    first = generate_schedule(profile)
    second = generate_schedule(profile)
    assert [[ex.id for ex in s.exercises] for s in first] == [[ex.id for ex in s.exercises] for s in second]


def test_cardio_only_on_tagged_day_for_strength_goal(make_profile):
    schedule = generate_schedule(make_profile(goal="gain"))
    cardio_counts = [sum(ex.split_type == "cardio" for ex in slot.exercises) for slot in schedule]
    assert cardio_counts == [0, 0, 0, 1]


def test_cardio_every_day_for_endurance_goal(make_profile):
    schedule = generate_schedule(make_profile(goal="endurance", training_days_per_week=5))
    for slot in schedule:
        assert sum(ex.split_type == "cardio" for ex in slot.exercises) == 1


def test_main_lifts_tie_break_in_catalog_order(make_profile, make_catalog, raw_exercise):
    catalog = make_catalog(
        raw_exercise("ex_easy", level="beginner"),
        raw_exercise("ex_hard_1", level="advanced"),
        raw_exercise("ex_medium", level="intermediate"),
        raw_exercise("ex_hard_2", level="advanced"),
        raw_exercise("ex_easy_2", level="beginner"),
    )
    profile = make_profile(goal="maintain", training_days_per_week=5)
    push_day = generate_schedule(profile, catalog=catalog)[0]
    assert [ex.id for ex in push_day.exercises] == ["ex_hard_1", "ex_hard_2", "ex_medium"]


def test_core_accessories_follow_catalog_order(make_profile, make_catalog, raw_exercise):
    catalog = make_catalog(
        raw_exercise("ex_chest"),
        raw_exercise("ex_core_1", target_muscle="core", level="beginner"),
        raw_exercise("ex_core_2", target_muscle="core", level="advanced"),
        raw_exercise("ex_core_3", target_muscle="core"),
    )
    profile = make_profile(goal="maintain", training_days_per_week=5)
    push_day = generate_schedule(profile, catalog=catalog)[0]
    assert [ex.id for ex in push_day.exercises] == ["ex_chest", "ex_core_1", "ex_core_2"]


def test_cardio_rotates_by_day_index(make_profile, make_catalog, raw_exercise):
    catalog = make_catalog(
        raw_exercise("ex_run", category="cardio"),
        raw_exercise("ex_bike", category="cardio"),
    )
    profile = make_profile(goal="endurance", training_days_per_week=5)
    schedule = generate_schedule(profile, catalog=catalog)
    picks = [[ex.id for ex in slot.exercises] for slot in schedule]
    assert picks == [["ex_run"], ["ex_bike"], ["ex_run"], ["ex_bike"], ["ex_run"]]


def test_days_argument_overrides_profile(profile):
    assert len(generate_schedule(profile, days=6)) == 6


def test_exercises_are_shared_with_catalog(profile):
    from src.core.catalog import get_exercise

    slot = generate_schedule(profile)[0]
    for ex in slot.exercises:
        assert ex is get_exercise(ex.id)
