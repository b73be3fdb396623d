"""Tests for per-user persistence."""

import pytest

from src.core.planner import build_plan
from src.memory.kv_store import InMemoryKeyValueStore
from src.memory.plan_store import PlanStore
from src.models.user_profile import ProfileForm
from src.models.workout_log import CompletedExercises


class FailingStore:
    def get(self, key):
        raise ConnectionError("storage offline")

    def put(self, key, value):
        raise ConnectionError("storage offline")

    def delete(self, key):
        raise ConnectionError("storage offline")


@pytest.fixture
def backend():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(backend):
    return PlanStore(backend, "user@example.com")


def test_keys_are_scoped_by_user(store):
    assert store.key("plan") == "fitness_pro:user@example.com:plan"


def test_nothing_saved_yet(store):
    assert store.load_form() is None
    assert store.load_plan() is None
    assert store.load_completed().keys == set()


def test_form_round_trip(store):
    form = ProfileForm(step=1, user_name="Alex", age=30, height_cm=175, weight_kg=70, goal="gain")
    assert store.save_form(form)
    assert store.load_form() == form


def test_plan_round_trip(store, profile):
    plan = build_plan(profile)
    assert store.save_plan(plan)
    loaded = store.load_plan()
    assert loaded.calorie_target == plan.calorie_target
    assert loaded.bmi_category == plan.bmi_category
    assert [[ex.id for ex in d.exercises] for d in loaded.schedule] == [
        [ex.id for ex in d.exercises] for d in plan.schedule
    ]
    assert loaded.schedule[0].exercises[0] == plan.schedule[0].exercises[0]


def test_plan_snapshot_stores_exercise_ids(store, backend, profile):
    plan = build_plan(profile)
    store.save_plan(plan)
    raw = backend.get(store.key("plan"))
    assert raw["schedule"][0]["exercises"] == [ex.id for ex in plan.schedule[0].exercises]


def test_unknown_exercise_ids_are_dropped(store, backend, profile):
    plan = build_plan(profile)
    store.save_plan(plan)
    raw = backend.get(store.key("plan"))
    raw["schedule"][0]["exercises"].insert(0, "ex_removed_from_catalog")
    backend.put(store.key("plan"), raw)

    loaded = store.load_plan()
    assert [ex.id for ex in loaded.schedule[0].exercises] == [ex.id for ex in plan.schedule[0].exercises]


def test_completed_round_trip(store):
    completed = CompletedExercises()
    completed.toggle(0, "ex_push_up")
    completed.toggle(2, "ex_plank")
    assert store.save_completed(completed)
    assert store.load_completed().keys == {"0_ex_push_up", "2_ex_plank"}


def test_corrupt_data_reads_as_absent(store, backend):
    backend.put_raw(store.key("plan"), "{not json")
    backend.put_raw(store.key("form"), "[1, 2")
    assert store.load_plan() is None
    assert store.load_form() is None


def test_wrong_shape_reads_as_absent(store, backend):
    backend.put(store.key("plan"), ["not", "a", "plan"])
    backend.put(store.key("done"), {"0_ex_push_up": True})
    assert store.load_plan() is None
    assert store.load_completed().keys == set()


def test_invalid_form_fields_are_dropped(store, backend):
    backend.put(store.key("form"), {"step": 2, "age": "thirty", "goal": "gain", "injury": "Elbow"})
    form = store.load_form()
    assert form.step == 2
    assert form.goal == "gain"
    assert form.age is None
    assert form.injury == "None"


def test_failing_store_never_raises(profile):
    store = PlanStore(FailingStore(), "user")
    assert store.save_form(ProfileForm()) is False
    assert store.save_plan(build_plan(profile)) is False
    assert store.load_plan() is None
    assert store.load_form() is None
    assert store.load_completed().keys == set()
    store.clear()


def test_clear(store, backend, profile):
    store.save_form(ProfileForm())
    store.save_plan(build_plan(profile))
    store.save_completed(CompletedExercises(keys={"0_ex_plank"}))
    other = PlanStore(backend, "someone-else")
    other.save_form(ProfileForm())

    store.clear()
    for name in ("form", "plan", "done"):
        assert backend.get(store.key(name)) is None
    assert other.load_form() == ProfileForm()
