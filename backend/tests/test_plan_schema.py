import pytest
from pydantic import ValidationError

from workout_widget.schemas.plan import Exercise, Plan

def test_full_exercise_from_wire_names():
    ex = Exercise.model_validate({
        "name": "Barbell Bench Press", "sets": 4, "reps": "6-8",
        "weight": "185 lbs", "restSeconds": 180, "notes": "Keep chest up",
    })
    assert ex.rest_seconds == 180
    assert ex.sets_reps_label == "4 × 6-8"
    assert ex.set_count == 4

def test_absent_fields_are_absent():
    ex = Exercise.model_validate({"name": "Tricep Dips"})
    assert ex.sets is None and ex.reps is None
    assert ex.weight is None and ex.notes is None
    assert ex.rest_seconds == 0
    assert ex.set_count == 0
    assert ex.sets_reps_label is None

def test_unusable_optional_values_are_treated_as_absent():
    ex = Exercise.model_validate({
        "name": "Odd", "sets": "three", "reps": [1, 2], "weight": 50,
        "restSeconds": -10, "notes": "  ",
    })
    assert ex.sets is None
    assert ex.reps is None
    assert ex.weight is None
    assert ex.notes is None
    assert ex.rest_seconds == 0

def test_integer_reps_and_partial_labels():
    assert Exercise(name="Squat", sets=5, reps=5).sets_reps_label == "5 × 5"
    assert Exercise(name="Plank", sets=3).sets_reps_label == "3 sets"
    assert Exercise(name="Burpees", reps="max").sets_reps_label == "max reps"

def test_name_is_required():
    with pytest.raises(ValidationError):
        Exercise.model_validate({"sets": 3})

def test_unknown_keys_ignored():
    plan = Plan.model_validate({"name": "Pull", "exercises": [{"name": "Row", "id": "abc"}], "theme": "dark"})
    assert plan.name == "Pull"
    assert plan.exercises[0].name == "Row"

def test_key_uses_name_and_position():
    plan = Plan(name="Arms", exercises=[Exercise(name="Curl"), Exercise(name="Curl")])
    assert plan.key_for(0) == "Curl-0"
    assert plan.key_for(1) == "Curl-1"

def test_plans_compare_by_value():
    data = {"name": "A", "exercises": [{"name": "Row", "sets": 3}]}
    assert Plan.model_validate(data) == Plan.model_validate(data)
    assert Plan.model_validate(data) != Plan.model_validate({**data, "name": "B"})

def test_plan_name_is_required():
    with pytest.raises(ValidationError):
        Plan.model_validate({"exercises": [{"name": "Row"}]})
    assert Plan.model_validate({"name": "", "exercises": []}).name == ""
