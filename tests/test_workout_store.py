import sqlite3

import pytest

from workoutapi.workout_store import (
    RecordNotFoundError,
    SQLWorkoutStore,
    Workout,
    WorkoutEntry,
)

SCHEMA = """
CREATE TABLE workouts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    duration_minutes INTEGER NOT NULL,
    calories_burned INTEGER
);
CREATE TABLE workout_entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    workout_id INTEGER NOT NULL REFERENCES workouts(id) ON DELETE CASCADE,
    exercise_name TEXT NOT NULL,
    sets INTEGER NOT NULL CHECK (sets >= 0),
    reps INTEGER,
    duration_seconds INTEGER,
    weight REAL,
    notes TEXT,
    order_index INTEGER NOT NULL
);
"""


@pytest.fixture
def db():
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(SCHEMA)
    yield conn
    conn.close()


@pytest.fixture
def store(db):
    return SQLWorkoutStore(db)


def make_workout():
    return Workout(
        title="Leg day",
        description="Squats and lunges",
        duration_minutes=45,
        calories_burned=400,
        entries=[
            WorkoutEntry(exercise_name="Lunges", sets=3, reps=12, notes="slow", order_index=2),
            WorkoutEntry(exercise_name="Squats", sets=4, reps=10, weight=80.5, order_index=1),
            WorkoutEntry(exercise_name="Plank", sets=2, duration_seconds=60, order_index=3),
        ],
    )


def test_create_assigns_ids(store):
    created = store.create_workout(make_workout())
    assert created.id > 0
    ids = [entry.id for entry in created.entries]
    assert all(i > 0 for i in ids)
    assert len(set(ids)) == len(ids)


def test_create_then_get_round_trip(store):
    created = store.create_workout(make_workout())
    fetched = store.get_workout_by_id(created.id)
    assert fetched.title == created.title
    assert fetched.description == created.description
    assert fetched.duration_minutes == created.duration_minutes
    assert fetched.calories_burned == created.calories_burned
    expected = sorted(created.entries, key=lambda e: e.order_index)
    assert fetched.entries == expected


def test_entries_come_back_in_order_index_order(store):
    created = store.create_workout(make_workout())
    fetched = store.get_workout_by_id(created.id)
    orders = [entry.order_index for entry in fetched.entries]
    assert orders == sorted(orders)


def test_get_missing_returns_none(store):
    assert store.get_workout_by_id(999) is None


def test_failed_create_rolls_back(store, db):
    workout = Workout(
        title="Broken",
        duration_minutes=10,
        entries=[WorkoutEntry(exercise_name="Bad", sets=-1, order_index=1)],
    )
    with pytest.raises(sqlite3.IntegrityError):
        store.create_workout(workout)
    assert db.execute("SELECT COUNT(*) FROM workouts").fetchone()[0] == 0


def test_update_replaces_fields_and_entries(store):
    created = store.create_workout(make_workout())
    created.title = "Upper body"
    created.entries = [WorkoutEntry(exercise_name="Bench press", sets=5, reps=5, order_index=1)]
    store.update_workout(created)
    fetched = store.get_workout_by_id(created.id)
    assert fetched.title == "Upper body"
    assert [e.exercise_name for e in fetched.entries] == ["Bench press"]


def test_update_missing_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.update_workout(Workout(id=42, title="Ghost"))


def test_delete_removes_workout(store):
    created = store.create_workout(make_workout())
    store.delete_workout(created.id)
    assert store.get_workout_by_id(created.id) is None


def test_delete_missing_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.delete_workout(12345)


def test_to_dict_from_dict_round_trip():
    workout = make_workout()
    assert Workout.from_dict(workout.to_dict()) == workout


def test_to_dict_uses_json_field_names():
    entry = WorkoutEntry(exercise_name="Row", sets=3)
    assert set(entry.to_dict()) == {
        "id",
        "exercise_name",
        "sets",
        "reps",
        "duration_seconds",
        "weight",
        "notes",
        "order_index",
    }


def test_from_dict_missing_fields_take_zero_values():
    workout = Workout.from_dict({"title": "Walk", "entries": None})
    assert workout == Workout(title="Walk")


@pytest.mark.parametrize(
    "payload",
    [
        {"title": 5},
        {"duration_minutes": "ten"},
        {"duration_minutes": 1.5},
        {"entries": "nope"},
        {"entries": [{"sets": True}]},
        {"entries": [{"weight": "heavy"}]},
        ["not", "an", "object"],
    ],
)
def test_from_dict_rejects_wrong_types(payload):
    with pytest.raises(ValueError):
        Workout.from_dict(payload)