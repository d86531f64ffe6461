"""Workout records and a SQL-backed store for them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import closing, contextmanager
from dataclasses import dataclass, field
from typing import Any


class RecordNotFoundError(LookupError):
    """Raised when a statement that must touch a row touched none."""


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _optional_int_field(data: Mapping[str, Any], key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _int_field(data, key)


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_float_field(data: Mapping[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


@dataclass
class WorkoutEntry:
    """One exercise performed as part of a workout."""

    exercise_name: str = ""
    sets: int = 0
    reps: int | None = None
    duration_seconds: int | None = None
    weight: float | None = None
    notes: str = ""
    order_index: int = 0
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "exercise_name": self.exercise_name,
            "sets": self.sets,
            "reps": self.reps,
            "duration_seconds": self.duration_seconds,
            "weight": self.weight,
            "notes": self.notes,
            "order_index": self.order_index,
        }

    @classmethod
    def from_dict(cls, data: Any) -> WorkoutEntry:
        data = _require_mapping(data)
        return cls(
            id=_int_field(data, "id"),
            exercise_name=_str_field(data, "exercise_name"),
            sets=_int_field(data, "sets"),
            reps=_optional_int_field(data, "reps"),
            duration_seconds=_optional_int_field(data, "duration_seconds"),
            weight=_optional_float_field(data, "weight"),
            notes=_str_field(data, "notes"),
            order_index=_int_field(data, "order_index"),
        )


@dataclass
class Workout:
    """A workout session together with its entries."""

    title: str = ""
    description: str = ""
    duration_minutes: int = 0
    calories_burned: int = 0
    entries: list[WorkoutEntry] = field(default_factory=list)
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "duration_minutes": self.duration_minutes,
            "calories_burned": self.calories_burned,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Workout:
        data = _require_mapping(data)
        raw_entries = data.get("entries")
        if raw_entries is None:
            raw_entries = []
        elif not isinstance(raw_entries, list):
            raise ValueError("field 'entries' must be a list")
        return cls(
            id=_int_field(data, "id"),
            title=_str_field(data, "title"),
            description=_str_field(data, "description"),
            duration_minutes=_int_field(data, "duration_minutes"),
            calories_burned=_int_field(data, "calories_burned"),
            entries=[WorkoutEntry.from_dict(item) for item in raw_entries],
        )


_INSERT_WORKOUT = """
INSERT INTO workouts (title, description, duration_minutes, calories_burned)
VALUES (?, ?, ?, ?)
"""

_INSERT_ENTRY = """
INSERT INTO workout_entries (workout_id, exercise_name, sets, reps, duration_seconds, weight, notes, order_index)
VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""

_SELECT_WORKOUT = """
SELECT id, title, description, duration_minutes, calories_burned
FROM workouts
WHERE id = ?
"""

_SELECT_ENTRIES = """
SELECT id, exercise_name, sets, reps, duration_seconds, weight, notes, order_index
FROM workout_entries
WHERE workout_id = ?
ORDER BY order_index
"""

_UPDATE_WORKOUT = """
UPDATE workouts
SET title = ?, description = ?, duration_minutes = ?, calories_burned = ?
WHERE id = ?
"""

_DELETE_ENTRIES = "DELETE FROM workout_entries WHERE workout_id = ?"

_DELETE_WORKOUT = "DELETE FROM workouts WHERE id = ?"


def _entry_params(workout_id: int, entry: WorkoutEntry) -> tuple[Any, ...]:
    return (
        workout_id,
        entry.exercise_name,
        entry.sets,
        entry.reps,
        entry.duration_seconds,
        entry.weight,
        entry.notes,
        entry.order_index,
    )


class SQLWorkoutStore:
    """Persists workouts through a DB-API connection using qmark parameters."""

    def __init__(self, db: Any) -> None:
        self._db = db

    @contextmanager
    def _transaction(self) -> Iterator[Any]:
        cursor = self._db.cursor()
        try:
            yield cursor
        except BaseException:
            self._db.rollback()
            raise
        else:
            self._db.commit()
        finally:
            cursor.close()

    def create_workout(self, workout: Workout) -> Workout:
        """Insert a workout and its entries in one transaction and return it with ids set."""
        with self._transaction() as cursor:
            cursor.execute(
                _INSERT_WORKOUT,
                (
                    workout.title,
                    workout.description,
                    workout.duration_minutes,
                    workout.calories_burned,
                ),
            )
            workout.id = cursor.lastrowid
            for entry in workout.entries:
                cursor.execute(_INSERT_ENTRY, _entry_params(workout.id, entry))
                entry.id = cursor.lastrowid
        return workout

    def get_workout_by_id(self, workout_id: int) -> Workout | None:
        """Return the workout with its entries ordered by order_index, or None."""
        with closing(self._db.cursor()) as cursor:
            cursor.execute(_SELECT_WORKOUT, (workout_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            ident, title, description, duration, calories = row
            workout = Workout(
                id=ident,
                title=title,
                description=description or "",
                duration_minutes=duration or 0,
                calories_burned=calories or 0,
            )
            cursor.execute(_SELECT_ENTRIES, (workout_id,))
            for ident, name, sets, reps, seconds, weight, notes, order in cursor.fetchall():
                workout.entries.append(
                    WorkoutEntry(
                        id=ident,
                        exercise_name=name,
                        sets=sets,
                        reps=reps,
                        duration_seconds=seconds,
                        weight=None if weight is None else float(weight),
                        notes=notes or "",
                        order_index=order,
                    )
                )
        return workout

    def update_workout(self, workout: Workout) -> None:
        """Overwrite a workout and replace all of its entries."""
        with self._transaction() as cursor:
            cursor.execute(
                _UPDATE_WORKOUT,
                (
                    workout.title,
                    workout.description,
                    workout.duration_minutes,
                    workout.calories_burned,
                    workout.id,
                ),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(f"workout {workout.id} not found")
            cursor.execute(_DELETE_ENTRIES, (workout.id,))
            for entry in workout.entries:
                cursor.execute(_INSERT_ENTRY, _entry_params(workout.id, entry))

    def delete_workout(self, workout_id: int) -> None:
        """Delete a workout, raising RecordNotFoundError if it does not exist."""
        with self._transaction() as cursor:
            cursor.execute(_DELETE_WORKOUT, (workout_id,))
            if cursor.rowcount == 0:
                raise RecordNotFoundError(f"workout {workout_id} not found")