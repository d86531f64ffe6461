# workoutapi

A small WSGI service that stores workouts and the exercise entries that
belong to them in a SQLite database, and serves them as JSON.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running the server

    workoutapi --port 8080 --database workoutapi.db

Options (each also accepted with a single dash, `-port` and `-db`):

- `--port` – port to listen on, default `8080`; the server binds to `0.0.0.0`.
- `--database` – path of the SQLite database file, default `workoutapi.db`.

The server is Werkzeug's development server. It logs to standard output
with a `YYYY/MM/DD HH:MM:SS` timestamp. If the port cannot be bound the
command logs the error and exits with status 1.

## The database schema is not created for you

The package does not create or migrate tables. The database given to the
server (or to `new_application`) must already hold:

- `workouts` with columns `id` (integer primary key), `title`,
  `description`, `duration_minutes`, `calories_burned`;
- `workout_entries` with columns `id` (integer primary key), `workout_id`,
  `exercise_name`, `sets`, `reps`, `duration_seconds`, `weight`, `notes`,
  `order_index`;
- `users`, only if `SQLUserStore` is used, with columns `id` (integer
  primary key), `username`, `email`, `password_hash`, `bio`, and
  `created_at` / `updated_at` filled in by column defaults.

The command turns on `PRAGMA foreign_keys`, so an `ON DELETE CASCADE` from
`workout_entries.workout_id` to `workouts.id` will remove a workout's
entries when it is deleted.

## Endpoints

| Method | Path             | What it does                                  |
|--------|------------------|-----------------------------------------------|
| GET    | `/health`        | Plain-text `Status is available`              |
| GET    | `/workouts/{id}` | Fetch one workout with its entries            |
| POST   | `/workouts`      | Create a workout and its entries; `201`       |
| PUT    | `/workouts/{id}` | Update fields given; replaces entries if sent |
| DELETE | `/workouts/{id}` | Delete a workout; `204` on success            |

JSON responses are wrapped in an envelope such as `{"workout": {...}}`,
with keys sorted and indented by one space. Failures come back as
`{"error": "..."}`:

- a non-integer id on GET or PUT answers `400`;
- a body that is not valid JSON or has fields of the wrong type answers `400`;
- a store failure answers `500`.

A GET for an unknown id answers `200` with `{"workout": null}`. A PUT for an
unknown id answers a plain-text `404 page not found`; a DELETE for an
unknown id answers a plain-text `404` with `workout not found`, and a
non-integer id on DELETE answers `404 page not found`. Unknown paths answer
`404` and a known path with the wrong method answers `405`.

A workout looks like this:

```json
{
  "title": "Leg day",
  "description": "Squats and lunges",
  "duration_minutes": 45,
  "calories_burned": 300,
  "entries": [
    {
      "exercise_name": "Squat",
      "sets": 4,
      "reps": 8,
      "duration_seconds": null,
      "weight": 100.0,
      "notes": "",
      "order_index": 1
    }
  ]
}
```

Entries are returned ordered by `order_index`. An update request may carry
any subset of `title`, `description`, `duration_minutes`,
`calories_burned` and `entries`; fields left out keep their stored values.

## Using it from Python

The WSGI application is built from a DB-API connection that uses `?`
parameters, such as `sqlite3`:

```python
import sqlite3

from workoutapi.app import new_application
from workoutapi.routes import setup_routes

db = sqlite3.connect("workoutapi.db", check_same_thread=False)
application = new_application(db)
wsgi_app = setup_routes(application)
```

`wsgi_app` (a `Router`) can be served by any WSGI server.

The stores in `workoutapi.workout_store` and `workoutapi.user_store` can
also be used on their own:

- `SQLWorkoutStore` has `create_workout`, `get_workout_by_id`,
  `update_workout` and `delete_workout`. `get_workout_by_id` returns `None`
  for an unknown id, while `update_workout` and `delete_workout` raise
  `RecordNotFoundError`. `Workout` and `WorkoutEntry` are dataclasses with
  `to_dict` and `from_dict`.
- `SQLUserStore` has only `create_user`, which inserts a `User` and fills in
  its `id`, `created_at` and `updated_at`. `User.to_dict` leaves out the
  password hash. Users are not exposed over HTTP.

`workoutapi.utils` provides `write_json` and `read_id_param` (which raises
`InvalidIDError`).

## Extras

`workoutapi.exercise` holds a tiny inventory model:

```python
from workoutapi.exercise import Item, Player

hero = Player(name="Hero")
hero.pick_up_item(Item(name="Health Potion", type="potion"))
hero.use_item("Health Potion")   # potions are used up
hero.drop_item("Sword")          # False: nothing with that name
```

`workoutapi.basics` has a `Person` dataclass with `modify_name`, and the
helpers `add`, `calculate_sum_and_product`, `age_group` and `describe_day`.