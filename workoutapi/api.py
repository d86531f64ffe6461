"""HTTP handlers for the workout resource."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Request, Response

from .utils import InvalidIDError, read_id_param, write_json
from .workout_store import RecordNotFoundError, Workout, WorkoutEntry

_DECODER = json.JSONDecoder()
_JSON_WHITESPACE = " \t\r\n"


def _plain_error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _not_found() -> Response:
    return _plain_error("404 page not found", HTTPStatus.NOT_FOUND)


def _decode_body(request: Request) -> Any:
    """Decode the first JSON value in the request body."""
    text = request.get_data().decode("utf-8").lstrip(_JSON_WHITESPACE)
    value, _ = _DECODER.raw_decode(text)
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _apply_update(workout: Workout, payload: Any) -> None:
    """Validate an update payload and copy the fields it sets onto the workout."""
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ValueError("expected a JSON object")

    title = _optional_str(payload, "title")
    description = _optional_str(payload, "description")
    duration = _optional_int(payload, "duration_minutes")
    calories = _optional_int(payload, "calories_burned")
    raw_entries = payload.get("entries")
    if raw_entries is not None and not isinstance(raw_entries, list):
        raise ValueError("field 'entries' must be a list")
    entries = (
        None
        if raw_entries is None
        else [WorkoutEntry.from_dict(item) for item in raw_entries]
    )

    if title is not None:
        workout.title = title
    if description is not None:
        workout.description = description
    if duration is not None:
        workout.duration_minutes = duration
    if calories is not None:
        workout.calories_burned = calories
    if entries is not None:
        workout.entries = entries


class WorkoutHandler:
    """Request handlers that read and write workouts through a store."""

    def __init__(self, workout_store: Any, logger: logging.Logger) -> None:
        self._store = workout_store
        self._logger = logger

    def handle_get_workout_by_id(
        self, request: Request, params: Mapping[str, str]
    ) -> Response:
        try:
            workout_id = read_id_param(params)
        except InvalidIDError as exc:
            self._logger.error("ERROR: readIDParam: %s", exc)
            return write_json(HTTPStatus.BAD_REQUEST, {"error": "invalid workout id"})

        try:
            workout = self._store.get_workout_by_id(workout_id)
        except Exception as exc:
            self._logger.error("ERROR: getWorkoutByID: %s", exc)
            return write_json(
                HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "internal server error"}
            )

        return write_json(HTTPStatus.OK, {"workout": workout})

    def handle_create_workout(
        self, request: Request, params: Mapping[str, str]
    ) -> Response:
        try:
            payload = _decode_body(request)
            workout = Workout.from_dict({} if payload is None else payload)
        except ValueError as exc:
            self._logger.error("ERROR: decodingCreateWorkout: %s", exc)
            return write_json(HTTPStatus.BAD_REQUEST, {"error": "invalid request sent"})

        try:
            created = self._store.create_workout(workout)
        except Exception as exc:
            self._logger.error("ERROR: createWorkout: %s", exc)
            return write_json(
                HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "failed to create workout"}
            )

        return write_json(HTTPStatus.CREATED, {"workout": created})

    def handle_update_workout_by_id(
        self, request: Request, params: Mapping[str, str]
    ) -> Response:
        try:
            workout_id = read_id_param(params)
        except InvalidIDError as exc:
            self._logger.error("ERROR: readIDParam: %s", exc)
            return write_json(
                HTTPStatus.BAD_REQUEST, {"error": "invalid update workout id"}
            )

        try:
            existing = self._store.get_workout_by_id(workout_id)
        except Exception as exc:
            self._logger.error("ERROR: getWorkoutByID: %s", exc)
            return write_json(
                HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "internal server error"}
            )

        if existing is None:
            return _not_found()

        try:
            _apply_update(existing, _decode_body(request))
        except ValueError as exc:
            self._logger.error("ERROR: decodingUpdateRequest: %s", exc)
            return write_json(
                HTTPStatus.BAD_REQUEST, {"error": "invalid request payload"}
            )

        try:
            self._store.update_workout(existing)
        except Exception as exc:
            self._logger.error("ERROR: updatingWorking: %s", exc)
            return write_json(
                HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "internal server error"}
            )

        return write_json(HTTPStatus.OK, {"workout": existing})

    def handle_delete_workout_by_id(
        self, request: Request, params: Mapping[str, str]
    ) -> Response:
        try:
            workout_id = read_id_param(params)
        except InvalidIDError:
            return _not_found()

        try:
            self._store.delete_workout(workout_id)
        except RecordNotFoundError:
            return _plain_error("workout not found", HTTPStatus.NOT_FOUND)
        except Exception:
            return _plain_error(
                "error deleting workout", HTTPStatus.INTERNAL_SERVER_ERROR
            )

        return Response(status=HTTPStatus.NO_CONTENT)