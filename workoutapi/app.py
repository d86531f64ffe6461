"""Application wiring: logger, store and handlers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from werkzeug.wrappers import Request, Response

from .api import WorkoutHandler
from .workout_store import SQLWorkoutStore

_LOGGER_NAME = "workoutapi"


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


@dataclass
class Application:
    """Holds what the routes need to serve requests."""

    logger: logging.Logger
    workout_handler: WorkoutHandler
    db: Any

    def health_check(self, request: Request, params: Mapping[str, str]) -> Response:
        return Response(
            "Status is available\n",
            status=HTTPStatus.OK,
            content_type="text/plain; charset=utf-8",
        )


def new_application(db: Any) -> Application:
    """Build an application on a DB-API connection whose schema is already in place."""
    logger = _build_logger()
    workout_store = SQLWorkoutStore(db)
    workout_handler = WorkoutHandler(workout_store, logger)
    return Application(logger=logger, workout_handler=workout_handler, db=db)