"""URL routing for the workout API as a WSGI application."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any

from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from .app import Application


def _not_found() -> Response:
    return Response(
        "404 page not found\n",
        status=HTTPStatus.NOT_FOUND,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


class Router:
    """Dispatches requests to the application's handlers by method and path."""

    def __init__(self, application: Application) -> None:
        handler = application.workout_handler
        self._endpoints: dict[str, Callable[..., Response]] = {
            "health": application.health_check,
            "get_workout": handler.handle_get_workout_by_id,
            "create_workout": handler.handle_create_workout,
            "update_workout": handler.handle_update_workout_by_id,
            "delete_workout": handler.handle_delete_workout_by_id,
        }
        self._map = Map(
            [
                Rule("/health", endpoint="health", methods=["GET"]),
                Rule("/workouts/<id>", endpoint="get_workout", methods=["GET"]),
                Rule("/workouts", endpoint="create_workout", methods=["POST"]),
                Rule("/workouts/<id>", endpoint="update_workout", methods=["PUT"]),
                Rule("/workouts/<id>", endpoint="delete_workout", methods=["DELETE"]),
            ],
            merge_slashes=False,
        )

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        request = Request(environ)
        adapter = self._map.bind_to_environ(environ)
        try:
            endpoint, params = adapter.match()
        except NotFound:
            response = _not_found()
        except MethodNotAllowed as exc:
            response = Response(status=HTTPStatus.METHOD_NOT_ALLOWED)
            if exc.valid_methods:
                response.headers["Allow"] = ", ".join(exc.valid_methods)
        except HTTPException as exc:
            response = exc.get_response(environ)
        else:
            response = self._endpoints[endpoint](request, params)
        return response(environ, start_response)


def setup_routes(application: Application) -> Router:
    """Return the WSGI application serving every route of the API."""
    return Router(application)