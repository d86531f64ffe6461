"""Command-line entry point that serves the workout API."""

from __future__ import annotations

import argparse
import sqlite3
from collections.abc import Sequence

from werkzeug.serving import run_simple

from .app import new_application
from .routes import setup_routes

DEFAULT_PORT = 8080
DEFAULT_DATABASE = "workoutapi.db"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line into port and database options."""
    parser = argparse.ArgumentParser(prog="workoutapi", description="Serve the workout API.")
    parser.add_argument(
        "-port", "--port", type=int, default=DEFAULT_PORT, help="backend server port"
    )
    parser.add_argument(
        "-db",
        "--database",
        default=DEFAULT_DATABASE,
        help="path of the SQLite database holding the schema",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the API until interrupted; return 1 if the server cannot start."""
    args = parse_args(argv)
    db = sqlite3.connect(args.database, check_same_thread=False)
    try:
        db.execute("PRAGMA foreign_keys = ON")
        application = new_application(db)
        router = setup_routes(application)
        application.logger.info("we are running on port %d", args.port)
        try:
            run_simple("0.0.0.0", args.port, router)
        except OSError as exc:
            application.logger.critical("%s", exc)
            return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())