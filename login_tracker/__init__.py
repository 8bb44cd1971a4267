"""Application factory for the single-account login tracker."""
from __future__ import annotations

import logging
import threading

import click
from flask import Flask

from .auth import auth_bp, run_attempt
from .config import BaseConfig
from .exceptions import InvalidCredentials, LoginTrackerError
from .tracker import (
    AttemptOutcome,
    AttemptResult,
    LoginTracker,
    TrackerStatus,
    create_login_tracker,
    create_tracker,
)


__all__ = [
    "AttemptOutcome",
    "AttemptResult",
    "InvalidCredentials",
    "LoginTracker",
    "LoginTrackerError",
    "TrackerStatus",
    "create_app",
    "create_login_tracker",
    "create_tracker",
]


def create_app(config_object: type[BaseConfig] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object or BaseConfig)

    logging.getLogger(__name__).setLevel(str(app.config["LOG_LEVEL"]).upper())

    # Malformed credentials are fatal: no app is built without a tracker.
    app.login_tracker = create_tracker(
        {
            "username": app.config["TRACKER_USERNAME"],
            "password": app.config["TRACKER_PASSWORD"],
        }
    )
    app.login_tracker_lock = threading.Lock()

    app.register_blueprint(auth_bp, url_prefix="/auth")

    @app.cli.command("attempt")
    @click.argument("guess")
    def attempt_command(guess: str) -> None:
        """Run one login attempt against the app's tracker."""
        result = run_attempt(guess)
        print(result.message)

    return app
