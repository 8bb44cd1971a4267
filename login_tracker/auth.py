"""Authentication blueprint backed by the app's single login tracker."""
from __future__ import annotations

from flask import Blueprint, current_app, request

from .tracker import AttemptOutcome, AttemptResult


auth_bp = Blueprint("auth", __name__)

_STATUS_CODES = {
    AttemptOutcome.SUCCESS: 200,
    AttemptOutcome.FAILED: 401,
    AttemptOutcome.INVALID_INPUT: 400,
    AttemptOutcome.LOCKED: 423,
}


def run_attempt(password_attempt) -> AttemptResult:
    """Run one attempt against the app's tracker inside its critical section."""
    with current_app.login_tracker_lock:
        return current_app.login_tracker.attempt(password_attempt)


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple[dict, int]:
    payload = request.get_json(silent=True)
    # Anything that is not a JSON object counts as a guess without a password.
    password = payload.get("password") if isinstance(payload, dict) else None

    result = run_attempt(password)
    return result.to_dict(), _STATUS_CODES[result.outcome]


@auth_bp.route("/status", methods=["GET"])
def status() -> tuple[dict, int]:
    tracker = current_app.login_tracker
    with current_app.login_tracker_lock:
        body = {
            "state": tracker.state.value,
            "attempts": tracker.attempt_count,
            "failures": tracker.fail_count,
        }
    return body, 200
