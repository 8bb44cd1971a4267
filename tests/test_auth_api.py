from __future__ import annotations

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from login_tracker import InvalidCredentials, create_app
from login_tracker.config import TestingConfig
from login_tracker.tracker import INVALID_INPUT_MESSAGE, LOCKED_MESSAGE


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, password):
    return client.post("/auth/login", json={"password": password})


def test_login_success_after_failures(client):
    resp = login(client, "x")
    assert resp.status_code == 401
    assert resp.get_json() == {"ok": False, "message": "Attempt 1: Login failed"}

    login(client, "y")
    resp = login(client, "secret")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "message": "Login successful"}


def test_three_failures_lock_the_account(app, client):
    for guess in ("x", "y"):
        login(client, guess)
    resp = login(client, "z")
    assert resp.status_code == 423
    assert resp.get_json()["message"] == LOCKED_MESSAGE

    resp = login(client, "secret")
    assert resp.status_code == 423
    assert app.login_tracker.attempt_count == 4

    status = client.get("/auth/status").get_json()
    assert status == {"state": "locked", "attempts": 4, "failures": 3}


def test_non_string_password_is_invalid_input(app, client):
    login(client, "x")
    login(client, "y")
    resp = login(client, 42)
    assert resp.status_code == 400
    assert resp.get_json() == {"ok": False, "message": INVALID_INPUT_MESSAGE}
    assert not app.login_tracker.locked
    assert app.login_tracker.fail_count == 2


def test_missing_body_counts_as_invalid_attempt(app, client):
    resp = client.post("/auth/login", data="not json")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == INVALID_INPUT_MESSAGE

    resp = client.post("/auth/login", json={})
    assert resp.status_code == 400
    assert app.login_tracker.attempt_count == 2


def test_status_starts_active(client):
    assert client.get("/auth/status").get_json() == {
        "state": "active",
        "attempts": 0,
        "failures": 0,
    }


def test_missing_configured_password_is_fatal():
    class NoPasswordConfig(TestingConfig):
        TRACKER_PASSWORD = None

    with pytest.raises(InvalidCredentials):
        create_app(NoPasswordConfig)


def test_lower_case_log_level_is_accepted():
    class LowerCaseLogLevelConfig(TestingConfig):
        LOG_LEVEL = "info"

    app = create_app(LowerCaseLogLevelConfig)
    assert logging.getLogger("login_tracker").level == logging.INFO
    assert app.test_client().post("/auth/login", json={"password": "secret"}).status_code == 200


def test_attempt_cli_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["attempt", "secret"])
    assert result.exit_code == 0
    assert "Login successful" in result.output
    assert app.login_tracker.attempt_count == 1
