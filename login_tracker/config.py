"""Configuration helpers."""
from __future__ import annotations

import os


class BaseConfig:
    """Default configuration that can be overridden per environment."""

    # Credential pair guarded by the app's tracker.
    TRACKER_USERNAME = os.environ.get("TRACKER_USERNAME")
    TRACKER_PASSWORD = os.environ.get("TRACKER_PASSWORD")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestingConfig(BaseConfig):
    TESTING = True
    TRACKER_USERNAME = "a"
    TRACKER_PASSWORD = "secret"
    LOG_LEVEL = "DEBUG"
