"""Errors raised by the login tracker."""
from __future__ import annotations


class LoginTrackerError(Exception):
    """Base class for tracker errors."""


class InvalidCredentials(LoginTrackerError, TypeError):
    """Raised at construction when the credential pair is malformed."""
