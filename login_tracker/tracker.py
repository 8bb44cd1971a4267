"""In-memory login tracker that locks a single account after repeated attempts."""
from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidCredentials


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

LOCKED_MESSAGE = "Account locked due to too many failed login attempts"
INVALID_INPUT_MESSAGE = "Invalid input: passwordAttempt must be a string"
SUCCESS_MESSAGE = "Login successful"
FAILURE_MESSAGE_TEMPLATE = "Attempt {n}: Login failed"


class AttemptOutcome(str, enum.Enum):
    SUCCESS = "success"
    FAILED = "failed"
    INVALID_INPUT = "invalid_input"
    LOCKED = "locked"


class TrackerStatus(str, enum.Enum):
    ACTIVE = "active"
    LOCKED = "locked"


@dataclass(frozen=True)
class AttemptResult:
    ok: bool
    message: str
    outcome: AttemptOutcome

    def to_dict(self) -> dict:
        return {"ok": self.ok, "message": self.message}


class LoginTracker:
    """Check password guesses against one fixed credential pair.

    Every call to :meth:`attempt` counts, whatever its outcome. The tracker
    locks for good after ``MAX_ATTEMPTS`` wrong passwords or on the call that
    pushes the total past ``MAX_ATTEMPTS``. Counters are readable but only
    :meth:`attempt` changes them.
    """

    def __init__(self, username: str, password: str) -> None:
        if not isinstance(username, str) or not isinstance(password, str):
            raise InvalidCredentials(
                "credentials must have string username and password"
            )
        self.__username = username
        self.__password = password
        self.__attempt_count = 0
        self.__fail_count = 0
        self.__locked = False

    @property
    def attempt_count(self) -> int:
        return self.__attempt_count

    @property
    def fail_count(self) -> int:
        return self.__fail_count

    @property
    def locked(self) -> bool:
        return self.__locked

    @property
    def state(self) -> TrackerStatus:
        return TrackerStatus.LOCKED if self.__locked else TrackerStatus.ACTIVE

    def attempt(self, password_attempt: Any) -> AttemptResult:
        self.__attempt_count += 1

        # Gate on the post-increment count: the 4th call locks unchecked.
        if self.__locked or self.__attempt_count > MAX_ATTEMPTS:
            return self._lock()

        if not isinstance(password_attempt, str):
            logger.info(
                "Rejected non-string attempt %d (%s)",
                self.__attempt_count,
                type(password_attempt).__name__,
            )
            return AttemptResult(False, INVALID_INPUT_MESSAGE, AttemptOutcome.INVALID_INPUT)

        if password_attempt == self.__password:
            logger.info("Login succeeded on attempt %d", self.__attempt_count)
            return AttemptResult(True, SUCCESS_MESSAGE, AttemptOutcome.SUCCESS)

        self.__fail_count += 1
        if self.__fail_count >= MAX_ATTEMPTS:
            return self._lock()

        logger.info(
            "Login failed on attempt %d (%d failures)",
            self.__attempt_count,
            self.__fail_count,
        )
        return AttemptResult(
            False,
            FAILURE_MESSAGE_TEMPLATE.format(n=self.__attempt_count),
            AttemptOutcome.FAILED,
        )

    __call__ = attempt

    def _lock(self) -> AttemptResult:
        if not self.__locked:
            self.__locked = True
            logger.warning(
                "Account locked after %d attempts (%d failures)",
                self.__attempt_count,
                self.__fail_count,
            )
        return AttemptResult(False, LOCKED_MESSAGE, AttemptOutcome.LOCKED)

    def __repr__(self) -> str:
        return (
            f"<LoginTracker state={self.state.value} "
            f"attempts={self.__attempt_count} failures={self.__fail_count}>"
        )


def create_tracker(credentials: Mapping[str, Any] | None) -> LoginTracker:
    """Build a tracker from a ``{"username": ..., "password": ...}`` mapping.

    Raises :class:`InvalidCredentials` if ``credentials`` is not a mapping or
    either field is missing or not a string.
    """
    if not isinstance(credentials, Mapping):
        raise InvalidCredentials("credentials must be a mapping")
    for field in ("username", "password"):
        if not isinstance(credentials.get(field), str):
            raise InvalidCredentials(f"credentials.{field} must be a string")
    return LoginTracker(credentials["username"], credentials["password"])


create_login_tracker = create_tracker
