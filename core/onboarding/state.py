"""
Shared onboarding state.

Onboarding steps coordinate through a small set of cells that one step writes
and its siblings read: whether the login form should be shown, and where the
sign-in flow currently stands. Each cell is guarded by its own lock; writers
hold it only for a single assignment, and last writer wins.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LOCK_TIMEOUT = 0.5  # seconds


class SignInState(Enum):
    """Progress of the sign-in flow.

    The account picker writes PICK_MODE, CHATGPT_SUCCESS and
    API_KEY_CONFIGURED; the remaining values belong to the login steps.
    """

    PICK_MODE = "pick_mode"
    CHATGPT_CONTINUE_IN_BROWSER = "chatgpt_continue_in_browser"
    CHATGPT_SUCCESS_MESSAGE = "chatgpt_success_message"
    CHATGPT_SUCCESS = "chatgpt_success"
    API_KEY_ENTRY = "api_key_entry"
    API_KEY_CONFIGURED = "api_key_configured"


class SharedCell(Generic[T]):
    """A value shared between onboarding steps.

    ``set`` never raises for lock trouble: if the lock cannot be taken within
    ``timeout`` seconds the write is dropped, logged, and ``False`` returned.
    """

    def __init__(self, value: T, name: str = "cell", timeout: float = DEFAULT_LOCK_TIMEOUT):
        self._value = value
        self._name = name
        self._timeout = timeout
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def timeout(self) -> float:
        return self._timeout

    def get(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> bool:
        if not self._lock.acquire(timeout=self._timeout):
            logger.warning(
                "Dropped write to %s (%r): lock not acquired within %.2fs",
                self._name,
                value,
                self._timeout,
            )
            return False
        try:
            self._value = value
        finally:
            self._lock.release()
        return True

    def __repr__(self) -> str:
        return f"SharedCell({self._name}={self._value!r})"


def _show_login_form_cell() -> SharedCell[bool]:
    return SharedCell(False, name="show_login_form")


def _sign_in_state_cell() -> SharedCell[SignInState]:
    return SharedCell(SignInState.PICK_MODE, name="sign_in_state")


@dataclass
class OnboardingState:
    """Cells shared by the account picker and the login steps."""

    show_login_form: SharedCell[bool] = field(default_factory=_show_login_form_cell)
    sign_in_state: SharedCell[SignInState] = field(default_factory=_sign_in_state_cell)

    @classmethod
    def with_timeout(cls, timeout: float) -> OnboardingState:
        """Build state whose cells give up on a contended lock after ``timeout``."""
        return cls(
            show_login_form=SharedCell(False, name="show_login_form", timeout=timeout),
            sign_in_state=SharedCell(SignInState.PICK_MODE, name="sign_in_state", timeout=timeout),
        )
