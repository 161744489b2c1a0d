"""Contracts between onboarding steps and the screen that sequences them."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class StepState(Enum):
    HIDDEN = "hidden"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@runtime_checkable
class KeyboardHandler(Protocol):
    def handle_key(self, key: str) -> bool:
        """Process one key press. Returns True if the key had an effect."""
        ...


@runtime_checkable
class StepStateProvider(Protocol):
    def step_state(self) -> StepState: ...
