"""
Onboarding account picker.

Keyboard-driven step that lets the user switch to a registered account or
start adding a new one, and records the outcome in shared onboarding state
for the login steps that follow.
"""

from .account_picker import (
    AccountPicker,
    AccountPickerSelection,
    AddNewAccount,
    ExistingAccount,
    PickerState,
)
from .config import PickerConfig, default_config
from .state import OnboardingState, SharedCell, SignInState
from .steps import StepState

__version__ = "0.1.0"

__all__ = [
    "AccountPicker",
    "AccountPickerSelection",
    "AddNewAccount",
    "ExistingAccount",
    "OnboardingState",
    "PickerConfig",
    "PickerState",
    "SharedCell",
    "SignInState",
    "StepState",
    "default_config",
]
