"""Textual front end for the onboarding account picker."""

from .app import AccountPickerApp
from .widgets import AccountPickerWidget

__all__ = [
    "AccountPickerApp",
    "AccountPickerWidget",
]
