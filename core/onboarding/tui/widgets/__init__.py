"""TUI widgets package."""

from .account_picker import AccountPickerWidget

__all__ = [
    "AccountPickerWidget",
]
