"""Textual widget hosting the onboarding account picker."""

from __future__ import annotations

from rich.console import RenderableType
from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from onboarding.account_picker import AccountPicker, AccountPickerSelection
from onboarding.config import PickerConfig
from onboarding.credentials import AccountDirectory
from onboarding.state import OnboardingState
from onboarding.steps import StepState


class AccountPickerWidget(Widget, can_focus=True):
    """Bordered account list driven by up/down (or k/j) and enter.

    Posts ``AccountPickerWidget.Completed`` each time a choice is committed.
    """

    DEFAULT_CSS = """
    AccountPickerWidget {
        height: 1fr;
        min-height: 6;
    }
    """

    class Completed(Message):
        """A selection was committed."""

        def __init__(self, selection: AccountPickerSelection) -> None:
            super().__init__()
            self.selection = selection

    def __init__(
        self,
        directory: AccountDirectory,
        onboarding: OnboardingState,
        config: PickerConfig | None = None,
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.picker = AccountPicker(self.refresh, directory, onboarding, config)

    def step_state(self) -> StepState:
        return self.picker.step_state()

    def render(self) -> RenderableType:
        panel = self.picker.panel(self.size.width, self.size.height)
        if panel is None:
            return Text("")
        return panel

    def on_key(self, event: events.Key) -> None:
        before = self.picker.selection
        if self.picker.handle_key(event.key):
            event.stop()
        # Every successful commit stores a new selection object.
        selection = self.picker.selection
        if selection is not None and selection is not before:
            self.post_message(self.Completed(selection))
