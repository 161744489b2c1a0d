import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from onboarding.account_picker import AccountPickerSelection
from onboarding.config import PickerConfig, default_config
from onboarding.credentials import AccountDirectory
from onboarding.state import OnboardingState
from onboarding.tui.widgets.account_picker import AccountPickerWidget

logger = logging.getLogger(__name__)


class AccountPickerApp(App[AccountPickerSelection | None]):
    """Stand-alone host for the account picker step.

    Exits with the committed selection, or None if the user quits first.
    """

    TITLE = "Sign in"
    CSS = """
    Screen {
        layout: vertical;
        background: $surface;
    }

    AccountPickerWidget {
        margin: 1 2;
    }

    Footer {
        background: $panel;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit_picker", "Quit"),
        Binding("escape", "quit_picker", "Cancel", show=False),
    ]

    def __init__(
        self,
        directory: AccountDirectory,
        onboarding: OnboardingState | None = None,
        config: PickerConfig | None = None,
    ):
        super().__init__()
        self.directory = directory
        self.config = config or default_config
        self.onboarding = onboarding or OnboardingState.with_timeout(self.config.lock_timeout)

    def compose(self) -> ComposeResult:
        yield AccountPickerWidget(self.directory, self.onboarding, self.config, id="account-picker")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#account-picker", AccountPickerWidget).focus()

    def on_account_picker_widget_completed(self, message: AccountPickerWidget.Completed) -> None:
        logger.info("Account step complete: %s", message.selection)
        self.exit(message.selection)

    def action_quit_picker(self) -> None:
        self.exit(None)
