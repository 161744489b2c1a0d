"""
Account picker onboarding step.

Lets the user pick one of the accounts registered with an AccountDirectory, or
choose to add a new one. The entry list is the directory's accounts followed by
one synthetic "add another account" entry, so it is never empty.

The picker is independent of any terminal runtime: keys come in as Textual key
names through ``handle_key``, repaints go out through the ``request_frame``
callable, and ``lines()`` / ``panel()`` describe what should be drawn.

Usage:
    picker = AccountPicker(request_frame, directory, OnboardingState())
    picker.handle_key("down")
    picker.handle_key("enter")
    if picker.step_state() is StepState.COMPLETE:
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from onboarding.config import PickerConfig, default_config
from onboarding.credentials import AccountDirectory, AccountKind, AccountSummary, DirectoryError
from onboarding.state import OnboardingState, SignInState
from onboarding.steps import StepState

logger = logging.getLogger(__name__)

HIGHLIGHT_STYLE = "cyan"
HIGHLIGHT_LABEL_STYLE = "bold cyan"
DETAIL_STYLE = "dim"
ERROR_STYLE = "red"

_SIGN_IN_STATE_BY_KIND = {
    AccountKind.CHATGPT: SignInState.CHATGPT_SUCCESS,
    AccountKind.API_KEY: SignInState.API_KEY_CONFIGURED,
}


@dataclass(frozen=True)
class ExistingAccount:
    """The user switched to a registered account of this kind."""

    kind: AccountKind


@dataclass(frozen=True)
class AddNewAccount:
    """The user chose to register another account."""


AccountPickerSelection = ExistingAccount | AddNewAccount


@dataclass
class PickerState:
    """Mutable state owned by one AccountPicker.

    ``highlighted`` is stored unclamped; read it through
    ``AccountPicker.current_highlight()``.
    """

    accounts: list[AccountSummary] = field(default_factory=list)
    highlighted: int = 0
    selection: AccountPickerSelection | None = None
    error: str | None = None


class AccountPicker:
    """Selectable list of registered accounts plus an "add another" entry."""

    def __init__(
        self,
        request_frame: Callable[[], None],
        directory: AccountDirectory,
        onboarding: OnboardingState,
        config: PickerConfig | None = None,
    ) -> None:
        self.request_frame = request_frame
        self.directory = directory
        self.onboarding = onboarding
        self.config = config or default_config

        try:
            accounts = self.directory.list_accounts()
            error = None
        except DirectoryError as exc:
            logger.warning("Could not list accounts: %s", exc)
            accounts, error = [], str(exc)

        self.state = PickerState(
            accounts=accounts,
            highlighted=_active_index(accounts, default=0),
            error=error,
        )

        # Nothing to pick from: go straight to the login form.
        if not accounts:
            self.onboarding.show_login_form.set(True)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def accounts(self) -> list[AccountSummary]:
        return self.state.accounts

    @property
    def selection(self) -> AccountPickerSelection | None:
        return self.state.selection

    @property
    def error(self) -> str | None:
        return self.state.error

    def total_entries(self) -> int:
        return len(self.state.accounts) + 1

    def current_highlight(self) -> int:
        """Stored highlight clamped to the current entry list."""
        return min(self.state.highlighted, max(self.total_entries() - 1, 0))

    def step_state(self) -> StepState:
        if self.state.selection is not None:
            return StepState.COMPLETE
        return StepState.IN_PROGRESS

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def highlight_next(self) -> None:
        total = self.total_entries()
        if total == 0:
            return
        self.state.highlighted = (self.current_highlight() + 1) % total

    def highlight_prev(self) -> None:
        total = self.total_entries()
        if total == 0:
            return
        current = self.current_highlight()
        self.state.highlighted = total - 1 if current == 0 else current - 1

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def select_current(self) -> None:
        """Commit the highlighted entry."""
        index = self.current_highlight()
        if index < len(self.state.accounts):
            self._select_existing(self.state.accounts[index])
        else:
            self._select_add_new()
        self.request_frame()

    def _select_existing(self, account: AccountSummary) -> None:
        try:
            self.directory.activate_account(account.id)
        except DirectoryError as exc:
            logger.warning("Could not switch to account %s: %s", account.id, exc)
            self.state.error = str(exc)
            return

        logger.info("Switched to %s account %s", account.kind.value, account.id)
        self.state.error = None
        self.state.selection = ExistingAccount(account.kind)
        self.onboarding.show_login_form.set(False)
        self.onboarding.sign_in_state.set(_SIGN_IN_STATE_BY_KIND[account.kind])

        # The switch already happened; a failed refresh only leaves the list stale.
        try:
            updated = self.directory.list_accounts()
        except DirectoryError as exc:
            logger.warning("Could not refresh accounts after switching: %s", exc)
            self.state.error = str(exc)
            return

        self.state.accounts = updated
        self.state.highlighted = _active_index(updated, default=self.current_highlight())

    def _select_add_new(self) -> None:
        self.state.error = None
        self.state.selection = AddNewAccount()
        self.onboarding.show_login_form.set(True)
        self.onboarding.sign_in_state.set(SignInState.PICK_MODE)
        self.state.highlighted = len(self.state.accounts)

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Dispatch one key press. Returns True if the key is bound."""
        handled = True
        if key in self.config.prev_keys:
            self.highlight_prev()
        elif key in self.config.next_keys:
            self.highlight_next()
        elif key in self.config.select_keys:
            self.select_current()
        else:
            handled = False
        self.request_frame()
        return handled

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_entry(self, index: int) -> Text:
        highlighted = self.current_highlight() == index
        indicator = "> " if highlighted else "  "

        if index >= len(self.state.accounts):
            text = self.config.add_new_label
            if highlighted:
                return Text.assemble((indicator, HIGHLIGHT_STYLE), (text, HIGHLIGHT_STYLE))
            return Text.assemble(indicator, text)

        account = self.state.accounts[index]
        label = account.label
        if account.is_active:
            label += self.config.active_suffix

        if highlighted:
            return Text.assemble(
                (indicator, HIGHLIGHT_STYLE),
                (label, HIGHLIGHT_LABEL_STYLE),
                " ",
                (account.detail, DETAIL_STYLE),
            )
        return Text.assemble(indicator, label, " ", (account.detail, DETAIL_STYLE))

    def lines(self) -> list[Text]:
        lines = [Text(self.config.instructions), Text("")]
        lines.extend(self.render_entry(index) for index in range(self.total_entries()))

        if self.state.error is not None:
            lines.append(Text(""))
            lines.append(Text(self.state.error, style=ERROR_STYLE))

        return lines

    def panel(self, width: int, height: int) -> Panel | None:
        """Bordered panel for a ``width`` x ``height`` area, or None if it has no room."""
        # Only an empty outer area is skipped; a tiny area still gets a bare border.
        if width <= 0 or height <= 0:
            return None
        return Panel(
            Group(*self.lines()),
            title=self.config.title,
            title_align="left",
            box=box.ROUNDED,
            width=width,
            height=height,
        )


def _active_index(accounts: list[AccountSummary], default: int) -> int:
    return next((i for i, acc in enumerate(accounts) if acc.is_active), default)
