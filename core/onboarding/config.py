"""Account picker configuration."""

from dataclasses import dataclass, field

from onboarding.state import DEFAULT_LOCK_TIMEOUT


@dataclass
class PickerConfig:
    title: str = "Accounts"
    instructions: str = "Choose which account to use for this session:"
    add_new_label: str = "Add another account"
    active_suffix: str = " (current)"
    prev_keys: tuple[str, ...] = field(default=("up", "k"))
    next_keys: tuple[str, ...] = field(default=("down", "j"))
    select_keys: tuple[str, ...] = field(default=("enter",))
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT


default_config = PickerConfig()
