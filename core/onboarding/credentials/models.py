"""
Data models for account directories.

AccountSummary is the read-only snapshot a directory hands to the onboarding
account picker. It never carries a raw secret: API key accounts expose only a
masked form of the key.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

CHATGPT_PLACEHOLDER = "ChatGPT account"
API_KEY_PLACEHOLDER = "API key"

_MASK_VISIBLE = 4


class DirectoryError(Exception):
    """Raised by an account directory when listing or activation fails.

    The message is shown to the user as-is, so it should read as a sentence.
    """


class AccountKind(StrEnum):
    """How an account authenticates."""

    CHATGPT = "chatgpt"
    API_KEY = "api_key"


class AccountSummary(BaseModel):
    """
    A registered account as seen by the picker.

    Attributes:
        id: Opaque identifier passed back to ``activate_account``
        label: Display name chosen when the account was added
        kind: ChatGPT sign-in or API key
        email: Account email, only meaningful for ChatGPT accounts
        masked_api_key: Masked key, only meaningful for API key accounts
        is_active: Whether this is the account currently in use
    """

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    kind: AccountKind
    email: str | None = None
    masked_api_key: str | None = None
    is_active: bool = False

    @property
    def detail(self) -> str:
        """Email or masked key, falling back to a generic description."""
        if self.kind == AccountKind.CHATGPT:
            return self.email or CHATGPT_PLACEHOLDER
        return self.masked_api_key or API_KEY_PLACEHOLDER

    @staticmethod
    def mask_api_key(raw: str) -> str:
        """Return ``raw`` with everything but its prefix and last characters hidden.

        ``sk-proj-abcdef1234`` becomes ``sk-...1234``. Keys too short to mask
        meaningfully are fully hidden.
        """
        raw = raw.strip()
        if len(raw) <= _MASK_VISIBLE * 2:
            return "*" * len(raw)
        prefix = raw.split("-", 1)[0] + "-" if "-" in raw[:_MASK_VISIBLE] else ""
        return f"{prefix}...{raw[-_MASK_VISIBLE:]}"
