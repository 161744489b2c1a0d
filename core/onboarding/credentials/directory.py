"""
Account directories.

The picker talks to credential storage only through the AccountDirectory
protocol: list the registered accounts, and make one of them the active
account. Both operations raise DirectoryError on failure.

Usage:
    directory = InMemoryAccountDirectory.from_json("accounts.json")

    for account in directory.list_accounts():
        print(f"{account.label}: {account.detail}")

    directory.activate_account("work")
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from .models import AccountSummary, DirectoryError

logger = logging.getLogger(__name__)

_ACCOUNT_LIST = TypeAdapter(list[AccountSummary])


@runtime_checkable
class AccountDirectory(Protocol):
    """Capability the account picker needs from the authentication subsystem."""

    def list_accounts(self) -> list[AccountSummary]:
        """Return registered accounts in display order."""
        ...

    def activate_account(self, account_id: str) -> None:
        """Switch the session to ``account_id``."""
        ...


class InMemoryAccountDirectory:
    """
    Account directory over an in-process list of summaries.

    Holds display snapshots only, never secrets. Activation marks exactly the
    chosen account active; order is preserved.
    """

    def __init__(self, accounts: Iterable[AccountSummary] = ()) -> None:
        self._accounts: list[AccountSummary] = list(accounts)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # AccountDirectory
    # ------------------------------------------------------------------

    def list_accounts(self) -> list[AccountSummary]:
        with self._lock:
            return list(self._accounts)

    def activate_account(self, account_id: str) -> None:
        with self._lock:
            if not any(acc.id == account_id for acc in self._accounts):
                raise DirectoryError(f"No account found: {account_id}")
            self._accounts = [
                acc.model_copy(update={"is_active": acc.id == account_id})
                for acc in self._accounts
            ]
        logger.info("Activated account %s", account_id)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryAccountDirectory:
        """
        Load account summaries from a JSON file holding a list of objects.

        An entry may carry a raw ``api_key``; it is replaced by its masked form
        and never kept in memory.

        Raises:
            DirectoryError: If the file cannot be read or does not match the
                AccountSummary schema.
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DirectoryError(f"Could not read accounts from {path}: {exc}") from exc

        if isinstance(raw, list):
            raw = [_mask_raw_key(entry) for entry in raw]

        try:
            accounts = _ACCOUNT_LIST.validate_python(raw)
        except ValidationError as exc:
            raise DirectoryError(
                f"Invalid account file {path}: {exc.error_count()} validation error(s)"
            ) from exc

        logger.debug("Loaded %d account(s) from %s", len(accounts), path)
        return cls(accounts)


def _mask_raw_key(entry: object) -> object:
    if not isinstance(entry, dict) or "api_key" not in entry:
        return entry
    entry = dict(entry)
    raw_key = entry.pop("api_key")
    if isinstance(raw_key, str) and not entry.get("masked_api_key"):
        entry["masked_api_key"] = AccountSummary.mask_api_key(raw_key)
    return entry
