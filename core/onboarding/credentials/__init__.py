"""
Account directory interface and models used by the onboarding account picker.

Usage:
    from onboarding.credentials import AccountSummary, InMemoryAccountDirectory

    directory = InMemoryAccountDirectory([
        AccountSummary(id="a1", label="Personal", kind="chatgpt", email="me@example.com"),
    ])
    directory.activate_account("a1")
"""

from .directory import AccountDirectory, InMemoryAccountDirectory
from .models import AccountKind, AccountSummary, DirectoryError

__all__ = [
    "AccountDirectory",
    "AccountKind",
    "AccountSummary",
    "DirectoryError",
    "InMemoryAccountDirectory",
]
