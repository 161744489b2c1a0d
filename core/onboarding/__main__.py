"""Run the account picker step on its own: ``python -m onboarding --accounts accounts.json``."""

import argparse
import logging
import sys

from onboarding.account_picker import AddNewAccount, ExistingAccount
from onboarding.credentials import DirectoryError, InMemoryAccountDirectory
from onboarding.tui import AccountPickerApp


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="onboarding", description=__doc__)
    parser.add_argument(
        "--accounts",
        help="JSON file with a list of account summaries (omit to start with none)",
    )
    parser.add_argument(
        "--log-file",
        default="onboarding.log",
        help="Where to write logs; the terminal is owned by the TUI (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        filename=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        directory = (
            InMemoryAccountDirectory.from_json(args.accounts)
            if args.accounts
            else InMemoryAccountDirectory()
        )
    except DirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    selection = AccountPickerApp(directory).run()

    if isinstance(selection, ExistingAccount):
        print(f"Using existing {selection.kind.value} account.")
    elif isinstance(selection, AddNewAccount):
        print("Adding a new account.")
    else:
        print("Cancelled.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
