#!/usr/bin/env python
"""
Hash a password for the credential table.

Paste the printed hash into the password_hash column of a user record.

Usage:
    python hash_password.py <plain_password>
    python hash_password.py <plain_password> --rounds 14
"""

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from modules.auth.passwords import hash_password, SALT_ROUNDS

console = Console()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hash a password with bcrypt")
    parser.add_argument("password", nargs="?", help="Plain-text password to hash")
    parser.add_argument(
        "--rounds",
        type=int,
        default=SALT_ROUNDS,
        help=f"bcrypt work factor (default: {SALT_ROUNDS})",
    )
    args = parser.parse_args(argv)

    if not args.password:
        console.print("Usage: python hash_password.py <plain_password>")
        return 1

    hashed = hash_password(args.password, rounds=args.rounds)
    console.print()
    console.print(f"[bold]Plain:[/bold] {escape(args.password)}", highlight=False)
    console.print(f"[bold]Hashed:[/bold] {hashed}", highlight=False)
    console.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
