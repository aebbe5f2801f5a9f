"""Command-line access to the address book."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .app import AddressBook, AddressBookError, ListItem
from .contact import Contact

DEFAULT_FILE = "contacts.json"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinyinbook", description="A small address book sorted by pinyin."
    )
    parser.add_argument("--file", default=DEFAULT_FILE, help="contacts JSON file")
    parser.add_argument(
        "--english", action="store_true", help="show texts in English"
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("list", help="show all contacts")

    add = commands.add_parser("add", help="add a contact")
    add.add_argument("name")
    add.add_argument("number")
    add.add_argument("--group", default="")
    add.add_argument("--email", default="")

    delete = commands.add_parser("delete", help="delete a contact by name")
    delete.add_argument("name")

    search = commands.add_parser("search", help="show contacts matching a field")
    search.add_argument("field")
    search.add_argument("text")

    return parser


def _print_items(items: list[ListItem]) -> None:
    for item in items:
        if item.is_heading:
            print(item.text)
        else:
            print("  " + item.text.replace("\n", "\n  "))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the address book command; returns the exit status."""
    args = _build_parser().parse_args(argv)
    book = AddressBook(args.file)
    if args.english:
        book.toggle_language()

    try:
        if args.command == "add":
            title, message = book.save_contact(
                Contact(), Contact(args.name, args.number, args.group, args.email)
            )
            print(f"{title}: {message}")
        elif args.command == "delete":
            book.delete_contact(args.name)
        elif args.command == "search":
            _print_items(book.filtered(args.text, args.field))
        else:
            _print_items(book.items)
    except AddressBookError as exc:
        print(f"{exc.title}: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())