"""An ordered collection of contacts with JSON persistence."""

from __future__ import annotations

import json
import os
from functools import cmp_to_key
from typing import Iterable, Iterator

from .contact import Contact
from .pinyin import OTHER, get_full_pinyin, get_initial


def _compare(a: Contact, b: Contact) -> int:
    name_a = a.display_name().strip()
    name_b = b.display_name().strip()

    if not name_a or not name_b:
        return (bool(name_a) > bool(name_b)) - (bool(name_a) < bool(name_b))

    other_a = get_initial(name_a) == OTHER
    other_b = get_initial(name_b) == OTHER
    if other_a != other_b:
        return -1 if other_a else 1
    if other_a:
        return (name_a > name_b) - (name_a < name_b)

    key_a = get_full_pinyin(name_a).casefold()
    key_b = get_full_pinyin(name_b).casefold()
    return (key_a > key_b) - (key_a < key_b)


_SORT_KEY = cmp_to_key(_compare)


class ContactManager:
    """Keeps contacts sorted: empty names, then '#' names, then by pinyin."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts: list[Contact] = list(contacts)
        self.sort_by_name()

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))

    def add(self, contact: Contact) -> None:
        """Add a contact and restore the order."""
        self._contacts.append(contact)
        self.sort_by_name()

    def delete(self, name: str) -> bool:
        """Remove the first contact with this display name; report whether one was found."""
        for position, contact in enumerate(self._contacts):
            if contact.display_name() == name:
                del self._contacts[position]
                return True
        return False

    def sort_by_name(self) -> None:
        """Sort contacts in index order."""
        self._contacts.sort(key=_SORT_KEY)

    def contacts(self) -> list[Contact]:
        """A copy of all contacts in order."""
        return list(self._contacts)

    def by_group(self, group: str) -> list[Contact]:
        """Contacts whose group equals the given one."""
        return [c for c in self._contacts if c.group == group]

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write all contacts to a JSON array file."""
        data = [c.to_json() for c in self._contacts]
        with open(filename, "w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=4)
            handle.write("\n")

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Replace contacts with those in a JSON array file.

        A file that cannot be read, or that does not hold a JSON array,
        leaves the current contacts untouched.
        """
        try:
            with open(filename, encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError):
            return
        if not isinstance(data, list):
            return
        self._contacts = [
            Contact.from_json(item if isinstance(item, dict) else {}) for item in data
        ]
        self.sort_by_name()