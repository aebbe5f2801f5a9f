"""A single address-book entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_NAME_PREFIX = "姓名："


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class Contact:
    """A person in the address book."""

    name: str = ""
    number: str = ""
    group: str = ""
    email: str = ""

    def display_name(self) -> str:
        """The name with surrounding whitespace and any leftover label removed."""
        return self.name.strip().replace(_NAME_PREFIX, "")

    def to_json(self) -> dict[str, str]:
        """Return the contact as a JSON-ready mapping."""
        return {
            "name": self.name,
            "number": self.number,
            "group": self.group,
            "email": self.email,
        }

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Contact":
        """Build a contact from a mapping; missing or non-text fields become empty."""
        return cls(
            name=_as_text(obj.get("name")),
            number=_as_text(obj.get("number")),
            group=_as_text(obj.get("group")),
            email=_as_text(obj.get("email")),
        )