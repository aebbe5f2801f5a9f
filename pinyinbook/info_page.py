"""The detail page for viewing, editing, adding and deleting one contact."""

from __future__ import annotations

import enum
from typing import Callable, Optional

from .contact import Contact

FIELDS = ("name", "number", "group", "email")

_LABELS_ZH = {
    "name": "姓名：",
    "number": "电话：",
    "group": "组别：",
    "email": "邮箱：",
    "save": "保存",
    "delete": "删除联系人",
}
_LABELS_EN = {
    "name": "Name:",
    "number": "Phone:",
    "group": "Group:",
    "email": "Email:",
    "save": "Save",
    "delete": "Delete Contact",
}

_SAVE_BUTTON_STYLE = """
background-color: #4CAF50;
color: white;
border-radius: 6px;
padding: 8px 16px;
font-size: 16px;
"""
_DELETE_BUTTON_STYLE = """
background-color: #f44336;
color: white;
border-radius: 6px;
padding: 8px 16px;
font-size: 16px;
"""
_FRAME_TEMPLATE = (
    "background-color: {frame};"
    "border: 1px solid {border};"
    "border-radius: 8px;"
    "box-shadow: 0 4px 8px rgba(0, 0, 0, 0.1);"
)

_DARK = {
    "background": "background-color: #2D2D30;",
    "frame": _FRAME_TEMPLATE.format(frame="#252526", border="#3F3F46"),
    "edit": """
background-color: #3C3C3C;
border: 1px solid #3F3F46;
color: #FFFFFF;
border-radius: 6px;
padding: 8px 12px;
min-height: 30px;
font-size: 16px;
""",
    "save_button": _SAVE_BUTTON_STYLE,
    "delete_button": _DELETE_BUTTON_STYLE,
    "back_button": """
background-color: #3C3C3C;
border-radius: 4px;
border: 1px solid #3F3F46;
""",
}
_LIGHT = {
    "background": "background-color: #f5deb3;",
    "frame": _FRAME_TEMPLATE.format(frame="white", border="#d0b090"),
    "edit": """
background-color: #f8f8f8;
border: 1px solid #e0e0e0;
color: #333;
border-radius: 6px;
padding: 8px 12px;
min-height: 30px;
font-size: 16px;
""",
    "save_button": _SAVE_BUTTON_STYLE,
    "delete_button": _DELETE_BUTTON_STYLE,
    "back_button": """
background-color: white;
border-radius: 4px;
border: 1px solid #d0b090;
""",
}


class ValidationError(ValueError):
    """Raised when a contact cannot be saved as entered."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


class BackChoice(enum.Enum):
    """The answer to 'save changes?' when leaving an edited page."""

    SAVE = "save"
    DISCARD = "discard"
    CANCEL = "cancel"


class InformationPage:
    """Edit state for one contact, reporting saves and deletions to listeners."""

    def __init__(
        self,
        on_save: Optional[Callable[[Contact, Contact], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.on_save = on_save
        self.on_delete = on_delete
        self.original = Contact()
        self._fields: dict[str, str] = dict.fromkeys(FIELDS, "")
        self.has_changes = False
        self.chinese = True
        self.dark_mode = False
        self.visible = False
        self.delete_visible = True

    @property
    def fields(self) -> dict[str, str]:
        """A copy of the current editor contents."""
        return dict(self._fields)

    def _set_text(self, field: str, value: str) -> None:
        if self._fields[field] != value:
            self._fields[field] = value
            self.has_changes = True

    def show_contact_details(self, contact: Contact) -> None:
        """Load contact into the editors and show the page."""
        self.original = contact
        self._set_text("name", contact.display_name())
        self._set_text("number", contact.number)
        self._set_text("group", contact.group)
        self._set_text("email", contact.email)
        self.has_changes = False
        self.delete_visible = bool(contact.display_name())
        self.visible = True

    def set_field(self, field: str, value: str) -> None:
        """Type value into one of the editors."""
        if field not in self._fields:
            raise KeyError(field)
        self._set_text(field, value)

    def save(self) -> tuple[Contact, Contact]:
        """Report the edited contact, reset the page and close it.

        Returns the original and the modified contact.
        """
        name = self._fields["name"].strip()
        number = self._fields["number"].strip()
        if not name or not number:
            raise ValidationError(
                "保存失败" if self.chinese else "Save Failed",
                "姓名和电话不能为空！" if self.chinese else "Name and phone cannot be empty!",
            )
        original = self.original
        modified = Contact(
            name,
            number,
            self._fields["group"].strip(),
            self._fields["email"].strip(),
        )
        if self.on_save is not None:
            self.on_save(original, modified)
        self.has_changes = False
        self.original = Contact()
        for field in FIELDS:
            self._set_text(field, "")
        self.delete_visible = False
        self.visible = False
        return original, modified

    def delete(self, confirmed: bool) -> Optional[str]:
        """Delete the shown contact if confirmed; return the name reported, if any."""
        if not confirmed:
            return None
        name = self.original.display_name()
        if self.on_delete is not None:
            self.on_delete(name)
        self.visible = False
        return name

    def back(self, choice: Optional[BackChoice] = None) -> bool:
        """Leave the page; with unsaved changes, choice decides. Returns whether it closed."""
        if not self.has_changes:
            self.visible = False
            return True
        if choice is BackChoice.SAVE:
            try:
                self.save()
            finally:
                self.visible = False
            return True
        if choice is BackChoice.DISCARD:
            self.visible = False
            return True
        return False

    def set_language(self, chinese: bool) -> None:
        """Switch between Chinese and English texts."""
        self.chinese = chinese

    def set_dark_mode(self, dark: bool) -> None:
        """Switch between the dark and the light colour scheme."""
        self.dark_mode = dark

    def labels(self) -> dict[str, str]:
        """Field titles and button texts in the current language."""
        return dict(_LABELS_ZH if self.chinese else _LABELS_EN)

    def styles(self) -> dict[str, str]:
        """Style sheets for the page parts in the current colour scheme."""
        return dict(_DARK if self.dark_mode else _LIGHT)