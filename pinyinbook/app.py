"""The address book screen: the grouped contact list, search, index jumps and edits."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from .contact import Contact
from .index_bar import AlphabetIndexBar
from .info_page import InformationPage
from .manager import ContactManager
from .pinyin import OTHER, get_initial

SECTION = "section"
HEADER = "header"
CONTACT = "contact"

OTHER_SECTION_TITLE = "# 其他"
POPUP_MS = 2000

_SEARCH_FIELDS_ZH = ("姓名", "电话", "邮箱", "组别")
_SEARCH_FIELDS_EN = ("Name", "Phone", "Email", "Group")

_FIELD_VALUES: dict[str, Callable[[Contact], str]] = {
    "姓名": Contact.display_name,
    "Name": Contact.display_name,
    "电话": lambda c: c.number,
    "Phone": lambda c: c.number,
    "组别": lambda c: c.group,
    "Group": lambda c: c.group,
    "邮箱": lambda c: c.email,
    "Email": lambda c: c.email,
}


class AddressBookError(Exception):
    """An operation on the address book was refused; carries a title and a message."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


@dataclass
class ListItem:
    """One row of the contact list.

    kind is "section" for index headings of the full list, "header" for the
    headings of a filtered list, and "contact" for a person.
    """

    text: str
    kind: str = CONTACT
    contact: Optional[Contact] = None

    @property
    def is_heading(self) -> bool:
        return self.kind != CONTACT


def _index_initial(name: str) -> str:
    initial = get_initial(name)
    return initial if initial.isalpha() else OTHER


def _section_title(initial: str) -> str:
    return OTHER_SECTION_TITLE if initial == OTHER else initial


class AddressBook:
    """State of the main window: contacts, list rows, language, colour scheme."""

    def __init__(self, path: Optional[str | os.PathLike[str]] = None) -> None:
        self.path = path
        self.manager = ContactManager()
        if path is not None:
            self.manager.load(path)
        self.chinese = True
        self.dark_mode = False
        self.items: list[ListItem] = []
        self.current_index: Optional[int] = None
        self.popup: Optional[str] = None
        self.notices: list[tuple[str, str]] = []
        self.index_bar = AlphabetIndexBar(on_letter_clicked=self.jump_to_letter)
        self.info_page = InformationPage(
            on_save=self._page_save, on_delete=self._page_delete
        )
        self.refresh()

    @property
    def window_title(self) -> str:
        return "小型通讯录" if self.chinese else "Small Address Book"

    @property
    def search_placeholder(self) -> str:
        return "输入搜索内容..." if self.chinese else "Enter search text..."

    def _t(self, chinese: str, english: str) -> str:
        return chinese if self.chinese else english

    def _contact_text(self, contact: Contact) -> str:
        if self.chinese:
            return f"姓名：{contact.display_name()}\n电话：{contact.number}"
        return f"Name: {contact.display_name()}\nPhone: {contact.number}"

    def _persist(self) -> None:
        if self.path is not None:
            self.manager.save(self.path)

    def refresh(self) -> list[ListItem]:
        """Rebuild the full list, grouped under index headings."""
        self.manager.sort_by_name()
        items: list[ListItem] = []
        last: Optional[str] = None
        for contact in self.manager:
            name = contact.display_name().strip()
            if not name:
                continue
            initial = _index_initial(name)
            if initial != last:
                last = initial
                items.append(ListItem(_section_title(initial), SECTION))
            items.append(ListItem(self._contact_text(contact), CONTACT, contact))
        self.items = items
        return list(items)

    def filtered(self, filter: str, field: str) -> list[ListItem]:
        """Show only contacts whose field contains filter, ignoring case."""
        needle = filter.casefold()
        value_of = _FIELD_VALUES.get(field)
        items: list[ListItem] = []
        last: Optional[str] = None
        for contact in self.manager:
            if filter:
                if value_of is None or needle not in value_of(contact).casefold():
                    continue
            initial = _index_initial(contact.display_name().strip())
            if initial != last:
                last = initial
                items.append(ListItem(_section_title(initial), HEADER))
            items.append(ListItem(self._contact_text(contact), CONTACT, contact))
        self.items = items
        return list(items)

    def search_fields(self) -> list[str]:
        """The fields offered for searching, in the current language."""
        return list(_SEARCH_FIELDS_ZH if self.chinese else _SEARCH_FIELDS_EN)

    def _first_with_initial(
        self, contacts: list[Contact], letter: str
    ) -> Optional[Contact]:
        for contact in contacts:
            initial = get_initial(contact.display_name())
            if letter == OTHER:
                if not initial.isalpha():
                    return contact
            elif initial == letter:
                return contact
        return None

    def jump_to_letter(self, letter: str) -> Optional[int]:
        """Select the heading for letter, or for the next letter that has contacts.

        Returns the list position of the selected heading, or None.
        """
        self.index_bar.highlight_letter(letter)
        contacts = self.manager.contacts()
        target = self._first_with_initial(contacts, letter)

        if target is None and letter != OTHER:
            letters = self.index_bar.letters()
            if letter in letters:
                for following in letters[letters.index(letter) + 1:]:
                    target = self._first_with_initial(contacts, following)
                    if target is not None:
                        break

        if target is None:
            return None

        initial = _index_initial(target.display_name())
        for position, item in enumerate(self.items):
            if item.kind == SECTION and item.text.strip().startswith(initial):
                self.current_index = position
                self.popup = initial
                return position
        return None

    def save_contact(self, original: Contact, modified: Contact) -> tuple[str, str]:
        """Add modified, or replace original with it; returns the success notice."""
        if not original.display_name():
            if not modified.display_name() or not modified.number:
                raise AddressBookError(
                    self._t("保存失败", "Save Failed"),
                    self._t("姓名和电话不能为空！", "Name and phone cannot be empty!"),
                )
            wanted = modified.display_name().casefold()
            if any(c.display_name().casefold() == wanted for c in self.manager):
                raise AddressBookError(
                    self._t("添加失败", "Add Failed"),
                    self._t("该联系人已存在！", "Contact already exists!"),
                )
            self.manager.add(modified)
        else:
            self.manager.delete(original.display_name())
            self.manager.add(modified)

        self._persist()
        self.refresh()
        return (
            self._t("保存成功", "Save Success"),
            self._t("联系人信息已更新", "Contact information updated"),
        )

    def delete_contact(self, name: str) -> None:
        """Delete the contact with this name and close the detail page."""
        if not self.manager.delete(name):
            raise AddressBookError(
                self._t("删除失败", "Delete Failed"),
                self._t("未找到该联系人", "Contact not found"),
            )
        self._persist()
        self.refresh()
        self.info_page.visible = False

    def find_by_item_text(self, text: str) -> Contact:
        """Open the detail page for the contact a list row shows."""
        first_line = text.split("\n")[0].strip()
        prefix = "姓名：" if self.chinese else "Name: "
        if first_line.startswith(prefix):
            first_line = first_line[len(prefix):]
        wanted = first_line.strip()

        for contact in self.manager:
            if contact.display_name().strip() == wanted:
                self.info_page.set_language(self.chinese)
                self.info_page.show_contact_details(contact)
                return contact

        raise AddressBookError(
            self._t("查找失败", "Search Failed"),
            self._t(
                "未找到该联系人信息！请检查姓名是否完全一致。",
                "Contact not found! Please check if the name is exactly the same.",
            ),
        )

    def toggle_language(self) -> None:
        """Switch between Chinese and English."""
        self.chinese = not self.chinese
        self.refresh()

    def toggle_dark_mode(self) -> None:
        """Switch between the dark and the light colour scheme."""
        self.dark_mode = not self.dark_mode
        self.info_page.set_dark_mode(self.dark_mode)

    def _page_save(self, original: Contact, modified: Contact) -> None:
        try:
            self.notices.append(self.save_contact(original, modified))
        except AddressBookError as exc:
            self.notices.append((exc.title, exc.message))

    def _page_delete(self, name: str) -> None:
        try:
            self.delete_contact(name)
        except AddressBookError as exc:
            self.notices.append((exc.title, exc.message))