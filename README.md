# pinyinbook

A small address book that keeps contacts in a JSON file and lists them in
index order. Chinese names are ordered by their pinyin, and the list is
split into sections headed by an initial letter (`A` to `Z`, with
`# 其他` for names that do not start with a letter).

Each contact has a name, a phone number, a group and an e-mail address.
When a new contact is added, name and phone number are required, and the
name must not match an existing one when compared case-insensitively.

## Installation

```
pip install .
```

## Command line

```
pinyinbook [--file FILE] [--english] [COMMAND ...]
```

`--file` names the contacts file (default `contacts.json` in the current
directory). Texts are in Chinese unless `--english` is given.

Commands:

- `pinyinbook list` — print all contacts under their section headings.
  This is also what happens when no command is given.
- `pinyinbook add NAME NUMBER [--group GROUP] [--email EMAIL]` — add a
  contact and write the file.
- `pinyinbook delete NAME` — delete the first contact with that name and
  write the file.
- `pinyinbook search FIELD TEXT` — print the contacts whose field contains
  the text, ignoring case. FIELD is one of `姓名`, `电话`, `组别`, `邮箱`
  or `Name`, `Phone`, `Group`, `Email`. An empty TEXT lists everyone; an
  unknown FIELD with non-empty TEXT matches no one.

A refused operation (missing name or phone, a duplicate name, an unknown
name to delete) prints its reason to standard error and exits with
status 1.

Example:

```
pinyinbook --file book.json add 张三 12345 --group friends --email zhang@example.com
pinyinbook --file book.json add Alice 67890 --email alice@example.com
pinyinbook --file book.json list
```

## Library use

```python
from pinyinbook.contact import Contact
from pinyinbook.manager import ContactManager
from pinyinbook.pinyin import get_initial, get_full_pinyin

manager = ContactManager()
manager.add(Contact("张三", "12345", "friends", "zhang@example.com"))
manager.add(Contact("Alice", "67890", "work", "alice@example.com"))

for contact in manager.contacts():
    print(contact.display_name(), get_initial(contact.display_name()))

manager.save("contacts.json")
```

### `pinyinbook.pinyin`

`get_initial("张三")` returns `"Z"` and `get_full_pinyin("张三")` returns
`"zhangsan"`. The built-in table covers common characters only. In
`get_full_pinyin`, a character outside the table that is a letter or digit
is kept in lower case, and anything else becomes a space. `get_initial`
returns `"#"` for empty text and for text that starts with neither a known
character nor a letter.

### `pinyinbook.contact`

`Contact` is a dataclass with `name`, `number`, `group` and `email`.
`display_name()` strips whitespace and removes a stray `姓名：` label.
`to_json()` and `Contact.from_json()` convert to and from a mapping;
missing or non-text fields become empty strings.

### `pinyinbook.manager`

`ContactManager` keeps contacts sorted: empty names first, then names
indexed under `#` (in plain string order), then the rest by pinyin,
ignoring case. It offers `add`, `delete` (returns whether a contact was
removed), `sort_by_name`, `contacts`, `by_group`, `save` and `load`.
`save` writes a UTF-8 JSON array; `load` replaces the contacts with those
in the file, and leaves them untouched if the file cannot be read or does
not hold a JSON array.

### `pinyinbook.app`

`AddressBook(path)` loads the file and holds the state of the whole
address book:

- `refresh()` and `filtered(filter, field)` build the list as `ListItem`
  rows (headings and contacts).
- `search_fields()` gives the searchable field names in the current
  language.
- `jump_to_letter(letter)` selects the section for a letter, or for the
  next letter that has contacts, and returns its list position.
- `save_contact(original, modified)` adds or replaces a contact, and
  `delete_contact(name)` removes one; both write the file.
- `find_by_item_text(text)` opens the contact shown by a list row in the
  detail page.
- `toggle_language()` and `toggle_dark_mode()` switch language and colour
  scheme.

Refused operations raise `AddressBookError`, which carries a `title` and
a `message`.

`pinyinbook.index_bar.AlphabetIndexBar` models the `#`, `A`–`Z` index
strip and its highlighting, and `pinyinbook.info_page.InformationPage`
models the editing page for one contact (fields, validation with
`ValidationError`, leaving with unsaved changes via `BackChoice`, labels
and style sheets for both languages and colour schemes).

## What it does not do

There is no graphical window. The index strip, the detail page and the
light and dark styles exist as state and style-sheet text that a
front end could draw, but the package draws nothing itself; the only
user interface it ships is the `pinyinbook` command.