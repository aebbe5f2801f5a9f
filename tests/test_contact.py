import pytest

from pinyinbook.contact import Contact


def test_defaults_are_empty():
    c = Contact("Alice", "555")
    assert c.group == ""
    assert c.email == ""


def test_display_name_strips_whitespace():
    assert Contact("  Alice  ", "1").display_name() == "Alice"


def test_display_name_removes_label():
    assert Contact("姓名：张三", "1").display_name() == "张三"


def test_to_json_keys_and_raw_values():
    c = Contact(" Bob ", "42", "work", "bob@example.com")
    assert c.to_json() == {
        "name": " Bob ",
        "number": "42",
        "group": "work",
        "email": "bob@example.com",
    }


def test_round_trip():
    c = Contact("张三", "100", "family", "zhang@example.com")
    assert Contact.from_json(c.to_json()) == c


def test_from_json_missing_keys():
    assert Contact.from_json({"name": "Eve"}) == Contact("Eve", "", "", "")


@pytest.mark.parametrize("bad", [1, None, ["x"], {"a": 1}, 2.5])
def test_from_json_non_text_becomes_empty(bad):
    c = Contact.from_json({"name": "X", "number": bad})
    assert c.number == ""
    assert c.name == "X"