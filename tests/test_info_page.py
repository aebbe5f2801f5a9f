import pytest

from pinyinbook.contact import Contact
from pinyinbook.info_page import BackChoice, InformationPage, ValidationError


def _page():
    saved, deleted = [], []
    page = InformationPage(
        on_save=lambda o, m: saved.append((o, m)), on_delete=deleted.append
    )
    return page, saved, deleted


def _alice():
    return Contact("Alice", "555", "friends", "alice@example.com")


def test_show_contact_details_fills_fields():
    page, _, _ = _page()
    page.show_contact_details(_alice())
    assert page.fields == {
        "name": "Alice",
        "number": "555",
        "group": "friends",
        "email": "alice@example.com",
    }
    assert page.has_changes is False
    assert page.delete_visible is True
    assert page.visible is True


def test_show_uses_display_name():
    page, _, _ = _page()
    page.show_contact_details(Contact("  姓名：张三 ", "1"))
    assert page.fields["name"] == "张三"


def test_new_contact_hides_delete():
    page, _, _ = _page()
    page.show_contact_details(Contact())
    assert page.delete_visible is False


def test_set_field_marks_changes():
    page, _, _ = _page()
    page.show_contact_details(_alice())
    page.set_field("group", "family")
    assert page.has_changes is True
    assert page.fields["group"] == "family"


def test_set_same_value_is_not_a_change():
    page, _, _ = _page()
    page.show_contact_details(_alice())
    page.set_field("name", "Alice")
    assert page.has_changes is False


def test_set_unknown_field_raises():
    page, _, _ = _page()
    with pytest.raises(KeyError):
        page.set_field("address", "x")


def test_save_empty_raises_in_chinese():
    page, saved, _ = _page()
    page.show_contact_details(Contact())
    page.set_field("name", "  ")
    with pytest.raises(ValidationError) as info:
        page.save()
    assert info.value.message == "姓名和电话不能为空！"
    assert info.value.title == "保存失败"
    assert saved == []


def test_save_empty_raises_in_english():
    page, _, _ = _page()
    page.set_language(False)
    page.set_field("name", "Bob")
    with pytest.raises(ValidationError) as info:
        page.save()
    assert str(info.value) == "Name and phone cannot be empty!"


def test_save_reports_stripped_contact_and_resets():
    page, saved, _ = _page()
    alice = _alice()
    page.show_contact_details(alice)
    page.set_field("name", "  Alicia ")
    page.set_field("email", " a@example.com ")
    original, modified = page.save()
    assert original == alice
    assert modified == Contact("Alicia", "555", "friends", "a@example.com")
    assert saved == [(alice, modified)]
    assert page.original == Contact()
    assert set(page.fields.values()) == {""}
    assert page.delete_visible is False
    assert page.visible is False


def test_delete_confirmed_reports_name():
    page, _, deleted = _page()
    page.show_contact_details(_alice())
    assert page.delete(True) == "Alice"
    assert deleted == ["Alice"]
    assert page.visible is False


def test_delete_declined_does_nothing():
    page, _, deleted = _page()
    page.show_contact_details(_alice())
    assert page.delete(False) is None
    assert deleted == []
    assert page.visible is True


def test_back_without_changes_closes():
    page, saved, _ = _page()
    page.show_contact_details(_alice())
    assert page.back(BackChoice.CANCEL) is True
    assert page.visible is False
    assert saved == []


def test_back_cancel_keeps_page_open():
    page, _, _ = _page()
    page.show_contact_details(_alice())
    page.set_field("number", "777")
    assert page.back(BackChoice.CANCEL) is False
    assert page.visible is True
    assert page.fields["number"] == "777"


def test_back_discard_closes_without_saving():
    page, saved, _ = _page()
    page.show_contact_details(_alice())
    page.set_field("number", "777")
    assert page.back(BackChoice.DISCARD) is True
    assert page.visible is False
    assert saved == []


def test_back_save_saves():
    page, saved, _ = _page()
    page.show_contact_details(_alice())
    page.set_field("number", "777")
    assert page.back(BackChoice.SAVE) is True
    assert saved[0][1].number == "777"
    assert page.visible is False


def test_back_save_invalid_raises_and_closes():
    page, saved, _ = _page()
    page.show_contact_details(Contact())
    page.set_field("name", "Bob")
    with pytest.raises(ValidationError):
        page.back(BackChoice.SAVE)
    assert page.visible is False
    assert saved == []


def test_labels_follow_language():
    page, _, _ = _page()
    assert page.labels()["name"] == "姓名："
    assert page.labels()["delete"] == "删除联系人"
    page.set_language(False)
    assert page.labels()["name"] == "Name:"
    assert page.labels()["save"] == "Save"


def test_styles_follow_dark_mode():
    page, _, _ = _page()
    light = page.styles()
    assert "#f5deb3" in light["background"]
    page.set_dark_mode(True)
    dark = page.styles()
    assert "#2D2D30" in dark["background"]
    assert "#252526" in dark["frame"]
    assert dark["save_button"] == light["save_button"]
    page.set_dark_mode(False)
    assert page.styles() == light