"""Tray menu construction and click routing (pystray dummy backend)."""

import pytest

pytest.importorskip("pystray")

from traycontrols.controls import (  # noqa: E402
    CheckMenuItem,
    MenuId,
    MenuItem,
    checkbox,
    plain,
    radio,
)
from traycontrols.icon import COLORS, make_color_icon  # noqa: E402
from traycontrols.tray import Separator, Submenu, TrayController  # noqa: E402

from conftest import Group  # noqa: E402


@pytest.fixture
def tray_setup(manager):
    r1 = CheckMenuItem("Red", checked=True, menu_id="red")
    r2 = CheckMenuItem("Green", checked=False, menu_id="green")
    for item in (r1, r2):
        manager.insert(radio(item, Group.COLOR, default="red"))
    box = CheckMenuItem("Added", checked=False, menu_id="added")
    manager.insert(checkbox(box, Group.FLAGS))
    quit_item = MenuItem("Quit", menu_id="quit")
    manager.insert(plain(quit_item))

    clicks = []

    def on_click(menu_id):
        clicks.append(menu_id)
        manager.update(menu_id, lambda _c: None)

    layout = [
        Submenu("Color", [MenuId("red"), MenuId("green")]),
        Separator(),
        MenuId("added"),
        MenuId("not-registered"),
        MenuId("quit"),
    ]
    tray = TrayController(make_color_icon(COLORS["red"]), "test-tray", manager, layout, on_click)
    return tray, clicks, (r1, r2, box, quit_item)


def _items(menu):
    return list(menu.items)


def test_menu_mirrors_layout(tray_setup):
    tray, _clicks, _widgets = tray_setup
    top = _items(tray.icon.menu)

    # Unregistered ids are skipped.
    assert len(top) == 4
    color, _separator, added, quit_entry = top
    assert color.text == "Color"
    assert [i.text for i in _items(color.submenu)] == ["Red", "Green"]
    assert added.text == "Added"
    assert quit_entry.text == "Quit"


def test_check_marks_and_radio_flags(tray_setup):
    tray, _clicks, _widgets = tray_setup
    color, _separator, added, quit_entry = _items(tray.icon.menu)
    red, green = _items(color.submenu)

    assert red.checked is True
    assert green.checked is False
    assert red.radio is True
    assert added.checked is False
    assert added.radio is False
    assert quit_entry.checked is None


def test_radio_click_routes_through_manager(tray_setup):
    tray, clicks, (r1, r2, _box, _quit) = tray_setup
    color = _items(tray.icon.menu)[0]
    green = _items(color.submenu)[1]

    green(tray.icon)

    assert clicks == [MenuId("green")]
    assert r2.is_checked() is True
    assert r1.is_checked() is False


def test_clicking_checked_radio_falls_back_to_default(tray_setup):
    tray, _clicks, (r1, r2, _box, _quit) = tray_setup

    tray.handle_click(MenuId("red"))  # toggles red off, default puts it back

    assert r1.is_checked() is True
    assert r2.is_checked() is False


def test_checkbox_click_toggles(tray_setup):
    tray, _clicks, (_r1, _r2, box, _quit) = tray_setup
    tray.handle_click(MenuId("added"))
    assert box.is_checked() is True
    tray.handle_click(MenuId("added"))
    assert box.is_checked() is False


def test_plain_click_reports_id(tray_setup):
    tray, clicks, _widgets = tray_setup
    tray.handle_click(MenuId("quit"))
    assert clicks == [MenuId("quit")]


def test_labels_follow_handle_text(tray_setup):
    tray, _clicks, (_r1, _r2, _box, quit_item) = tray_setup
    quit_item.set_text("Exit")
    tray.update_menu()
    assert _items(tray.icon.menu)[-1].text == "Exit"


def test_set_image(tray_setup):
    tray, _clicks, _widgets = tray_setup
    image = make_color_icon(COLORS["blue"])
    tray.set_image(image)
    assert tray.icon.icon is image
