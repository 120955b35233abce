# -*- coding: utf-8 -*-
"""
Demo tray application.

- Registers every menu control in a MenuManager
- Runs a tray icon (pystray) whose clicks go through MenuManager.update()
- Color radio group recolours the tray icon; other clicks are logged and
  optionally announced with a plyer notification
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from .config import AppConfig
from .controls import (
    CheckableItem,
    CheckboxGroup,
    CheckMenuItem,
    IconItem,
    IconMenuItem,
    MenuControl,
    MenuId,
    MenuItem,
    PlainItem,
    RadioGroup,
    Standalone,
    checkbox,
    icon_item,
    plain,
    radio,
    standalone,
)
from .icon import COLORS, make_color_icon
from .manager import MenuManager
from .notify import notify
from .tray import LayoutEntry, Separator, Submenu, TrayController

log = logging.getLogger("traycontrols.app")


class MenuGroup(Enum):
    RADIO_COLOR = "radio_color"
    RADIO_LANGUAGE = "radio_language"
    CHECKBOX_CHANGE = "checkbox_change"


QUIT_ID = MenuId("quit")
ABOUT_ID = MenuId("about")
AUTOSTART_ID = MenuId("autostart")

COLOR_ITEMS = (("red", "Red"), ("green", "Green"), ("blue", "Blue"))
LANGUAGE_ITEMS = (("english", "English"), ("chinese", "Chinese"), ("japanese", "Japanese"))
CHANGE_ITEMS = (
    ("added", "Added"),
    ("removed", "Removed"),
    ("connected", "Connected"),
    ("disconnected", "Disconnected"),
)


def create_menu(manager: MenuManager, default_color: str = "red") -> List[LayoutEntry]:
    """Register the demo controls and return the tray layout that shows them."""

    def radio_group(items, group: MenuGroup, default_id: str) -> List[LayoutEntry]:
        ids: List[LayoutEntry] = []
        for key, text in items:
            item = CheckMenuItem(text, checked=(key == default_id), menu_id=key)
            manager.insert(radio(item, group, default=default_id))
            ids.append(item.identifier())
        return ids

    color_entries = radio_group(COLOR_ITEMS, MenuGroup.RADIO_COLOR, default_color)
    language_entries = radio_group(LANGUAGE_ITEMS, MenuGroup.RADIO_LANGUAGE, "english")

    change_entries: List[LayoutEntry] = []
    for key, text in CHANGE_ITEMS:
        item = CheckMenuItem(text, checked=False, menu_id=key)
        manager.insert(checkbox(item, MenuGroup.CHECKBOX_CHANGE))
        change_entries.append(item.identifier())

    manager.insert(standalone(CheckMenuItem("Start with system", checked=False, menu_id=AUTOSTART_ID)))
    manager.insert(icon_item(IconMenuItem("About", menu_id=ABOUT_ID)))
    manager.insert(plain(MenuItem("Quit", menu_id=QUIT_ID)))

    return [
        Submenu("Color", color_entries),
        Separator(),
        Submenu("Language", language_entries),
        Separator(),
        Submenu("Change", change_entries),
        Separator(),
        AUTOSTART_ID,
        ABOUT_ID,
        Separator(),
        QUIT_ID,
    ]


class TrayControlsApp:
    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.manager: MenuManager[MenuGroup] = MenuManager()
        self.layout = create_menu(self.manager, self.config.default_color)
        self.color = self.config.default_color
        self.language = "english"
        self.tray: Optional[TrayController] = None

    def _notify(self, message: str) -> None:
        if self.config.notifications_enabled:
            notify(self.config.title, message, app_name=self.config.title)

    def on_menu_click(self, menu_id: MenuId) -> None:
        self.manager.update(menu_id, self.handle_control)

    def handle_control(self, control: Optional[MenuControl]) -> None:
        if control is None:
            log.warning("Click on a menu id that is not registered")
            return

        if isinstance(control, PlainItem):
            log.info("Click Menu Item: %s", control.display_text())
            if control.identifier() == QUIT_ID:
                self.quit()
        elif isinstance(control, IconItem):
            log.info("Click Icon Menu: %s", control.display_text())
            self._notify(f"{self.config.title}: tray menu state demo")
        elif isinstance(control, CheckableItem):
            self._handle_check(control)

    def _handle_check(self, control: CheckableItem) -> None:
        kind = control.kind
        item = control.item
        if isinstance(kind, Standalone):
            log.info("Click the standalone check menu: %s -> %s", item.display_text(), item.is_checked())
        elif isinstance(kind, CheckboxGroup):
            if kind.group is MenuGroup.CHECKBOX_CHANGE:
                log.info("Click the check box menu (change): %s -> %s", item.display_text(), item.is_checked())
                self._notify(f"{item.display_text()}: {'on' if item.is_checked() else 'off'}")
        elif isinstance(kind, RadioGroup):
            if kind.default == item.identifier():
                log.info("Radio %s is its group's default", item.display_text())
            if not item.is_checked():
                # No usable default and the last checked member was unchecked.
                log.info("Radio group %s has no selection", kind.group.value)
                return
            if kind.group is MenuGroup.RADIO_COLOR:
                self.set_color(item.identifier().value)
            elif kind.group is MenuGroup.RADIO_LANGUAGE:
                self.language = item.identifier().value
                log.info("Check the radio menu (language): %s", item.display_text())

    def set_color(self, color: str) -> None:
        rgba = COLORS.get(color)
        if rgba is None:
            return
        self.color = color
        log.info("Check the radio menu (color): %s", color)
        if self.tray is not None:
            self.tray.set_image(make_color_icon(rgba, self.config.icon_size))

    def build_tray(self) -> TrayController:
        image = make_color_icon(COLORS[self.color], self.config.icon_size)
        self.tray = TrayController(image, self.config.title, self.manager, self.layout, self.on_menu_click)
        return self.tray

    def quit(self) -> None:
        if self.tray is not None:
            self.tray.stop()

    def run(self) -> None:
        tray = self.tray or self.build_tray()
        log.info("Starting tray %r with %d menu controls", self.config.title, len(self.manager))
        tray.run()
