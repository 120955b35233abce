# -*- coding: utf-8 -*-
"""
System tray integration via pystray.

The tray menu is built from a layout of menu ids and the controls registered
in a MenuManager. Labels and check marks are callables, so they re-evaluate
from the shared handles whenever the menu is refreshed.

pystray does not flip check marks itself, so the controller does what a
native check widget would: toggle the clicked item's flag, then report the
click. The manager restores radio exclusivity from there.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Union

import pystray
from pystray import Menu as TrayMenu
from pystray import MenuItem as TrayMenuItem

from .controls import CheckableItem, MenuId, RadioGroup, as_check_item
from .manager import MenuManager

log = logging.getLogger("traycontrols.tray")


@dataclass(frozen=True)
class Separator:
    pass


@dataclass(frozen=True)
class Submenu:
    text: str
    entries: Sequence["LayoutEntry"] = field(default_factory=tuple)
    enabled: bool = True


LayoutEntry = Union[MenuId, Separator, Submenu]


class TrayController:
    def __init__(
        self,
        image,
        title: str,
        manager: MenuManager,
        layout: Sequence[LayoutEntry],
        on_click: Callable[[MenuId], None],
    ):
        """
        on_click: receives the clicked id after the check flag has been toggled.
        """
        self.manager = manager
        self.layout = list(layout)
        self.on_click = on_click
        self.icon = pystray.Icon(title, image, title, self._build_menu())

    def _build_menu(self) -> TrayMenu:
        return TrayMenu(*self._build_entries(self.layout))

    def _build_entries(self, entries: Sequence[LayoutEntry]) -> List[TrayMenuItem]:
        items: List[TrayMenuItem] = []
        for entry in entries:
            if isinstance(entry, Separator):
                items.append(TrayMenu.SEPARATOR)
            elif isinstance(entry, Submenu):
                items.append(TrayMenuItem(entry.text, TrayMenu(*self._build_entries(entry.entries)), enabled=entry.enabled))
            else:
                item = self._build_item(entry)
                if item is not None:
                    items.append(item)
        return items

    def _build_item(self, menu_id: MenuId):
        control = self.manager.lookup(menu_id)
        if control is None:
            log.warning("Layout refers to unregistered menu id %s; skipped", menu_id)
            return None

        widget = control.item

        def label(_item):
            return widget.display_text()

        def enabled(_item):
            return widget.is_enabled()

        def action(_icon, _item):
            self.handle_click(menu_id)

        check_item = as_check_item(control)
        if check_item is None:
            return TrayMenuItem(label, action, enabled=enabled)

        is_radio = isinstance(control, CheckableItem) and isinstance(control.kind, RadioGroup)
        return TrayMenuItem(
            label,
            action,
            checked=lambda _item: check_item.is_checked(),
            radio=is_radio,
            enabled=enabled,
        )

    def handle_click(self, menu_id: MenuId) -> None:
        check_item = as_check_item(self.manager.lookup(menu_id))
        if check_item is not None:
            check_item.toggle()
        self.on_click(menu_id)
        self.update_menu()

    def set_image(self, image) -> None:
        self.icon.icon = image

    def update_menu(self) -> None:
        try:
            self.icon.menu = self._build_menu()
            self.icon.update_menu()
        except Exception as exc:
            # On some backends, update_menu is not available or not needed.
            log.debug("Tray menu refresh skipped: %s", exc)

    def run(self) -> None:
        self.icon.run()

    def run_detached(self) -> None:
        self.icon.run_detached()

    def stop(self) -> None:
        try:
            self.icon.stop()
        except Exception as exc:
            log.debug("Tray stop failed: %s", exc)
