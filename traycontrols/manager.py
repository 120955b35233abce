# -*- coding: utf-8 -*-
"""
Menu manager: control registry plus radio/checkbox group coordination.

Two indexes are kept over the same handles:

- identifier -> MenuControl           (every control)
- group -> identifier -> CheckMenuItem  (checkbox and radio members only)

`update()` is called once per click notification, after the widget layer has
already flipped the clicked item's check flag. For radio members it restores
exclusivity, falling back to the configured default when the click left the
group empty, and reports the authoritative control to the callback.

Callbacks run synchronously inside `update()` and should not mutate the
manager. Doing so is tolerated (sibling clearing works on a snapshot) but
logged.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Mapping, Optional, TypeVar

from .controls import (
    MENU_CONTROL_TYPES,
    CheckableItem,
    CheckboxGroup,
    CheckMenuItem,
    IconItem,
    MenuControl,
    MenuId,
    PlainItem,
    RadioGroup,
    Standalone,
)

log = logging.getLogger("traycontrols.manager")

G = TypeVar("G", bound=Hashable)

UpdateCallback = Callable[[Optional[MenuControl]], None]


def _group_of(control: Optional[MenuControl]):
    """Return (True, group) for grouped check controls, (False, None) otherwise."""
    if isinstance(control, CheckableItem) and isinstance(control.kind, (CheckboxGroup, RadioGroup)):
        return True, control.kind.group
    return False, None


class MenuManager(Generic[G]):
    def __init__(self):
        self._id_to_control: Dict[MenuId, MenuControl] = {}
        self._grouped_check_items: Dict[G, Dict[MenuId, CheckMenuItem]] = {}
        self._update_depth: int = 0

    # --------- registry ---------
    def insert(self, control: MenuControl) -> None:
        if not isinstance(control, MENU_CONTROL_TYPES):
            raise TypeError(f"not a menu control: {control!r}")
        self._warn_if_updating("insert")

        menu_id = control.identifier()
        # Last write wins; a replaced grouped control must not linger in its old group.
        self._drop_group_entry(menu_id, self._id_to_control.get(menu_id))
        self._id_to_control[menu_id] = control

        grouped, group = _group_of(control)
        if grouped:
            self._grouped_check_items.setdefault(group, {})[menu_id] = control.item
        log.debug("Inserted %s (%s)", menu_id, type(control).__name__)

    def remove(self, menu_id: MenuId) -> None:
        self._warn_if_updating("remove")
        control = self._id_to_control.pop(menu_id, None)
        if control is None:
            return
        self._drop_group_entry(menu_id, control)
        log.debug("Removed %s", menu_id)

    def lookup(self, menu_id: MenuId) -> Optional[MenuControl]:
        return self._id_to_control.get(menu_id)

    def group_members(self, group: G) -> Optional[Mapping[MenuId, CheckMenuItem]]:
        members = self._grouped_check_items.get(group)
        if not members:
            return None
        return MappingProxyType(members)

    def groups(self) -> List[G]:
        return list(self._grouped_check_items)

    def checked_in_group(self, group: G) -> List[MenuId]:
        members = self._grouped_check_items.get(group) or {}
        return [menu_id for menu_id, item in members.items() if item.is_checked()]

    def __len__(self) -> int:
        return len(self._id_to_control)

    def __contains__(self, menu_id: object) -> bool:
        return menu_id in self._id_to_control

    def __iter__(self) -> Iterator[MenuId]:
        return iter(list(self._id_to_control))

    def _drop_group_entry(self, menu_id: MenuId, control: Optional[MenuControl]) -> None:
        grouped, group = _group_of(control)
        if not grouped:
            return
        members = self._grouped_check_items.get(group)
        if members is None:
            return
        members.pop(menu_id, None)
        if not members:
            del self._grouped_check_items[group]

    def _warn_if_updating(self, op: str) -> None:
        if self._update_depth:
            log.warning("MenuManager.%s called from inside an update callback", op)

    # --------- group coordination ---------
    def update(self, menu_id: MenuId, callback: UpdateCallback) -> None:
        """
        Apply group semantics for a click on `menu_id` and report the result.

        The callback is invoked exactly once: with None for an unknown
        identifier, with the clicked control for non-radio kinds, and with the
        authoritative (checked) control for radio members.
        """
        self._update_depth += 1
        try:
            callback(self._resolve_click(menu_id))
        finally:
            self._update_depth -= 1

    def _resolve_click(self, menu_id: MenuId) -> Optional[MenuControl]:
        control = self._id_to_control.get(menu_id)
        if control is None:
            log.debug("Click on unknown menu id %s", menu_id)
            return None

        if isinstance(control, (PlainItem, IconItem)):
            return control
        if not isinstance(control, CheckableItem):
            raise TypeError(f"not a menu control: {control!r}")

        kind = control.kind
        if isinstance(kind, (Standalone, CheckboxGroup)):
            return control
        if not isinstance(kind, RadioGroup):
            raise TypeError(f"not a check kind: {kind!r}")

        if kind.item.is_checked():
            checked_id, checked_control = menu_id, control
        else:
            if kind.default is None:
                return control
            fallback = self._id_to_control.get(kind.default)
            if not self._is_radio_member(fallback, kind.group):
                log.debug("Default %s of %s is not a radio in its group; ignoring", kind.default, menu_id)
                return control
            fallback.item.set_checked(True)
            checked_id, checked_control = kind.default, fallback

        members = self._grouped_check_items.get(kind.group)
        if members:
            for sibling_id, sibling in list(members.items()):
                if sibling_id != checked_id:
                    sibling.set_checked(False)
        return checked_control

    @staticmethod
    def _is_radio_member(control: Optional[MenuControl], group) -> bool:
        return (
            isinstance(control, CheckableItem)
            and isinstance(control.kind, RadioGroup)
            and control.kind.group == group
        )
