# -*- coding: utf-8 -*-
"""
Menu controls: identifiers, widget handles and the closed set of control kinds.

The widget handles are plain mutable objects. The same CheckMenuItem instance
is shared by every index that refers to it, so a flag set through one view is
visible through all of them.

Control kinds are a closed union:

- PlainItem(item)          clickable action
- IconItem(item)           clickable action with an icon
- CheckableItem(kind)      kind is one of
    - Standalone(item)               ungrouped check item
    - CheckboxGroup(item, group)     grouped, toggles independently
    - RadioGroup(item, default, group)  grouped, mutually exclusive
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Optional, TypeVar, Union

G = TypeVar("G", bound=Hashable)

_auto_ids = itertools.count(1)


@dataclass(frozen=True)
class MenuId:
    value: str

    @classmethod
    def new(cls) -> "MenuId":
        # Never handed out twice within a process.
        return cls(f"__auto_{next(_auto_ids)}")

    def __str__(self) -> str:
        return self.value


def _as_menu_id(menu_id: Union[MenuId, str, None]) -> MenuId:
    if menu_id is None:
        return MenuId.new()
    if isinstance(menu_id, MenuId):
        return menu_id
    return MenuId(str(menu_id))


class MenuItem:
    def __init__(self, text: str, menu_id: Union[MenuId, str, None] = None, enabled: bool = True):
        self._id = _as_menu_id(menu_id)
        self._text = text
        self._enabled = bool(enabled)

    def identifier(self) -> MenuId:
        return self._id

    def display_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id.value!r}, {self._text!r})"


class IconMenuItem(MenuItem):
    def __init__(
        self,
        text: str,
        icon: Any = None,
        menu_id: Union[MenuId, str, None] = None,
        enabled: bool = True,
    ):
        """
        icon: optional PIL image; tray backends without menu icons ignore it.
        """
        super().__init__(text, menu_id, enabled)
        self.icon = icon


class CheckMenuItem(MenuItem):
    def __init__(
        self,
        text: str,
        checked: bool = False,
        menu_id: Union[MenuId, str, None] = None,
        enabled: bool = True,
    ):
        super().__init__(text, menu_id, enabled)
        self._checked = bool(checked)

    def is_checked(self) -> bool:
        return self._checked

    def set_checked(self, checked: bool) -> None:
        self._checked = bool(checked)

    def toggle(self) -> bool:
        """Flip the flag the way a native check widget does on click."""
        self._checked = not self._checked
        return self._checked

    def __repr__(self) -> str:
        mark = "x" if self._checked else " "
        return f"CheckMenuItem({self._id.value!r}, {self._text!r}, [{mark}])"


# --------- check kinds ---------
@dataclass(frozen=True)
class Standalone:
    item: CheckMenuItem


@dataclass(frozen=True)
class CheckboxGroup(Generic[G]):
    item: CheckMenuItem
    group: G


@dataclass(frozen=True)
class RadioGroup(Generic[G]):
    item: CheckMenuItem
    default: Optional[MenuId]
    group: G


CheckKind = Union[Standalone, CheckboxGroup, RadioGroup]


# --------- menu controls ---------
@dataclass(frozen=True)
class PlainItem:
    item: MenuItem

    def identifier(self) -> MenuId:
        return self.item.identifier()

    def display_text(self) -> str:
        return self.item.display_text()


@dataclass(frozen=True)
class IconItem:
    item: IconMenuItem

    def identifier(self) -> MenuId:
        return self.item.identifier()

    def display_text(self) -> str:
        return self.item.display_text()


@dataclass(frozen=True)
class CheckableItem:
    kind: CheckKind

    @property
    def item(self) -> CheckMenuItem:
        return self.kind.item

    @property
    def group(self) -> Optional[Hashable]:
        if isinstance(self.kind, Standalone):
            return None
        return self.kind.group

    def identifier(self) -> MenuId:
        return self.kind.item.identifier()

    def display_text(self) -> str:
        return self.kind.item.display_text()


MenuControl = Union[PlainItem, IconItem, CheckableItem]

MENU_CONTROL_TYPES = (PlainItem, IconItem, CheckableItem)


def as_menu_item(control: Optional[MenuControl]) -> Optional[MenuItem]:
    if isinstance(control, PlainItem):
        return control.item
    return None


def as_icon_item(control: Optional[MenuControl]) -> Optional[IconMenuItem]:
    if isinstance(control, IconItem):
        return control.item
    return None


def as_check_item(control: Optional[MenuControl]) -> Optional[CheckMenuItem]:
    if isinstance(control, CheckableItem):
        return control.item
    return None


# --------- constructors ---------
def plain(item: MenuItem) -> PlainItem:
    return PlainItem(item)


def icon_item(item: IconMenuItem) -> IconItem:
    return IconItem(item)


def standalone(item: CheckMenuItem) -> CheckableItem:
    return CheckableItem(Standalone(item))


def checkbox(item: CheckMenuItem, group: Hashable) -> CheckableItem:
    return CheckableItem(CheckboxGroup(item, group))


def radio(
    item: CheckMenuItem,
    group: Hashable,
    default: Union[MenuId, str, None] = None,
) -> CheckableItem:
    default_id = _as_menu_id(default) if default is not None else None
    return CheckableItem(RadioGroup(item, default_id, group))
