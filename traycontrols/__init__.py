# -*- coding: utf-8 -*-
"""
Menu state management for tray-icon context menus.
"""

from .controls import (
    CheckableItem,
    CheckboxGroup,
    CheckKind,
    CheckMenuItem,
    IconItem,
    IconMenuItem,
    MenuControl,
    MenuId,
    MenuItem,
    PlainItem,
    RadioGroup,
    Standalone,
    as_check_item,
    as_icon_item,
    as_menu_item,
    checkbox,
    icon_item,
    plain,
    radio,
    standalone,
)
from .manager import MenuManager

__all__ = [
    "CheckableItem",
    "CheckboxGroup",
    "CheckKind",
    "CheckMenuItem",
    "IconItem",
    "IconMenuItem",
    "MenuControl",
    "MenuId",
    "MenuItem",
    "MenuManager",
    "PlainItem",
    "RadioGroup",
    "Standalone",
    "as_check_item",
    "as_icon_item",
    "as_menu_item",
    "checkbox",
    "icon_item",
    "plain",
    "radio",
    "standalone",
]
