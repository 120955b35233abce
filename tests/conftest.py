"""Pytest configuration.

Selects pystray's dummy backend so tray tests run without a desktop session,
and provides a few registry fixtures shared by the test modules.
"""

import os
from enum import Enum

os.environ.setdefault("PYSTRAY_BACKEND", "dummy")

import pytest  # noqa: E402

from traycontrols.controls import CheckMenuItem, checkbox, radio  # noqa: E402
from traycontrols.manager import MenuManager  # noqa: E402


class Group(Enum):
    COLOR = "color"
    SIZE = "size"
    FLAGS = "flags"


class Recorder:
    """Callback that remembers every control it was handed."""

    def __init__(self):
        self.calls = []

    def __call__(self, control):
        self.calls.append(control)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def manager():
    return MenuManager()


@pytest.fixture
def radio_items(manager):
    """Radio group {r1, r2, r3} in Group.COLOR, all unchecked, no default."""
    items = [CheckMenuItem(f"R{i}", checked=False, menu_id=f"r{i}") for i in (1, 2, 3)]
    for item in items:
        manager.insert(radio(item, Group.COLOR))
    return items


@pytest.fixture
def checkbox_items(manager):
    items = [CheckMenuItem(text, checked=False, menu_id=text.lower()) for text in ("Added", "Removed")]
    for item in items:
        manager.insert(checkbox(item, Group.FLAGS))
    return items
