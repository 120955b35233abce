# -*- coding: utf-8 -*-
"""
Generate the solid-colour tray icon using Pillow.

No external asset files needed.
"""

from __future__ import annotations

from typing import Dict, Tuple

from PIL import Image

RGBA = Tuple[int, int, int, int]

COLORS: Dict[str, RGBA] = {
    "red": (255, 0, 0, 255),
    "green": (0, 255, 0, 255),
    "blue": (0, 0, 255, 255),
}


def make_color_icon(rgba: RGBA, size: int = 16) -> Image.Image:
    return Image.new("RGBA", (size, size), tuple(rgba))
