# -*- coding: utf-8 -*-
"""
Notification wrapper.

We use plyer to show native-ish desktop notifications.
If plyer fails (no backend on some setups), the failure is logged and dropped.
"""

from __future__ import annotations

import logging
from typing import Optional

log = logging.getLogger("traycontrols.notify")


def notify(title: str, message: str, timeout: int = 5, app_name: Optional[str] = None) -> None:
    try:
        from plyer import notification  # type: ignore

        notification.notify(
            title=title,
            message=message,
            app_name=app_name or title,
            timeout=timeout,
        )
    except Exception as exc:
        # Best effort: no crash.
        log.debug("Notification not shown: %s", exc)
