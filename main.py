# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path

from traycontrols.app import TrayControlsApp
from traycontrols.config import DEFAULT_CONFIG_FILENAME, ConfigManager
from traycontrols.logging_setup import setup_logging


def main() -> None:
    base_dir = Path(__file__).resolve().parent
    config = ConfigManager(base_dir / DEFAULT_CONFIG_FILENAME).load()
    setup_logging(config.log_level)
    app = TrayControlsApp(config)
    app.run()


if __name__ == "__main__":
    main()
