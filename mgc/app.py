# File: mgc/app.py
# Project: MagicCircle (MGC)
# Version: 1.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point de la aplicación.
# Notes: python -m mgc.app  (o el script `mgc`). Sin flags: la configuración va por JSON/env.
from __future__ import annotations

import sys
from PySide6.QtWidgets import QApplication

from mgc.core.settings import AppSettings, apply_project_settings, settings_path
from mgc.core.version import APP_NAME, APP_VERSION
from mgc.ui.main_window import MainWindow
from mgc.utils.log import setup_logging, get_logger

log = get_logger(__name__)


def main() -> int:
    log_file = setup_logging()
    # Orden: mgc_settings.json -> env MGC_* -> ~/.mgc/settings.json (gana el último).
    applied = apply_project_settings(logger=log, prefer_env=True)
    settings = AppSettings.load()
    log.info(
        "Settings: tema=%s grosor=%d dot=%d (user=%s, repo=%d claves)",
        settings.canvas_theme, settings.stroke_width, settings.dot_radius, settings_path(), len(applied),
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    w = MainWindow(settings)
    w.show()
    log.info("%s iniciado (v%s)%s", APP_NAME, APP_VERSION, f", log en {log_file}" if log_file else "")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
