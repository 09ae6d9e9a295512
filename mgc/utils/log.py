# File: mgc/utils/log.py
# Project: MagicCircle (MGC)
# Version: 1.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + archivo) y helpers.
# Notes: MGC_LOG_DIR mueve el archivo; MGC_LOG_LEVEL (debug/info/... o número) fija el nivel.
from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FILENAME = "mgc.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def level_from_env(default: int = logging.INFO) -> int:
    """Nivel desde MGC_LOG_LEVEL; valores desconocidos caen a `default`."""
    raw = (os.environ.get("MGC_LOG_LEVEL") or "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_logging(log_dir: str | os.PathLike | None = None, level: int | None = None) -> Path | None:
    """Configura el logger raíz con consola + archivo.

    Idempotente: una segunda llamada no agrega handlers. Devuelve la ruta del
    archivo de log, o None si solo quedó la consola (sin permisos, etc.).
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return None

    if level is None:
        level = level_from_env()
    log_dir = Path(log_dir if log_dir is not None else (os.environ.get("MGC_LOG_DIR") or "logs"))

    root = logging.getLogger()
    root.setLevel(level)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    log_file: Path | None = log_dir / LOG_FILENAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    except OSError as e:
        logging.getLogger(__name__).warning("Log solo en consola (%s): %s", log_file, e)
        log_file = None

    _LOGGER_CONFIGURED = True
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
