# File: mgc/core/settings.py
# Project: MagicCircle (MGC)
# Version: 1.0.0
# Status: stable
# Date: 2026-10-19
# Purpose: Persistencia de preferencias de usuario (JSON) + defaults por repo (mgc_settings.json).
# Notes: No depende de Qt; guarda en ~/.mgc/settings.json (Windows/Linux/mac).
from __future__ import annotations

import json
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from mgc.core.version import DEFAULT_DOT_RADIUS, DEFAULT_STROKE_WIDTH, DEFAULT_WINDOW_SIZE
from mgc.utils.errors import MgcConfigError

log = logging.getLogger(__name__)


def settings_dir() -> Path:
    """Carpeta de settings del usuario (ruta explícita, no QSettings)."""
    return Path.home() / ".mgc"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Defaults reproducibles por proyecto (no por usuario) sin tocar el código.
# Archivo esperado: mgc_settings.json en el CWD o en un padre.
PROJECT_SETTINGS_FILENAME = "mgc_settings.json"

# Temas válidos para el lienzo. Mantener en sync con CanvasView.THEME_PRESETS.
VALID_CANVAS_THEMES = ("dark", "mid", "light")

STROKE_WIDTH_RANGE = (1, 12)
DOT_RADIUS_RANGE = (1, 12)
WINDOW_SIZE_RANGE = (200, 8000)


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca mgc_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None, *, logger: logging.Logger | None = None, prefer_env: bool = True
) -> Dict[str, Any]:
    """Carga mgc_settings.json (si existe) y lo aplica como variables de entorno MGC_*.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Valores fuera de rango se ignoran. Devuelve un dict con lo aplicado.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    theme = _deep_get(data, "ui.canvas.theme")
    if isinstance(theme, str) and theme.strip().lower() in VALID_CANVAS_THEMES:
        applied["ui.canvas.theme"] = theme.strip().lower()
        _set_env("MGC_CANVAS_THEME", applied["ui.canvas.theme"])

    stroke = _deep_get(data, "ui.canvas.stroke_width")
    if isinstance(stroke, int) and STROKE_WIDTH_RANGE[0] <= stroke <= STROKE_WIDTH_RANGE[1]:
        applied["ui.canvas.stroke_width"] = stroke
        _set_env("MGC_STROKE_WIDTH", stroke)

    dot = _deep_get(data, "ui.canvas.dot_radius")
    if isinstance(dot, int) and DOT_RADIUS_RANGE[0] <= dot <= DOT_RADIUS_RANGE[1]:
        applied["ui.canvas.dot_radius"] = dot
        _set_env("MGC_DOT_RADIUS", dot)

    size = _deep_get(data, "ui.window.size")
    if isinstance(size, (list, tuple)) and len(size) == 2:
        try:
            w = int(size[0]); h = int(size[1])
        except (TypeError, ValueError):
            w = h = 0
        lo, hi = WINDOW_SIZE_RANGE
        if lo <= w <= hi and lo <= h <= hi:
            applied["ui.window.size"] = [w, h]
            _set_env("MGC_WINDOW_W", w)
            _set_env("MGC_WINDOW_H", h)

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario."""

    canvas_theme: str = "dark"

    # Trazo de triángulos/círculo y radio del punto central (px).
    stroke_width: int = DEFAULT_STROKE_WIDTH
    dot_radius: int = DEFAULT_DOT_RADIUS

    window_width: int = DEFAULT_WINDOW_SIZE[0]
    window_height: int = DEFAULT_WINDOW_SIZE[1]

    # Geometry del QMainWindow como base64 (bytes->str) para no depender de Qt acá.
    ui_main_geometry_b64: str = ""

    @classmethod
    def load(cls) -> "AppSettings":
        """Carga desde disco; ante cualquier problema devuelve defaults.

        Orden de prioridad: settings.json > env MGC_* > defaults.
        """
        out = cls.from_env()
        p = settings_path()
        try:
            if not p.exists():
                return out
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            return out
        if not isinstance(data, dict):
            return out
        return cls.from_dict(data, base=out)

    @classmethod
    def from_env(cls) -> "AppSettings":
        out = cls()
        out.canvas_theme = coerce_canvas_theme(os.environ.get("MGC_CANVAS_THEME", out.canvas_theme))
        out.stroke_width = coerce_int(os.environ.get("MGC_STROKE_WIDTH", out.stroke_width), *STROKE_WIDTH_RANGE, out.stroke_width)
        out.dot_radius = coerce_int(os.environ.get("MGC_DOT_RADIUS", out.dot_radius), *DOT_RADIUS_RANGE, out.dot_radius)
        out.window_width = coerce_int(os.environ.get("MGC_WINDOW_W", out.window_width), *WINDOW_SIZE_RANGE, out.window_width)
        out.window_height = coerce_int(os.environ.get("MGC_WINDOW_H", out.window_height), *WINDOW_SIZE_RANGE, out.window_height)
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, base: "AppSettings | None" = None) -> "AppSettings":
        out = base if base is not None else cls()
        out.canvas_theme = coerce_canvas_theme(data.get("canvas_theme", out.canvas_theme))
        out.stroke_width = coerce_int(data.get("stroke_width", out.stroke_width), *STROKE_WIDTH_RANGE, out.stroke_width)
        out.dot_radius = coerce_int(data.get("dot_radius", out.dot_radius), *DOT_RADIUS_RANGE, out.dot_radius)
        out.window_width = coerce_int(data.get("window_width", out.window_width), *WINDOW_SIZE_RANGE, out.window_width)
        out.window_height = coerce_int(data.get("window_height", out.window_height), *WINDOW_SIZE_RANGE, out.window_height)
        out.ui_main_geometry_b64 = str(data.get("ui_main_geometry_b64", "") or "")
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": 1,
            "canvas_theme": coerce_canvas_theme(self.canvas_theme),
            "stroke_width": coerce_int(self.stroke_width, *STROKE_WIDTH_RANGE, DEFAULT_STROKE_WIDTH),
            "dot_radius": coerce_int(self.dot_radius, *DOT_RADIUS_RANGE, DEFAULT_DOT_RADIUS),
            "window_width": coerce_int(self.window_width, *WINDOW_SIZE_RANGE, DEFAULT_WINDOW_SIZE[0]),
            "window_height": coerce_int(self.window_height, *WINDOW_SIZE_RANGE, DEFAULT_WINDOW_SIZE[1]),
            "ui_main_geometry_b64": str(self.ui_main_geometry_b64 or ""),
        }

    def save(self) -> bool:
        """Guarda settings en disco. No debe romper la app: devuelve False si falla."""
        try:
            settings_dir().mkdir(parents=True, exist_ok=True)
            settings_path().write_text(
                json.dumps(self.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            return True
        except OSError:
            log.debug("No se pudieron guardar settings", exc_info=True)
            return False


def coerce_canvas_theme(v: Any, *, strict: bool = False) -> str:
    s = str(v or "").strip().lower()
    if s in VALID_CANVAS_THEMES:
        return s
    if strict:
        raise MgcConfigError(f"Tema de lienzo inválido: {v!r}")
    return "dark"


def coerce_int(v: Any, min_v: int, max_v: int, default: int, *, strict: bool = False) -> int:
    """Entero recortado a [min_v, max_v]; si no es convertible, `default` (o error en strict)."""
    try:
        n = int(v)
    except (TypeError, ValueError) as e:
        if strict:
            raise MgcConfigError(f"Entero inválido: {v!r}") from e
        return int(default)
    if n < min_v:
        return min_v
    if n > max_v:
        return max_v
    return n
