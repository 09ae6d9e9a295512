# File: mgc/core/surface.py
# Project: MagicCircle (MGC)
# Version: 1.0.0
# Status: stable
# Date: 2026-10-19
# Purpose: Contrato mínimo de superficie de dibujo (desacopla sesión y Qt).
# Notes: No depende de Qt. La implementación real vive en mgc.ui.scene_surface.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from mgc.geom.hexagram import Point


class DrawingSurface(ABC):
    """Superficie donde la sesión dibuja.

    - El punto central (dot) no es transitorio: hay uno solo y dibujar otro lo reemplaza.
    - Triángulos y círculo son transitorios: `clear_transient_shapes` los quita.
    """

    @abstractmethod
    def draw_dot(self, center: Point, radius: float) -> None:
        ...

    @abstractmethod
    def draw_polygon_outline(self, points: Sequence[Point]) -> None:
        ...

    @abstractmethod
    def draw_circle_outline(self, center: Point, radius: float) -> None:
        ...

    @abstractmethod
    def clear_transient_shapes(self) -> None:
        ...

    @abstractmethod
    def clear_all(self) -> None:
        """Quita todo, incluido el dot."""
