# File: mgc/utils/errors.py
# Project: MagicCircle (MGC)
# Version: 1.0.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: La UI atrapa MgcError y sigue; nunca se propaga al loop de Qt.
from __future__ import annotations


class MgcError(Exception):
    """Error base del proyecto."""


class MgcValidationError(MgcError):
    """Error de validación (coordenadas no finitas / no numéricas)."""


class MgcConfigError(MgcValidationError):
    """Valor de configuración inválido (modo estricto de los coerce_*)."""
