#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuración del motor de evaluación.

Los parámetros se toman del entorno:
  - EVALUADOR_RUP_WINDOW_DAYS (días de vigencia del RUP, por defecto 30)
  - EVALUADOR_DISABILITY_THRESHOLD (porcentaje mínimo de experiencia del socio
    que aporta el certificado de discapacidad, por defecto 40)
  - EVALUADOR_CLASSIFIER_EMPTY_MATCHES (si el proceso no define códigos UNSPSC,
    todo contrato se considera habilitado; por defecto true)
  - EVALUADOR_LOG_LEVEL (por defecto INFO)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_RUP_WINDOW_DAYS = 30
DEFAULT_DISABILITY_THRESHOLD = 40.0


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "si", "sí", "on")


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Valor inválido para {name}: {raw!r}, se usa {default}")
        return default


@dataclass(frozen=True)
class EngineSettings:
    rup_window_days: int = DEFAULT_RUP_WINDOW_DAYS
    disability_threshold: float = DEFAULT_DISABILITY_THRESHOLD
    classifier_empty_matches: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            rup_window_days=_env_number(
                "EVALUADOR_RUP_WINDOW_DAYS", DEFAULT_RUP_WINDOW_DAYS, int
            ),
            disability_threshold=_env_number(
                "EVALUADOR_DISABILITY_THRESHOLD", DEFAULT_DISABILITY_THRESHOLD, float
            ),
            classifier_empty_matches=_env_bool("EVALUADOR_CLASSIFIER_EMPTY_MATCHES", True),
            log_level=os.getenv("EVALUADOR_LOG_LEVEL", "INFO").upper(),
        )
