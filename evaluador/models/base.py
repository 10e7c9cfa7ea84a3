#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utilidades comunes de los modelos: alias camelCase y normalización de registros heredados.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """Registro que acepta y emite las claves camelCase del formulario."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def ensure_list(value: Any) -> List[Any]:
    """Colección ausente o malformada -> lista vacía."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    logger.warning(f"Colección malformada ({type(value).__name__}), se usa lista vacía")
    return []


def blank_to_default(model: type, value: Any, info: ValidationInfo) -> Any:
    """Valor nulo o vacío de un registro -> valor por defecto del campo."""
    if value is None or value == "":
        return model.model_fields[info.field_name].default
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """
    Convierte una fecha a datetime sin lanzar excepciones.

    Acepta date, datetime o texto ISO (YYYY-MM-DD o con hora).
    Devuelve None si el valor está vacío o no se puede interpretar.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.warning(f"Fecha no interpretable: {value!r}")
            return None
    logger.warning(f"Tipo de fecha no soportado: {type(value).__name__}")
    return None


def coerce_date(value: Any) -> Optional[date]:
    """Variante tolerante para campos de fecha de los registros."""
    parsed = parse_date(value)
    if parsed is None:
        return None
    return parsed.date()
