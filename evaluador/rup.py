#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Verificación de vigencia del RUP (Registro Único de Proponentes)

La fecha de renovación del RUP debe estar dentro de una ventana de días
respecto a la fecha de cierre del proceso. Para proponentes plurales la
condición debe cumplirse para cada integrante.
"""

import logging
import math
from datetime import date, datetime
from typing import Optional, Union

from .config import DEFAULT_RUP_WINDOW_DAYS
from .models import ProcessDefinition, Proponent
from .models.base import parse_date

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]

SECONDS_PER_DAY = 86400


class DateComplianceChecker:
    """
    Verificador de fechas dentro de una ventana de días
    """

    def __init__(self, window_days: int = DEFAULT_RUP_WINDOW_DAYS):
        self.window_days = window_days

    def days_between(self, first: DateLike, second: DateLike) -> Optional[int]:
        """
        Diferencia absoluta en días, redondeada hacia arriba.

        Returns:
            Número de días o None si alguna fecha no es válida
        """
        first_dt = parse_date(first)
        second_dt = parse_date(second)
        if first_dt is None or second_dt is None:
            return None

        try:
            seconds = abs((first_dt - second_dt).total_seconds())
        except TypeError:
            # fechas con y sin zona horaria
            logger.warning(f"Fechas no comparables: {first!r} / {second!r}")
            return None

        return math.ceil(seconds / SECONDS_PER_DAY)

    def is_within_window(
        self,
        reference_date: DateLike,
        candidate_date: DateLike,
        window_days: Optional[int] = None,
    ) -> bool:
        """
        Indica si candidate_date está a lo sumo a window_days de reference_date.

        Nunca lanza excepciones: una fecha vacía o inválida no cumple.
        """
        window = self.window_days if window_days is None else window_days
        days = self.days_between(reference_date, candidate_date)
        if days is None:
            return False
        return days <= window

    def rup_complies(self, proponent: Proponent, process: ProcessDefinition) -> bool:
        """
        Vigencia del RUP del proponente frente a la fecha de cierre.

        Proponente plural: todos los integrantes deben cumplir; sin
        integrantes no hay fecha que verificar y el RUP no cumple.
        """
        closing_date = process.closing_date

        if proponent.is_plural:
            if not proponent.partners:
                logger.info(f"Proponente plural sin integrantes: {proponent.name}")
                return False
            return all(
                self.is_within_window(closing_date, partner.rup_renewal_date)
                for partner in proponent.partners
            )

        return self.is_within_window(closing_date, proponent.rup.renewal_date)


def is_within_window(
    reference_date: DateLike,
    candidate_date: DateLike,
    window_days: int = DEFAULT_RUP_WINDOW_DAYS,
) -> bool:
    return DateComplianceChecker(window_days).is_within_window(reference_date, candidate_date)
