#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Puntaje de los proponentes

Seis criterios fijos. Cada criterio vale 0 o exactamente el máximo del
proceso (sin puntajes parciales) y un puntaje de 0 requiere comentario.
La validación es informativa: nunca bloquea la suma.
"""

import logging
from typing import Dict, List, Union

from .models import ProponentScoring, ScoringCriteria

logger = logging.getLogger(__name__)

CRITERIA = (
    "woman_entrepreneurship",
    "mipyme",
    "disabled",
    "quality_factor",
    "environmental_quality",
    "national_industry_support",
)

CRITERIA_LABELS = {
    "woman_entrepreneurship": "Emprendimiento mujer",
    "mipyme": "MIPYME",
    "disabled": "Discapacitado",
    "quality_factor": "Factor de calidad",
    "environmental_quality": "Factor de calidad ambiental",
    "national_industry_support": "Apoyo a la industria nacional",
}

# Máximos que puede fijar el proceso para cada criterio
ALLOWED_MAXIMA = {
    "woman_entrepreneurship": (0, 0.25),
    "mipyme": (0, 0.25),
    "disabled": (0, 1),
    "quality_factor": (0, 10, 19, 20),
    "environmental_quality": (0, 10, 20),
    "national_industry_support": (0, 10, 20),
}

# Claves camelCase del formulario (comentarios y máximos almacenados)
CAMEL_KEYS = {
    "woman_entrepreneurship": "womanEntrepreneurship",
    "mipyme": "mipyme",
    "disabled": "disabled",
    "quality_factor": "qualityFactor",
    "environmental_quality": "environmentalQuality",
    "national_industry_support": "nationalIndustrySupport",
}

MaximaLike = Union[ScoringCriteria, Dict[str, float]]


def _maxima_dict(maxima: MaximaLike) -> Dict[str, float]:
    if isinstance(maxima, ScoringCriteria):
        return maxima.model_dump()
    # acepta nombres de campo o claves camelCase del registro almacenado
    values = dict(maxima or {})
    result = {}
    for criterion in CRITERIA:
        value = values.get(criterion)
        if value is None:
            value = values.get(CAMEL_KEYS[criterion])
        result[criterion] = value or 0
    return result


class ScoringAggregator:
    """
    Suma y validación de puntajes
    """

    @staticmethod
    def total_score(scoring: ProponentScoring) -> float:
        """Suma simple de los seis criterios, sin ponderar ni recortar"""
        return sum(getattr(scoring, criterion) or 0 for criterion in CRITERIA)

    @staticmethod
    def needs_comment(criterion: str, value: float) -> bool:
        return value == 0

    @staticmethod
    def maximum_total(maxima: MaximaLike) -> float:
        values = _maxima_dict(maxima)
        return sum(values.get(criterion, 0) or 0 for criterion in CRITERIA)

    @staticmethod
    def allowed_values(criterion: str, maxima: MaximaLike) -> List[float]:
        maximum = _maxima_dict(maxima).get(criterion, 0) or 0
        return [0, maximum] if maximum > 0 else [0]

    @staticmethod
    def get_comment(scoring: ProponentScoring, criterion: str) -> str:
        comments = scoring.comments
        text = comments.get(criterion) or comments.get(CAMEL_KEYS.get(criterion, criterion)) or ""
        return text.strip()

    def missing_comments(self, scoring: ProponentScoring) -> List[str]:
        """Criterios con puntaje 0 sin comentario"""
        return [
            criterion
            for criterion in CRITERIA
            if self.needs_comment(criterion, getattr(scoring, criterion))
            and not self.get_comment(scoring, criterion)
        ]

    def validate(self, scoring: ProponentScoring, maxima: MaximaLike) -> List[str]:
        """
        Advertencias de puntaje.

        Args:
            scoring: Puntaje del proponente
            maxima: Máximos del proceso

        Returns:
            Lista de advertencias legibles (vacía si todo es válido)
        """
        warnings = []

        for criterion in CRITERIA:
            value = getattr(scoring, criterion)
            allowed = self.allowed_values(criterion, maxima)
            if value not in allowed:
                warnings.append(
                    f"{CRITERIA_LABELS[criterion]}: puntaje {value} no permitido "
                    f"(valores válidos: {', '.join(str(v) for v in allowed)})"
                )

        for criterion in self.missing_comments(scoring):
            warnings.append(f"{CRITERIA_LABELS[criterion]}: falta comentario para puntaje 0")

        if warnings:
            logger.info(f"Puntaje con {len(warnings)} advertencias")
        return warnings

    @staticmethod
    def validate_maxima(maxima: MaximaLike) -> List[str]:
        """Advertencias para máximos del proceso fuera de su dominio"""
        values = _maxima_dict(maxima)
        warnings = []
        for criterion in CRITERIA:
            value = values.get(criterion, 0) or 0
            if value not in ALLOWED_MAXIMA[criterion]:
                warnings.append(
                    f"{CRITERIA_LABELS[criterion]}: máximo {value} fuera de "
                    f"{list(ALLOWED_MAXIMA[criterion])}"
                )
        return warnings
