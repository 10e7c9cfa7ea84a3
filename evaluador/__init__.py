# -*- coding: utf-8 -*-
"""
Evaluador de proponentes - verificación de requisitos habilitantes y puntaje
en procesos de contratación pública

Incluye:
- Vigencia del RUP frente a la fecha de cierre (rup)
- Valor ajustado de contratos por participación (contracts)
- Reparto de experiencia en proponentes plurales (experience)
- Códigos del clasificador UNSPSC (classifier)
- Puntaje por criterio (scoring)
- Requisitos habilitantes y subsanación (eligibility)
- Recalculo de campos derivados (evaluation)
- Resumen y ranking (reports)
"""

__version__ = "1.0.0"

from .rup import DateComplianceChecker
from .experience import ExperienceApportionment
from .classifier import ClassifierMatcher
from .contracts import ContractValueAdjuster, ContractAdjustment
from .scoring import ScoringAggregator
from .eligibility import EligibilityEvaluator, EvaluationResult
from .evaluation import ProponentRefresher, RefreshResult, refresh_proponent
from .reports import RankingReport
from .config import EngineSettings

__all__ = [
    "DateComplianceChecker",
    "ExperienceApportionment",
    "ClassifierMatcher",
    "ContractValueAdjuster",
    "ContractAdjustment",
    "ScoringAggregator",
    "EligibilityEvaluator",
    "EvaluationResult",
    "ProponentRefresher",
    "RefreshResult",
    "refresh_proponent",
    "RankingReport",
    "EngineSettings",
]
