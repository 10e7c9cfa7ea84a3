#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Recalculo de los campos derivados de un proponente

Se invoca tras cada edición (porcentaje de participación, contratos,
integrantes, requisitos). No guarda estado: recibe el proponente y el proceso
completos y devuelve una copia con todos los derivados recalculados.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .config import EngineSettings
from .eligibility import EligibilityEvaluator, EvaluationResult
from .models import ProcessDefinition, Proponent
from .rup import DateComplianceChecker
from .scoring import ScoringAggregator

logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    proponent: Proponent
    evaluation: EvaluationResult
    partner_shares: Dict[str, float] = field(default_factory=dict)
    scoring_warnings: List[str] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return self.scoring_warnings + self.evaluation.warnings


class ProponentRefresher:
    """
    Recalcula valores ajustados, cumplimiento y puntaje de un proponente
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings()
        self.rup_checker = DateComplianceChecker(self.settings.rup_window_days)
        self.scoring = ScoringAggregator()
        self.evaluator = EligibilityEvaluator(self.settings)

    def refresh(self, proponent: Proponent, process: ProcessDefinition) -> RefreshResult:
        adjuster = self.evaluator.adjuster
        updated = proponent.model_copy(deep=True)

        updated.contractors = [
            adjuster.apply(contract, process) for contract in updated.contractors
        ]
        updated.requirements.additional_specific_experience = (
            self.evaluator.additional_compliance(updated, process)
        )
        updated.rup.complies = self.rup_checker.rup_complies(updated, process)
        updated.total_score = self.scoring.total_score(updated.scoring)

        evaluation = self.evaluator.evaluate(updated, process)
        updated.needs_subsanation = evaluation.needs_subsanation
        updated.subsanation_details = list(evaluation.reasons) if evaluation.needs_subsanation else []

        return RefreshResult(
            proponent=updated,
            evaluation=evaluation,
            partner_shares=self.evaluator.apportionment.compute_partner_shares(updated),
            scoring_warnings=self.scoring.validate(updated.scoring, process.scoring),
        )

    def refresh_all(
        self,
        proponents: Sequence[Proponent],
        process: ProcessDefinition,
    ) -> List[RefreshResult]:
        results = [self.refresh(proponent, process) for proponent in proponents]
        pending = sum(1 for r in results if r.proponent.needs_subsanation)
        logger.info(f"Recalculados {len(results)} proponentes, {pending} requieren subsanación")
        return results


def refresh_proponent(
    proponent: Proponent,
    process: ProcessDefinition,
    settings: Optional[EngineSettings] = None,
) -> RefreshResult:
    return ProponentRefresher(settings).refresh(proponent, process)
