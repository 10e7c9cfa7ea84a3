#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Resumen de evaluación para la capa de exportación

- Ranking de proponentes por puntaje total (mayor a menor)
- Estado CUMPLE / SUBSANAR con sus motivos
- Detalle de puntaje por criterio
- Estadísticas del proceso

El formato (PDF, Excel) es responsabilidad de la capa de exportación.
"""

import json
import logging
from datetime import datetime
from typing import Dict, List, Sequence

from .models import ProcessDefinition, Proponent
from .scoring import CRITERIA, CRITERIA_LABELS, ScoringAggregator

logger = logging.getLogger(__name__)

PROCESS_TYPE_LABELS = {
    "licitacion": "Licitación Pública",
    "concurso": "Concurso de Méritos",
    "abreviada": "Selección Abreviada",
    "minima": "Mínima Cuantía",
}

STATUS_COMPLIES = "CUMPLE"
STATUS_SUBSANATION = "SUBSANAR"


class RankingReport:
    """Generador del resumen de evaluación"""

    def __init__(self):
        self.scoring = ScoringAggregator()

    @staticmethod
    def rank(proponents: Sequence[Proponent]) -> List[Proponent]:
        """Orden por puntaje total descendente; empates en orden de registro"""
        return sorted(proponents, key=lambda p: p.total_score, reverse=True)

    def generate(self, process: ProcessDefinition, proponents: Sequence[Proponent]) -> Dict:
        """
        Resumen completo del proceso

        Args:
            process: Definición del proceso
            proponents: Proponentes con sus derivados ya recalculados

        Returns:
            Diccionario listo para exportar
        """
        ranked = self.rank(proponents)

        report = {
            "process": {
                "process_number": process.process_number,
                "process_object": process.process_object,
                "process_type": process.process_type.value,
                "process_type_label": PROCESS_TYPE_LABELS.get(
                    process.process_type.value, process.process_type.value
                ),
                "closing_date": process.closing_date.isoformat() if process.closing_date else None,
                "total_contract_value": process.total_contract_value,
                "minimum_salary": process.minimum_salary,
            },
            "maximum_score": self.scoring.maximum_total(process.scoring),
            "ranking": [
                self._ranking_row(position, proponent)
                for position, proponent in enumerate(ranked, start=1)
            ],
            "criteria_detail": self.criteria_detail(process, ranked),
            "summary": self.summarize(proponents),
            "generated_at": datetime.now().isoformat(),
        }

        logger.info(
            f"Resumen generado para el proceso {process.process_number}: "
            f"{len(ranked)} proponentes"
        )
        return report

    @staticmethod
    def _ranking_row(position: int, proponent: Proponent) -> Dict:
        requirements = proponent.requirements
        additional = requirements.additional_specific_experience
        return {
            "position": position,
            "id": proponent.id,
            "name": proponent.name,
            "total_score": proponent.total_score,
            "general_experience": requirements.general_experience,
            "specific_experience": requirements.specific_experience,
            "additional_specific_experience": all(r.complies for r in additional),
            "professional_card": requirements.professional_card,
            "rup_complies": proponent.rup.complies,
            "status": STATUS_SUBSANATION if proponent.needs_subsanation else STATUS_COMPLIES,
            "subsanation_details": list(proponent.subsanation_details),
        }

    def criteria_detail(
        self,
        process: ProcessDefinition,
        proponents: Sequence[Proponent],
    ) -> List[Dict]:
        """Filas proponente x criterio con puntaje obtenido, máximo y comentario"""
        maxima = process.scoring_maxima
        rows = []
        for proponent in proponents:
            for criterion in CRITERIA:
                rows.append({
                    "proponent": proponent.name,
                    "criterion": CRITERIA_LABELS[criterion],
                    "score": getattr(proponent.scoring, criterion),
                    "maximum": maxima.get(criterion, 0),
                    "comment": self.scoring.get_comment(proponent.scoring, criterion),
                })
        return rows

    @staticmethod
    def summarize(proponents: Sequence[Proponent]) -> Dict:
        total = len(proponents)
        average = sum(p.total_score for p in proponents) / total if total else 0
        return {
            "total_proponents": total,
            "average_score": round(average, 2),
            "needing_subsanation": sum(1 for p in proponents if p.needs_subsanation),
        }

    @staticmethod
    def export_to_json(report: Dict, filename: str) -> None:
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(report, f, ensure_ascii=False, indent=2)
        logger.info(f"Resumen exportado: {filename}")
