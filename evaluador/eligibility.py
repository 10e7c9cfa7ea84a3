#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Verificación de requisitos habilitantes y determinación de subsanación

Todas las verificaciones se ejecutan siempre (sin corte en el primer fallo),
en orden fijo:
1. Experiencia general
2. Experiencia específica
3. Tarjeta profesional
4. Vigencia del RUP
5. Experiencia específica adicional, por criterio
6. Contratos no conformes, por contrato
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .config import EngineSettings
from .contracts import ContractValueAdjuster
from .classifier import ClassifierMatcher
from .experience import ExperienceApportionment
from .models import (
    AdditionalComplianceResult,
    Contract,
    ContractType,
    ProcessDefinition,
    Proponent,
)

logger = logging.getLogger(__name__)

REASON_GENERAL_EXPERIENCE = "No cumple experiencia general"
REASON_SPECIFIC_EXPERIENCE = "No cumple experiencia específica"
REASON_PROFESSIONAL_CARD = "No aporta tarjeta profesional"
REASON_RUP = "RUP no vigente"


@dataclass
class EligibilityCheck:
    """
    Resultado de una verificación individual
    """
    id: str
    description: str
    category: str  # requirements, rup, additional, contract
    passed: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class EvaluationResult:
    needs_subsanation: bool
    reasons: List[str] = field(default_factory=list)
    incomplete_contracts: List[int] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    checks: List[EligibilityCheck] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "needs_subsanation": self.needs_subsanation,
            "reasons": list(self.reasons),
            "incomplete_contracts": list(self.incomplete_contracts),
            "warnings": list(self.warnings),
            "checks": [check.to_dict() for check in self.checks],
        }


def contract_is_complete(contract: Contract) -> bool:
    """Contrato con todos los datos obligatorios diligenciados y conforme"""
    required_text = (
        contract.contracting_entity,
        contract.contract_number,
        contract.object,
        contract.services_code,
    )
    if any(not (value or "").strip() for value in required_text):
        return False
    if not contract.contract_complies:
        return False
    if contract.contract_type == ContractType.PRIVATE and not contract.private_documents_complete:
        return False
    return True


class EligibilityEvaluator:
    """
    Evaluador de requisitos habilitantes de un proponente
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings()
        self.adjuster = ContractValueAdjuster(
            ClassifierMatcher(self.settings.classifier_empty_matches)
        )
        self.apportionment = ExperienceApportionment(self.settings.disability_threshold)

    def additional_compliance(
        self,
        proponent: Proponent,
        process: ProcessDefinition,
    ) -> List[AdditionalComplianceResult]:
        """
        Cumplimiento de cada criterio adicional a partir de los contratos.

        Los comentarios existentes se conservan por posición.
        """
        criteria = process.additional_criteria
        amounts = self.adjuster.aggregate_additional_amounts(proponent.contractors, criteria)
        previous = proponent.requirements.additional_specific_experience

        results = []
        for index, criterion in enumerate(criteria):
            comment = previous[index].comment if index < len(previous) else None
            results.append(AdditionalComplianceResult(
                name=criterion.name,
                amount=amounts[index],
                complies=amounts[index] >= criterion.value,
                comment=comment,
            ))
        return results

    def evaluate(self, proponent: Proponent, process: ProcessDefinition) -> EvaluationResult:
        """
        Determina si el proponente debe subsanar y por qué.

        Args:
            proponent: Proponente con requisitos, RUP y contratos
            process: Definición del proceso

        Returns:
            EvaluationResult con la lista ordenada de motivos
        """
        checks: List[EligibilityCheck] = []
        requirements = proponent.requirements

        checks.append(EligibilityCheck(
            id="req_general",
            description="Experiencia general",
            category="requirements",
            passed=requirements.general_experience,
            reason=REASON_GENERAL_EXPERIENCE,
        ))
        checks.append(EligibilityCheck(
            id="req_specific",
            description="Experiencia específica",
            category="requirements",
            passed=requirements.specific_experience,
            reason=REASON_SPECIFIC_EXPERIENCE,
        ))
        checks.append(EligibilityCheck(
            id="req_card",
            description="Tarjeta profesional",
            category="requirements",
            passed=requirements.professional_card,
            reason=REASON_PROFESSIONAL_CARD,
        ))
        checks.append(EligibilityCheck(
            id="rup",
            description="Vigencia del RUP",
            category="rup",
            passed=proponent.rup.complies,
            reason=REASON_RUP,
        ))

        results = requirements.additional_specific_experience
        for index, criterion in enumerate(process.additional_criteria):
            amount = results[index].amount if index < len(results) else 0
            checks.append(EligibilityCheck(
                id=f"additional_{index + 1}",
                description=f"Experiencia específica adicional: {criterion.name}",
                category="additional",
                passed=amount >= criterion.value,
                reason=f"No cumple {criterion.name}",
            ))

        incomplete = []
        for order, contract in enumerate(proponent.contractors, start=1):
            if not contract_is_complete(contract):
                incomplete.append(order)

            reason_text = (contract.non_compliance_reason or "").strip()
            if not contract.contract_complies and reason_text:
                checks.append(EligibilityCheck(
                    id=f"contract_{order}",
                    description=f"Contrato #{order}",
                    category="contract",
                    passed=False,
                    reason=f"Contrato #{order}: {reason_text}",
                ))

        reasons = [check.reason for check in checks if not check.passed]
        result = EvaluationResult(
            needs_subsanation=bool(reasons),
            reasons=reasons,
            incomplete_contracts=incomplete,
            warnings=self._disability_warnings(proponent),
            checks=checks,
        )

        logger.info(
            f"Proponente '{proponent.name}': "
            f"{'requiere subsanación' if result.needs_subsanation else 'cumple'} "
            f"({len(reasons)} motivos, {len(incomplete)} contratos incompletos)"
        )
        return result

    def _disability_warnings(self, proponent: Proponent) -> List[str]:
        """Puntaje por discapacidad de un plural atribuido a un socio con poca experiencia"""
        if not proponent.is_plural or not proponent.scoring.disabled:
            return []

        contributor = (proponent.scoring.disability_contributor or "").strip()
        if not contributor:
            return ["Puntaje por discapacidad sin socio aportante indicado"]

        if not self.apportionment.meets_disability_threshold(proponent, contributor):
            percentage = self.apportionment.get_partner_percentage(proponent, contributor)
            return [
                f"El socio {contributor} aporta {percentage:.2f}% de la experiencia "
                f"(mínimo {self.apportionment.disability_threshold:g}%) "
                "para el puntaje por discapacidad"
            ]
        return []


def evaluate(proponent: Proponent, process: ProcessDefinition) -> EvaluationResult:
    return EligibilityEvaluator().evaluate(proponent, process)
