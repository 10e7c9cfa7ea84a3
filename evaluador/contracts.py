#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ajuste del valor de los contratos por porcentaje de participación

- Valor ajustado en SMMLV
- Aportes ajustados a cada criterio de experiencia específica adicional
- Totales por criterio para el proponente
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .classifier import ClassifierMatcher
from .models import AdditionalAmount, AdditionalCriterion, Contract, ProcessDefinition

logger = logging.getLogger(__name__)


@dataclass
class ContractAdjustment:
    """Valores derivados de un contrato"""
    adjusted_value: float
    adjusted_additional_specific_value: List[AdditionalAmount] = field(default_factory=list)

    @property
    def additional_values(self) -> List[float]:
        return [amount.value for amount in self.adjusted_additional_specific_value]


class ContractValueAdjuster:
    """
    Calcula los valores ajustados de los contratos aportados
    """

    def __init__(self, classifier_matcher: Optional[ClassifierMatcher] = None):
        self.classifier_matcher = classifier_matcher or ClassifierMatcher()

    @staticmethod
    def _scale(value: float, percentage: float) -> float:
        return (value or 0) * ((percentage or 0) / 100)

    def adjust(
        self,
        contract: Contract,
        criteria: Optional[Sequence[AdditionalCriterion]] = None,
    ) -> ContractAdjustment:
        """
        Valor ajustado del contrato y de sus aportes adicionales.

        Args:
            contract: Contrato
            criteria: Criterios adicionales del proceso. Si se indican, el
                resultado sigue sus posiciones (aporte faltante = 0).

        Returns:
            ContractAdjustment
        """
        percentage = contract.participation_percentage
        contributions = contract.additional_specific_experience_contribution

        adjusted_additional = []
        if criteria is None:
            for contribution in contributions:
                adjusted_additional.append(AdditionalAmount(
                    name=contribution.name,
                    value=self._scale(contribution.value, percentage),
                ))
        else:
            for index, criterion in enumerate(criteria):
                raw = contributions[index].value if index < len(contributions) else 0
                adjusted_additional.append(AdditionalAmount(
                    name=criterion.name,
                    value=self._scale(raw, percentage),
                ))

        return ContractAdjustment(
            adjusted_value=self._scale(contract.total_value_smmlv, percentage),
            adjusted_additional_specific_value=adjusted_additional,
        )

    def apply(self, contract: Contract, process: ProcessDefinition) -> Contract:
        """
        Copia del contrato con los campos derivados recalculados
        (valores ajustados y coincidencia de códigos del clasificador).
        """
        adjustment = self.adjust(contract, process.additional_criteria)
        return contract.model_copy(
            deep=True,
            update={
                "adjusted_value": adjustment.adjusted_value,
                "adjusted_additional_specific_value": adjustment.adjusted_additional_specific_value,
                "classifier_codes_match": self.classifier_matcher.matches(
                    contract.selected_classifier_codes, process.classifier_codes
                ),
            },
        )

    def aggregate_additional_amounts(
        self,
        contracts: Sequence[Contract],
        criteria: Sequence[AdditionalCriterion],
    ) -> List[float]:
        """
        Suma por criterio de los aportes ajustados de todos los contratos.
        """
        totals = [0.0] * len(criteria)
        for contract in contracts:
            adjustment = self.adjust(contract, criteria)
            for index, value in enumerate(adjustment.additional_values):
                totals[index] += value

        logger.debug(f"Totales de experiencia adicional: {totals}")
        return totals
