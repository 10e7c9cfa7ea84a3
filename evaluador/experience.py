#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reparto de la experiencia entre los integrantes de un proponente plural

El porcentaje de cada integrante es la suma del valor ajustado de los
contratos que aporta sobre el total de experiencia del proponente. El socio
que aporta el certificado de discapacidad debe aportar al menos el 40%.
"""

import logging
from typing import Dict, List

from .config import DEFAULT_DISABILITY_THRESHOLD
from .models import Proponent

logger = logging.getLogger(__name__)


class ExperienceApportionment:
    """
    Porcentaje de experiencia aportado por cada integrante
    """

    def __init__(self, disability_threshold: float = DEFAULT_DISABILITY_THRESHOLD):
        self.disability_threshold = disability_threshold

    def compute_partner_shares(self, proponent: Proponent) -> Dict[str, float]:
        """
        Porcentaje de experiencia por integrante.

        Returns:
            {nombre del integrante: porcentaje}; vacío si el proponente no es
            plural, no tiene integrantes o la experiencia total es 0
        """
        if not proponent.is_plural or not proponent.partners or not proponent.contractors:
            return {}

        total = sum(contract.adjusted_value or 0 for contract in proponent.contractors)
        if total <= 0:
            return {}

        shares = {}
        for partner in proponent.partners:
            partner_total = sum(
                contract.adjusted_value or 0
                for contract in proponent.contractors
                if contract.experience_contributor == partner.name
            )
            shares[partner.name] = partner_total / total * 100

        logger.debug(f"Reparto de experiencia de {proponent.name}: {shares}")
        return shares

    def get_partner_percentage(self, proponent: Proponent, partner_name: str) -> float:
        return self.compute_partner_shares(proponent).get(partner_name, 0.0)

    def meets_disability_threshold(self, proponent: Proponent, partner_name: str) -> bool:
        """El integrante puede recibir el puntaje por discapacidad"""
        return self.get_partner_percentage(proponent, partner_name) >= self.disability_threshold

    @staticmethod
    def contributor_options(proponent: Proponent) -> List[str]:
        """Nombres válidos para experience_contributor de un contrato"""
        if proponent.is_plural:
            return [partner.name for partner in proponent.partners]
        if proponent.number:
            return [f"{proponent.number}. {proponent.name}"]
        return [proponent.name]
