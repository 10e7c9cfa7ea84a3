#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pruebas del recalculo completo de un proponente
"""

import unittest
from datetime import date

from evaluador.config import EngineSettings
from evaluador.evaluation import ProponentRefresher, refresh_proponent
from evaluador.models import (
    AdditionalAmount,
    AdditionalComplianceResult,
    AdditionalCriterion,
    Contract,
    ExperienceRequirements,
    Partner,
    ProcessDefinition,
    Proponent,
    ProponentScoring,
    Requirements,
    RupStatus,
    ScoringCriteria,
)


def make_process():
    return ProcessDefinition(
        process_number="LP-001-2024",
        process_object="Mejoramiento de la malla vial",
        closing_date=date(2024, 3, 1),
        scoring=ScoringCriteria(
            woman_entrepreneurship=0.25,
            mipyme=0.25,
            disabled=1,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
        ),
        experience=ExperienceRequirements(
            additional_specific=[AdditionalCriterion(name="Longitud en vías", value=500)],
            classifier_codes=["721410"],
        ),
    )


def make_contract(total, percentage, contribution, contributor=""):
    return Contract(
        contracting_entity="INVÍAS",
        contract_number="001",
        object="Pavimentación",
        services_code="721410",
        contract_complies=True,
        total_value_smmlv=total,
        participation_percentage=percentage,
        additional_specific_experience_contribution=[AdditionalAmount(value=contribution)],
        selected_classifier_codes=["721410"],
        experience_contributor=contributor,
    )


def make_proponent(contracts, renewal=date(2024, 2, 15)):
    return Proponent(
        number="1",
        name="Constructora A",
        rup=RupStatus(renewal_date=renewal, complies=False),
        scoring=ProponentScoring(
            woman_entrepreneurship=0.25,
            mipyme=0.25,
            disabled=0,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
            comments={"disabled": "No aporta certificado"},
        ),
        requirements=Requirements(
            general_experience=True,
            specific_experience=True,
            professional_card=True,
        ),
        contractors=contracts,
        total_score=999,
        needs_subsanation=True,
        subsanation_details=["Motivo anterior"],
    )


class TestProponentRefresher(unittest.TestCase):

    def setUp(self):
        self.refresher = ProponentRefresher()
        self.process = make_process()

    def test_compliant_proponent(self):
        proponent = make_proponent([
            make_contract(1000, 50, 600),
            make_contract(200, 100, 300),
        ])

        result = self.refresher.refresh(proponent, self.process)
        updated = result.proponent

        self.assertEqual([c.adjusted_value for c in updated.contractors], [500, 200])
        self.assertTrue(all(c.classifier_codes_match for c in updated.contractors))
        compliance = updated.requirements.additional_specific_experience
        self.assertEqual(len(compliance), 1)
        self.assertEqual(compliance[0].amount, 600)
        self.assertTrue(compliance[0].complies)
        self.assertTrue(updated.rup.complies)
        self.assertEqual(updated.total_score, 50.5)
        self.assertFalse(updated.needs_subsanation)
        self.assertEqual(updated.subsanation_details, [])
        self.assertEqual(result.warnings, [])

    def test_additional_experience_shortfall(self):
        """450 de 500 en Longitud en vías: requiere subsanación"""
        proponent = make_proponent([make_contract(1000, 50, 900)])

        updated = self.refresher.refresh(proponent, self.process).proponent

        self.assertEqual(updated.requirements.additional_specific_experience[0].amount, 450)
        self.assertFalse(updated.requirements.additional_specific_experience[0].complies)
        self.assertTrue(updated.needs_subsanation)
        self.assertEqual(updated.subsanation_details, ["No cumple Longitud en vías"])

    def test_rup_recomputed_from_dates(self):
        proponent = make_proponent([make_contract(1000, 100, 500)], renewal=date(2023, 12, 1))

        updated = self.refresher.refresh(proponent, self.process).proponent

        self.assertFalse(updated.rup.complies)
        self.assertEqual(updated.subsanation_details, ["RUP no vigente"])

    def test_configured_rup_window(self):
        proponent = make_proponent([make_contract(1000, 100, 500)], renewal=date(2024, 1, 1))
        refresher = ProponentRefresher(EngineSettings(rup_window_days=90))
        self.assertTrue(refresher.refresh(proponent, self.process).proponent.rup.complies)

    def test_input_is_not_mutated(self):
        proponent = make_proponent([make_contract(1000, 50, 600)])
        before = proponent.model_dump()

        self.refresher.refresh(proponent, self.process)

        self.assertEqual(proponent.model_dump(), before)

    def test_refresh_is_idempotent(self):
        proponent = make_proponent([make_contract(1000, 50, 900)])
        first = self.refresher.refresh(proponent, self.process).proponent
        second = self.refresher.refresh(first, self.process).proponent
        self.assertEqual(first.model_dump(), second.model_dump())

    def test_existing_comments_are_kept(self):
        proponent = make_proponent([make_contract(1000, 100, 500)])
        proponent.requirements.additional_specific_experience = [
            AdditionalComplianceResult(name="Longitud en vías", comment="Verificado en SECOP"),
        ]
        updated = self.refresher.refresh(proponent, self.process).proponent
        self.assertEqual(
            updated.requirements.additional_specific_experience[0].comment,
            "Verificado en SECOP",
        )

    def test_scoring_warnings(self):
        proponent = make_proponent([make_contract(1000, 100, 500)])
        proponent.scoring.quality_factor = 10
        proponent.scoring.comments = {}

        result = self.refresher.refresh(proponent, self.process)

        self.assertEqual(len(result.scoring_warnings), 2)
        self.assertFalse(result.proponent.needs_subsanation)

    def test_plural_partner_shares(self):
        process = make_process()
        proponent = make_proponent([
            make_contract(1000, 50, 300, contributor="A"),
            make_contract(500, 100, 300, contributor="B"),
        ])
        proponent.is_plural = True
        proponent.partners = [
            Partner(name="A", percentage=60, rup_renewal_date=date(2024, 2, 20)),
            Partner(name="B", percentage=40, rup_renewal_date=date(2024, 2, 25)),
        ]

        result = self.refresher.refresh(proponent, process)

        self.assertEqual(result.partner_shares, {"A": 50, "B": 50})
        self.assertTrue(result.proponent.rup.complies)

    def test_refresh_all(self):
        proponents = [
            make_proponent([make_contract(1000, 100, 500)]),
            make_proponent([make_contract(1000, 10, 500)]),
        ]
        results = self.refresher.refresh_all(proponents, self.process)
        self.assertEqual([r.proponent.needs_subsanation for r in results], [False, True])

    def test_module_function(self):
        result = refresh_proponent(make_proponent([make_contract(1000, 100, 500)]), self.process)
        self.assertFalse(result.proponent.needs_subsanation)


if __name__ == "__main__":
    unittest.main(verbosity=2)
