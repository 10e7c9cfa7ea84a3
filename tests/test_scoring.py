#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pruebas del puntaje por criterio
"""

import unittest

from evaluador.models import ProponentScoring, ScoringCriteria
from evaluador.scoring import ALLOWED_MAXIMA, CRITERIA, ScoringAggregator


class TestScoringAggregator(unittest.TestCase):

    def setUp(self):
        self.aggregator = ScoringAggregator()
        self.maxima = ScoringCriteria(
            woman_entrepreneurship=0.25,
            mipyme=0.25,
            disabled=1,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
        )

    def test_total_is_plain_sum(self):
        scoring = ProponentScoring(
            woman_entrepreneurship=0.25,
            mipyme=0,
            disabled=1,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
        )
        self.assertEqual(self.aggregator.total_score(scoring), 51.25)

    def test_total_does_not_clamp(self):
        """Valores por encima del máximo se suman tal cual"""
        scoring = ProponentScoring(quality_factor=35, national_industry_support=7.5)
        self.assertEqual(self.aggregator.total_score(scoring), 42.5)

    def test_empty_scoring(self):
        self.assertEqual(self.aggregator.total_score(ProponentScoring()), 0)

    def test_needs_comment(self):
        self.assertTrue(self.aggregator.needs_comment("mipyme", 0))
        self.assertFalse(self.aggregator.needs_comment("mipyme", 0.25))

    def test_maximum_total(self):
        self.assertEqual(self.aggregator.maximum_total(self.maxima), 51.5)
        self.assertEqual(self.aggregator.maximum_total({"quality_factor": 20}), 20)

    def test_maxima_with_camel_case_keys(self):
        """Máximos con las claves del registro almacenado (scoring_criteria)"""
        maxima = {"qualityFactor": 20, "mipyme": 0.25, "environmentalQuality": 10}
        self.assertEqual(self.aggregator.maximum_total(maxima), 30.25)
        self.assertEqual(self.aggregator.allowed_values("quality_factor", maxima), [0, 20])
        scoring = ProponentScoring(
            quality_factor=20,
            mipyme=0.25,
            environmental_quality=10,
            comments={
                "womanEntrepreneurship": "No aplica",
                "disabled": "No aplica",
                "nationalIndustrySupport": "No aplica",
            },
        )
        self.assertEqual(self.aggregator.validate(scoring, maxima), [])
        self.assertEqual(self.aggregator.validate_maxima(maxima), [])

    def test_allowed_values(self):
        self.assertEqual(self.aggregator.allowed_values("quality_factor", self.maxima), [0, 20])
        self.assertEqual(self.aggregator.allowed_values("quality_factor", ScoringCriteria()), [0])

    def test_validate_clean_scoring(self):
        scoring = ProponentScoring(
            woman_entrepreneurship=0.25,
            mipyme=0.25,
            disabled=1,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
        )
        self.assertEqual(self.aggregator.validate(scoring, self.maxima), [])

    def test_validate_partial_credit(self):
        """Sin puntajes parciales: 10 de 20 no es válido"""
        scoring = ProponentScoring(
            woman_entrepreneurship=0.25,
            mipyme=0.25,
            disabled=1,
            quality_factor=10,
            environmental_quality=10,
            national_industry_support=20,
        )
        warnings = self.aggregator.validate(scoring, self.maxima)
        self.assertEqual(len(warnings), 1)
        self.assertIn("Factor de calidad", warnings[0])

    def test_zero_score_requires_comment(self):
        scoring = ProponentScoring(
            disabled=1,
            quality_factor=20,
            environmental_quality=10,
            national_industry_support=20,
            comments={"mipyme": "No acredita tamaño empresarial"},
        )
        self.assertEqual(self.aggregator.missing_comments(scoring), ["woman_entrepreneurship"])

    def test_camel_case_comment_keys(self):
        """Los comentarios del formulario llegan con claves camelCase"""
        scoring = ProponentScoring.model_validate({
            "comments": {"womanEntrepreneurship": "No aplica", "qualityFactor": "  "},
        })
        missing = self.aggregator.missing_comments(scoring)
        self.assertNotIn("woman_entrepreneurship", missing)
        self.assertIn("quality_factor", missing)

    def test_validate_maxima(self):
        self.assertEqual(self.aggregator.validate_maxima(self.maxima), [])
        warnings = self.aggregator.validate_maxima({"quality_factor": 15, "disabled": 2})
        self.assertEqual(len(warnings), 2)

    def test_allowed_maxima_cover_all_criteria(self):
        self.assertEqual(set(ALLOWED_MAXIMA), set(CRITERIA))
        self.assertEqual(ALLOWED_MAXIMA["quality_factor"], (0, 10, 19, 20))


if __name__ == "__main__":
    unittest.main(verbosity=2)
